"""상품 테스트 자산

- 단순 dict만 보관 (row 형태)
- pytest fixture 선언하지 않음
"""

PRODUCTS = {
    "oak_table": {
        "name": "Τραπέζι Δρυς",
        "name_en": "Oak Dining Table",
        "description": "Μασίφ ξύλο, φυσικό φινίρισμα.",
        "description_en": "Solid wood with a natural finish.",
        "colors": ["white", "black"],
        "materials": ["Δρυς", "oak veneer"],
        "features": ["Extendable", "Scratch-resistant coating"],
        "tags": ["dining", "τραπεζαρία"],
        "category": "furniture",
        "subcategory": "tables",
    },
    "greek_lamp": {
        "name": "Φωτιστικό Δαπέδου Αθηνά",
        "nameEn": "Athena Floor Lamp",
        "description": "Μεταλλικό φωτιστικό με υφασμάτινο καπέλο.",
        "colors": ["Χρυσό"],
        "materials": ["Μέταλλο", "Λινό"],
        "features": ["Ροοστάτης"],
    },
}
