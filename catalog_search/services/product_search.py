"""상품 필터 - 여러 필드에 대해 검색어 매칭 (필드 간 OR)"""
from __future__ import annotations

from typing import Optional

from catalog_search.schemas.product_schema import SearchableProduct
from catalog_search.utils.text import matches_search, matches_search_array, normalize_search_text
from catalog_search.utils.text.matching import MIN_SEARCH_LENGTH


def search_product(product: Optional[SearchableProduct], search_term: Optional[str]) -> bool:
    """상품이 검색어와 일치하는지 (여러 필드 검사).

    경계 정책 (순서대로):
    - 빈 검색어(공백만 포함) → True: 필터 없음, 전체 노출
    - 상품 없음 → False
    - 정규화 후 2자 미만 → False: 무효 검색어는 전체 숨김
    - 그 외: 이름 → 영문명 → 설명 → 영문 설명 → 색상 → 소재 → 특징 → 태그 → 카테고리 → 하위 카테고리
      순으로 검사하고 처음 일치한 필드에서 종료
    """
    if not search_term or not search_term.strip():
        return True

    if product is None:
        return False

    if len(normalize_search_text(search_term)) < MIN_SEARCH_LENGTH:
        return False

    # 이름 (기본 언어/영문)
    if matches_search(search_term, product.name):
        return True
    if matches_search(search_term, product.name_en):
        return True

    # 설명
    if matches_search(search_term, product.description):
        return True
    if product.description_en and matches_search(search_term, product.description_en):
        return True

    # 색상/소재/특징
    if matches_search_array(search_term, product.colors):
        return True
    if matches_search_array(search_term, product.materials):
        return True
    if matches_search_array(search_term, product.features):
        return True

    # 태그/카테고리
    if product.tags and matches_search_array(search_term, product.tags):
        return True
    if product.category and matches_search(search_term, product.category):
        return True
    if product.subcategory and matches_search(search_term, product.subcategory):
        return True

    return False


def debug_search(product: Optional[SearchableProduct], search_term: Optional[str]) -> list[str]:
    """어떤 필드가 일치했는지 확인용 (필터링에는 사용하지 않음).

    search_product와 달리 중간에 멈추지 않고 모든 필드를 검사합니다.

    예시: ["Name: Λευκό Τραπέζι", "Color: white"]
    """
    if product is None:
        return []

    matches: list[str] = []

    if matches_search(search_term, product.name):
        matches.append(f"Name: {product.name}")
    if matches_search(search_term, product.name_en):
        matches.append(f"Name EN: {product.name_en}")
    if matches_search(search_term, product.description):
        matches.append("Description")
    if matches_search(search_term, product.description_en):
        matches.append("Description EN")

    for color in product.colors:
        if matches_search(search_term, color):
            matches.append(f"Color: {color}")

    for material in product.materials:
        if matches_search(search_term, material):
            matches.append(f"Material: {material}")

    for feature in product.features:
        if matches_search(search_term, feature):
            matches.append(f"Feature: {feature}")

    for tag in product.tags or ():
        if matches_search(search_term, tag):
            matches.append(f"Tag: {tag}")

    if matches_search(search_term, product.category):
        matches.append(f"Category: {product.category}")
    if matches_search(search_term, product.subcategory):
        matches.append(f"Subcategory: {product.subcategory}")

    return matches
