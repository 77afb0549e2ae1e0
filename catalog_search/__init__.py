"""상품 카탈로그 검색 패키지"""

__version__ = "1.0.0"
