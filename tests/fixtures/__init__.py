"""테스트 자산(데이터) 레이어

규칙:
- 로직 없음 (단순 dict/list/primitive)
"""

from .products import PRODUCTS

__all__ = [
    "PRODUCTS",
]
