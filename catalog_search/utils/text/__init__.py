"""Text utilities.

Public API:
- normalization/  악센트 제거, 소문자화, 그리스 문자 폴딩
- core/           토큰화
- matching/       검색어 ↔ 텍스트 매칭
"""

from .core.tokenize import MIN_TOKEN_LENGTH, tokenize
from .matching import matches_search, matches_search_array
from .normalization import GREEK_LETTER_FOLDS, normalize_search_text

__all__ = [
    # normalization
    "GREEK_LETTER_FOLDS",
    "normalize_search_text",
    # core
    "MIN_TOKEN_LENGTH",
    "tokenize",
    # matching
    "matches_search",
    "matches_search_array",
]
