"""검색어 ↔ 텍스트 매칭 helpers."""

from __future__ import annotations

from typing import Iterable, Optional

from catalog_search.core.logging import logger

from ..core.tokenize import tokenize
from ..normalization.normalize import normalize_search_text


# 정규화된 검색어 최소 길이
MIN_SEARCH_LENGTH = 2
# 접두 일치 허용 최소 토큰 길이 ("cori" → "corian")
MIN_PREFIX_LENGTH = 3
# 중간 포함 일치 허용 최소 토큰 길이 (복합어)
MIN_INFIX_LENGTH = 4


def token_matches(search_token: str, target_token: str) -> bool:
    """검색 토큰 1개가 대상 토큰 1개와 일치하는지.

    - 완전 일치
    - 접두 일치: 검색 토큰 3자 이상
    - 중간 포함: 검색 토큰 4자 이상
    """
    if target_token == search_token:
        return True
    if len(search_token) >= MIN_PREFIX_LENGTH and target_token.startswith(search_token):
        return True
    if len(search_token) >= MIN_INFIX_LENGTH and search_token in target_token:
        return True
    return False


def matches_search(search_term: Optional[str], target_text: Optional[str]) -> bool:
    """검색어가 대상 텍스트와 일치하는지 (STRICT: 일치하지 않으면 False).

    전략 (먼저 성공한 쪽에서 종료):
    1. 정규화된 부분 문자열 일치
    2. 토큰 매칭: 모든 검색 토큰이 대상 토큰 중 하나와 일치해야 함 (AND)
       - "White LED"는 white와 led 둘 다 있어야 일치

    Args:
        search_term: 사용자 검색어
        target_text: 비교 대상 텍스트 (상품명, 설명 등)

    Returns:
        일치 여부
    """
    if not search_term or not target_text:
        return False

    normalized_search = normalize_search_text(search_term)
    if len(normalized_search) < MIN_SEARCH_LENGTH:
        return False

    # 전략 1: 부분 문자열
    if normalized_search in normalize_search_text(target_text):
        return True

    # 전략 2: 토큰 매칭
    search_tokens = tokenize(search_term)
    if not search_tokens:
        return False

    target_tokens = tokenize(target_text)
    if not target_tokens:
        return False

    for search_token in search_tokens:
        if not any(token_matches(search_token, target_token) for target_token in target_tokens):
            logger.debug(f"[match] token '{search_token}' not found in {len(target_tokens)} target tokens")
            return False

    return True


def matches_search_array(search_term: Optional[str], items: Optional[Iterable[str]]) -> bool:
    """항목 중 하나라도 검색어와 일치하면 True."""
    if not search_term or not items:
        return False

    return any(matches_search(search_term, item) for item in items)
