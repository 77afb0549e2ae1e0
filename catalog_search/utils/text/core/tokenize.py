"""Tokenization utilities for matching."""

from __future__ import annotations

import re
from typing import Optional

from ..normalization.normalize import normalize_search_text


MIN_TOKEN_LENGTH = 2

# 공백, 하이픈, 슬래시, 쉼표
_TOKEN_SEPARATORS_RE = re.compile(r"[\s\-/,]+")


def tokenize(text: Optional[str]) -> list[str]:
    """검색/매칭용 토큰화.

    - 정규화(normalize_search_text) 후 구분자로 분리
    - 2자 미만 토큰 제거
    - 등장 순서 유지, 중복 유지

    예시:
    - "white/led-light, panel" -> ["white", "led", "light", "panel"]
    - "a b" -> []
    """
    normalized = normalize_search_text(text)
    if not normalized:
        return []

    return [
        token
        for token in _TOKEN_SEPARATORS_RE.split(normalized)
        if len(token) >= MIN_TOKEN_LENGTH
    ]
