"""검색어/상품 텍스트 정규화 (악센트 제거 + 그리스 문자 폴딩)."""

from __future__ import annotations

import re
import unicodedata
from typing import Optional


# 조합용 발음 구별 기호 (Combining Diacritical Marks)
_COMBINING_MARKS_RE = re.compile("[\u0300-\u036f]")
_SLASHES_RE = re.compile(r"[/\\]")
_WHITESPACE_RE = re.compile(r"\s+")

# 그리스 문자 폴딩 테이블 (순서 유지, 1글자 → 1글자)
# 새 문자/언어는 여기에 항목만 추가합니다.
# NOTE: NFD 분해 + 결합 기호 제거가 먼저 실행되므로 악센트 모음 항목은 실제로 매칭되지 않고,
#       분해되지 않는 어말 시그마(ς)만 이 테이블에서 변환됩니다.
GREEK_LETTER_FOLDS: dict[str, str] = {
    "ά": "α",
    "έ": "ε",
    "ή": "η",
    "ί": "ι",
    "ό": "ο",
    "ύ": "υ",
    "ώ": "ω",
    "ΐ": "ι",
    "ΰ": "υ",
    "ς": "σ",  # 어말 시그마 → 일반 시그마
}


def _fold_letters(text: str) -> str:
    for source, target in GREEK_LETTER_FOLDS.items():
        text = text.replace(source, target)
    return text


def normalize_search_text(text: Optional[str]) -> str:
    """검색 비교용 텍스트 정규화.

    파이프라인 (순서 중요):
    1. 소문자화
    2. 앞뒤 공백 제거
    3. NFD 분해 후 결합 기호(U+0300–U+036F) 제거 → 모든 문자권의 악센트 제거
    4. GREEK_LETTER_FOLDS 적용 (어말 시그마 등)
    5. 슬래시(/, \\) → 공백
    6. 연속 공백 → 단일 공백

    예시:
    - "ΆΒΓ" -> "αβγ"
    - "Λευκός / Μαύρος" -> "λευκοσ μαυροσ"

    Args:
        text: 원본 텍스트 (None 허용)

    Returns:
        정규화된 문자열. 빈 입력은 "".
    """
    if not text:
        return ""

    normalized = text.lower().strip()
    normalized = unicodedata.normalize("NFD", normalized)
    normalized = _COMBINING_MARKS_RE.sub("", normalized)
    normalized = _fold_letters(normalized)
    normalized = _SLASHES_RE.sub(" ", normalized)
    normalized = _WHITESPACE_RE.sub(" ", normalized)

    # 슬래시가 끝에 있던 경우("led/")에도 재정규화 결과가 같도록 한 번 더 정리
    return normalized.strip()
