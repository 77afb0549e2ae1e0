"""Normalization package."""

from .normalize import GREEK_LETTER_FOLDS, normalize_search_text

__all__ = [
    "GREEK_LETTER_FOLDS",
    "normalize_search_text",
]
