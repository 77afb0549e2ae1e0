"""Matching package."""

from .matching import (
    MIN_INFIX_LENGTH,
    MIN_PREFIX_LENGTH,
    MIN_SEARCH_LENGTH,
    matches_search,
    matches_search_array,
    token_matches,
)

__all__ = [
    "MIN_SEARCH_LENGTH",
    "MIN_PREFIX_LENGTH",
    "MIN_INFIX_LENGTH",
    "matches_search",
    "matches_search_array",
    "token_matches",
]
