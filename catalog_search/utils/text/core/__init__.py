"""Core text processing (tokenization)."""

from .tokenize import MIN_TOKEN_LENGTH, tokenize

__all__ = [
    "MIN_TOKEN_LENGTH",
    "tokenize",
]
