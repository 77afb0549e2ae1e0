"""Pydantic 스키마 - export only."""

from .product_schema import (
    CatalogProduct,
    Category,
    CategorySearchResponse,
    HealthResponse,
    MatchDebugResponse,
    ProductSearchResponse,
    SearchableProduct,
)

__all__ = [
    "SearchableProduct",
    "CatalogProduct",
    "Category",
    "ProductSearchResponse",
    "MatchDebugResponse",
    "CategorySearchResponse",
    "HealthResponse",
]
