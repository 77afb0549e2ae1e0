"""Services implementation package."""

from .catalog_service import CatalogSearchResult, CatalogSearchService

__all__ = ["CatalogSearchResult", "CatalogSearchService"]
