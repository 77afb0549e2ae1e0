"""비즈니스 로직 서비스 - export only."""

from .impl import CatalogSearchResult, CatalogSearchService
from .product_search import debug_search, search_product

__all__ = ["CatalogSearchResult", "CatalogSearchService", "debug_search", "search_product"]
