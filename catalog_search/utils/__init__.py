"""Utilities package"""

from .resource_loader import load_catalog_categories, load_catalog_products, load_yaml_resource
from .text import matches_search, matches_search_array, normalize_search_text, tokenize

__all__ = [
    # resources
    "load_yaml_resource",
    "load_catalog_products",
    "load_catalog_categories",
    # text
    "normalize_search_text",
    "tokenize",
    "matches_search",
    "matches_search_array",
]
