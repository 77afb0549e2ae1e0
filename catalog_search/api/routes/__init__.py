"""API routes package."""

from .dependencies import get_catalog_service
from .health_routes import router as health_router
from .product_routes import router as product_router
from .category_routes import router as category_router

__all__ = ["health_router", "product_router", "category_router", "get_catalog_service"]
