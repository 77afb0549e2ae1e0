"""API 엔드포인트 패키지 - export only."""

from .routes import category_router, get_catalog_service, health_router, product_router

__all__ = ["health_router", "product_router", "category_router", "get_catalog_service"]
