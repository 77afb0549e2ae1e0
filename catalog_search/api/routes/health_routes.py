"""헬스 체크 엔드포인트"""
from fastapi import APIRouter
from datetime import datetime

from catalog_search import __version__
from catalog_search.api.routes.dependencies import get_catalog_service
from catalog_search.core.exceptions import CatalogException
from catalog_search.core.logging import logger
from catalog_search.schemas.product_schema import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    헬스 체크 엔드포인트

    - 서버 상태
    - 카탈로그 로딩 상태
    """
    try:
        products = len(get_catalog_service().products)
        status = "ok" if products else "degraded"
    except CatalogException as e:
        logger.warning(f"Catalog unavailable: {e.error_code}")
        products = 0
        status = "error"

    return HealthResponse(
        status=status,
        timestamp=datetime.now(),
        version=__version__,
        products=products,
    )


@router.get("/")
async def root():
    """루트 엔드포인트"""
    return {
        "service": "상품 카탈로그 검색 서비스",
        "version": __version__,
        "docs": "/docs"
    }
