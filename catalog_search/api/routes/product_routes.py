"""Product Routes - HTTP 요청을 CatalogSearchService로 위임하는 Translator"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from catalog_search.api.routes.dependencies import get_catalog_service
from catalog_search.core.exceptions import ProductNotFoundException, ValidationException
from catalog_search.core.logging import logger
from catalog_search.schemas.product_schema import MatchDebugResponse, ProductSearchResponse
from catalog_search.services.impl.catalog_service import CatalogSearchService
from catalog_search.services.product_search import search_product

router = APIRouter(prefix="/api/v1/products", tags=["products"])


@router.get("/search", response_model=ProductSearchResponse)
async def search_products(
    q: str = Query("", description="검색어 (비어 있으면 전체)"),
    limit: Optional[int] = Query(None, description="최대 반환 개수"),
    category: Optional[str] = Query(None, description="카테고리 필터"),
    service: CatalogSearchService = Depends(get_catalog_service),
):
    """상품 검색 API

    Flow:
        1. 입력 검증 (길이/limit)
        2. 카탈로그 필터 (search_product)
        3. 결과를 HTTP Response로 변환
    """
    try:
        result = service.search(q, limit=limit, category=category)
    except ValidationException as e:
        logger.warning(f"[API] Input validation failed: {e}")
        return ProductSearchResponse(
            status="error",
            query=q,
            message=f"입력 검증 실패: {e.message}",
            error_code=e.error_code,
        )

    logger.info(f"[API] Product search: query length {len(q)}, matched {result.total}")

    return ProductSearchResponse(
        status="success",
        query=result.query,
        normalized_query=result.normalized_query,
        total=result.total,
        data=result.products,
        message="검색 완료" if result.total else "일치하는 상품이 없습니다",
    )


@router.get("/{slug}/matches", response_model=MatchDebugResponse)
async def product_matches(
    slug: str,
    q: str = Query("", description="검색어"),
    service: CatalogSearchService = Depends(get_catalog_service),
):
    """상품 1개에 대해 어떤 필드가 검색어와 일치했는지 (디버그용)"""
    try:
        matches = service.explain(slug, q)
        product = service.get_product(slug)
    except ProductNotFoundException as e:
        raise HTTPException(status_code=404, detail=e.message)
    except ValidationException as e:
        raise HTTPException(status_code=422, detail=e.message)

    return MatchDebugResponse(
        status="success",
        slug=slug,
        query=q,
        matched=search_product(product, q),
        matches=matches,
    )
