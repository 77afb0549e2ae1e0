"""Category Routes"""
from fastapi import APIRouter, Depends, HTTPException, Query

from catalog_search.api.routes.dependencies import get_catalog_service
from catalog_search.core.exceptions import ValidationException
from catalog_search.schemas.product_schema import CategorySearchResponse
from catalog_search.services.impl.catalog_service import CatalogSearchService

router = APIRouter(prefix="/api/v1/categories", tags=["categories"])


@router.get("/search", response_model=CategorySearchResponse)
async def search_categories(
    q: str = Query("", description="검색어 (비어 있으면 전체)"),
    service: CatalogSearchService = Depends(get_catalog_service),
):
    """카테고리 검색 API"""
    try:
        categories = service.search_categories(q)
    except ValidationException as e:
        raise HTTPException(status_code=422, detail=e.message)

    return CategorySearchResponse(status="success", query=q, total=len(categories), data=categories)
