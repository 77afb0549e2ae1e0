"""라우트 공용 의존성"""
from typing import Optional

from catalog_search.services.impl.catalog_service import CatalogSearchService

# 싱글톤 서비스
_catalog_service: Optional[CatalogSearchService] = None


def get_catalog_service() -> CatalogSearchService:
    """CatalogSearchService 싱글톤 (첫 요청 시 YAML 리소스 로드)"""
    global _catalog_service
    if _catalog_service is None:
        _catalog_service = CatalogSearchService.from_resources()
    return _catalog_service
