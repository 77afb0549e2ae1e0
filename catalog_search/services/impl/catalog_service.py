"""카탈로그 검색 서비스 - 메모리 카탈로그에 상품 필터 적용"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Optional

from pydantic import ValidationError

from catalog_search.core.config import settings
from catalog_search.core.exceptions import (
    CatalogLoadException,
    InvalidLimitException,
    InvalidQueryException,
    ProductNotFoundException,
)
from catalog_search.core.logging import logger, sanitize_for_log
from catalog_search.schemas.product_schema import CatalogProduct, Category
from catalog_search.services.product_search import debug_search, search_product
from catalog_search.utils.resource_loader import load_catalog_categories, load_catalog_products
from catalog_search.utils.text import matches_search, normalize_search_text


@dataclass(frozen=True)
class CatalogSearchResult:
    """검색 결과 (카탈로그 순서 유지, 점수/정렬 없음)"""
    query: str
    normalized_query: str
    total: int
    products: list[CatalogProduct] = field(default_factory=list)


def _validate_rows(model: type, rows: list[dict[str, Any]], resource: str) -> list[Any]:
    items = []
    for index, row in enumerate(rows):
        try:
            items.append(model.model_validate(row))
        except ValidationError as e:
            raise CatalogLoadException(resource, f"invalid row #{index}: {e.error_count()} error(s)") from e
    return items


class CatalogSearchService:
    """
    카탈로그 검색 서비스 - SRP: 필터 조율만 담당

    - 매칭 판단은 search_product / matches_search
    - row 로딩은 resource_loader
    """

    def __init__(self, products: Iterable[CatalogProduct], categories: Iterable[Category] = ()):
        self.products: tuple[CatalogProduct, ...] = tuple(products)
        self.categories: tuple[Category, ...] = tuple(categories)
        self._by_slug: dict[str, CatalogProduct] = {}
        for product in self.products:
            if product.slug in self._by_slug:
                raise CatalogLoadException("products", f"duplicate slug: {product.slug}")
            self._by_slug[product.slug] = product

    @classmethod
    def from_resources(
        cls,
        product_resource: Optional[str] = None,
        category_resource: Optional[str] = None,
    ) -> "CatalogSearchService":
        """YAML 리소스에서 카탈로그 구성"""
        product_resource = product_resource or settings.catalog_resource
        category_resource = category_resource or settings.category_resource

        products = _validate_rows(CatalogProduct, load_catalog_products(product_resource), product_resource)
        categories = _validate_rows(Category, load_catalog_categories(category_resource), category_resource)

        service = cls(products, categories)
        logger.info(
            f"[Catalog] Loaded {len(service.products)} products, {len(service.categories)} categories"
        )
        return service

    def _resolve_limit(self, limit: Optional[int]) -> int:
        if limit is None:
            return settings.search_default_limit
        if limit <= 0 or limit > settings.search_max_limit:
            raise InvalidLimitException(limit, f"limit must be between 1 and {settings.search_max_limit}")
        return limit

    def _validate_query(self, search_term: Optional[str]) -> str:
        query = search_term or ""
        if len(query) > settings.search_max_query_length:
            raise InvalidQueryException(
                f"query must be at most {settings.search_max_query_length} characters"
            )
        return query

    def get_product(self, slug: str) -> CatalogProduct:
        product = self._by_slug.get(slug)
        if product is None:
            raise ProductNotFoundException(slug)
        return product

    def search(
        self,
        search_term: Optional[str],
        limit: Optional[int] = None,
        category: Optional[str] = None,
    ) -> CatalogSearchResult:
        """
        카탈로그 필터링

        1. 검색어/limit 검증
        2. category 지정 시 카테고리(정규화 후 동일) 상품만 대상
        3. search_product로 필터 (빈 검색어 = 전체)
        4. limit 적용 (total은 적용 전 개수)

        Raises:
            InvalidQueryException: 검색어가 너무 김
            InvalidLimitException: limit 범위 초과
        """
        query = self._validate_query(search_term)
        resolved_limit = self._resolve_limit(limit)

        candidates: Iterable[CatalogProduct] = self.products
        if category:
            wanted = normalize_search_text(category)
            candidates = [p for p in self.products if normalize_search_text(p.category) == wanted]

        matched = [p for p in candidates if search_product(p, query)]

        logger.debug(
            f"[Catalog] search q={sanitize_for_log(query)} category={category} "
            f"matched={len(matched)}/{len(self.products)}"
        )

        return CatalogSearchResult(
            query=query,
            normalized_query=normalize_search_text(query),
            total=len(matched),
            products=matched[:resolved_limit],
        )

    def explain(self, slug: str, search_term: Optional[str]) -> list[str]:
        """상품 1개에 대해 일치한 필드 라벨 반환 (debug_search)"""
        query = self._validate_query(search_term)
        return debug_search(self.get_product(slug), query)

    def search_categories(self, search_term: Optional[str]) -> list[Category]:
        """카테고리명(기본/영문)/slug 매칭. 빈 검색어는 전체."""
        query = self._validate_query(search_term)
        if not query.strip():
            return list(self.categories)

        return [
            c for c in self.categories
            if matches_search(query, c.name)
            or matches_search(query, c.name_en)
            or matches_search(query, c.slug)
        ]
