"""Pydantic 스키마 정의 (상품/카테고리 row + API 응답)"""
from typing import Any, Optional
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from datetime import datetime


class SearchableProduct(BaseModel):
    """검색 대상 상품 (불변)

    - DB row 키(name_en)와 클라이언트 키(nameEn) 모두 허용
    - 그 외 키(slug, 가격 등)는 무시
    """
    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = Field(..., description="상품명 (기본 언어)")
    name_en: str = Field("", validation_alias=AliasChoices("name_en", "nameEn"), description="상품명 (영문)")
    description: str = Field("", description="설명 (기본 언어)")
    description_en: Optional[str] = Field(
        None, validation_alias=AliasChoices("description_en", "descriptionEn"), description="설명 (영문)"
    )
    colors: tuple[str, ...] = Field((), description="색상")
    materials: tuple[str, ...] = Field((), description="소재")
    features: tuple[str, ...] = Field((), description="특징")
    tags: Optional[tuple[str, ...]] = Field(None, description="태그")
    category: Optional[str] = Field(None, description="카테고리")
    subcategory: Optional[str] = Field(None, description="하위 카테고리")

    @field_validator("name_en", "description", mode="before")
    @classmethod
    def _none_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("colors", "materials", "features", mode="before")
    @classmethod
    def _none_to_empty_labels(cls, v: Any) -> Any:
        """NULL 배열 컬럼은 빈 목록으로 취급"""
        return () if v is None else v


class CatalogProduct(SearchableProduct):
    """products 테이블 row 전체 (카탈로그 응답용)"""

    id: Optional[str] = Field(None, description="상품 ID (UUID)")
    slug: str = Field(..., min_length=1, description="URL slug")
    base_price: float = Field(
        0, ge=0, validation_alias=AliasChoices("base_price", "basePrice"), description="정가"
    )
    sale_price: Optional[float] = Field(
        None, ge=0, validation_alias=AliasChoices("sale_price", "salePrice"), description="할인가"
    )
    images: tuple[Any, ...] = Field((), description="이미지 목록 (JSONB)")
    in_stock: bool = Field(True, validation_alias=AliasChoices("in_stock", "inStock"), description="재고 여부")
    featured: bool = Field(False, description="추천 상품 여부")
    best_seller: bool = Field(
        False, validation_alias=AliasChoices("best_seller", "bestSeller"), description="베스트셀러 여부"
    )

    @property
    def effective_price(self) -> float:
        """할인가가 있으면 할인가, 없으면 정가"""
        if self.sale_price is not None:
            return self.sale_price
        return self.base_price


class Category(BaseModel):
    """categories 테이블 row"""
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: Optional[str] = Field(None, description="카테고리 ID (UUID)")
    name: str = Field(..., description="카테고리명 (기본 언어)")
    name_en: str = Field("", validation_alias=AliasChoices("name_en", "nameEn"), description="카테고리명 (영문)")
    slug: str = Field(..., min_length=1, description="URL slug")
    description: Optional[str] = Field(None, description="설명")
    image: Optional[str] = Field(None, description="대표 이미지")
    product_count: int = Field(
        0, ge=0, validation_alias=AliasChoices("product_count", "productCount"), description="상품 수"
    )


class ProductSearchResponse(BaseModel):
    """상품 검색 응답"""
    status: str = Field(..., description="success or error")
    query: str = Field("", description="요청 검색어")
    normalized_query: str = Field("", description="정규화된 검색어")
    total: int = Field(0, ge=0, description="일치한 상품 수 (limit 적용 전)")
    data: list[CatalogProduct] = Field(default_factory=list, description="일치한 상품")
    message: str = Field("", description="응답 메시지")
    error_code: str | None = Field(None, description="에러 코드 (error 시)")


class MatchDebugResponse(BaseModel):
    """상품 1개에 대한 필드별 매칭 결과"""
    status: str
    slug: str
    query: str
    matched: bool = Field(..., description="search_product 결과")
    matches: list[str] = Field(default_factory=list, description="일치한 필드 라벨")


class CategorySearchResponse(BaseModel):
    """카테고리 검색 응답"""
    status: str
    query: str = ""
    total: int = 0
    data: list[Category] = Field(default_factory=list)


class HealthResponse(BaseModel):
    """헬스 체크 응답"""
    status: str
    timestamp: datetime
    version: str
    products: int = Field(0, ge=0, description="로드된 상품 수")
