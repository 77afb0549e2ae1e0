"""설정 관리 - 환경 변수 로드 및 검증"""
from pydantic_settings import BaseSettings
from pydantic import field_validator, model_validator


class Settings(BaseSettings):
    """애플리케이션 설정"""

    # 카탈로그 리소스 (resources/ 기준 상대 경로)
    catalog_resource: str = "catalog/products.yaml"
    category_resource: str = "catalog/categories.yaml"

    # 검색
    # NOTE: 최소 검색어 길이(2자) 등 매칭 임계값은 동작 계약이므로 설정으로 노출하지 않습니다.
    search_max_query_length: int = 200
    search_default_limit: int = 50
    search_max_limit: int = 200

    # API
    api_title: str = "상품 카탈로그 검색 서비스"
    api_version: str = "1.0.0"
    api_description: str = "악센트/토큰 기반 부분 일치로 상품 카탈로그를 필터링합니다."

    # 로깅
    log_level: str = "INFO"

    @field_validator("search_max_query_length", "search_default_limit", "search_max_limit")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("search limits must be positive")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = (v or "").upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unsupported log_level: {v}")
        return level

    @model_validator(mode="after")
    def validate_limit_range(self) -> "Settings":
        if self.search_default_limit > self.search_max_limit:
            raise ValueError("search_default_limit must be <= search_max_limit")
        return self

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
