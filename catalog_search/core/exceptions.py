"""커스텀 예외 정의 (Structured Exception Hierarchy)

매칭 코어(normalize/tokenize/matches_search/search_product)는 예외를 던지지 않습니다.
아래 예외는 카탈로그 로딩, 서비스, API 계층에서만 사용합니다.
"""
from typing import Any, Optional


class CatalogSearchException(Exception):
    """기본 예외 클래스 - 모든 커스텀 예외의 부모"""
    def __init__(self, message: str, error_code: str = "UNKNOWN_ERROR", details: Optional[dict[str, Any]] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


# 유효성 검증 관련 예외
class ValidationException(CatalogSearchException):
    """유효성 검증 예외"""
    def __init__(self, field: str, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Validation failed for '{field}': {reason}"
        super().__init__(message, "VALIDATION_ERROR",
                        details or {"field": field, "reason": reason})


class InvalidQueryException(ValidationException):
    """유효하지 않은 검색어"""
    def __init__(self, reason: str, details: Optional[dict[str, Any]] = None):
        super().__init__("q", reason, details)


class InvalidLimitException(ValidationException):
    """유효하지 않은 limit"""
    def __init__(self, limit: Any, reason: str, details: Optional[dict[str, Any]] = None):
        super().__init__("limit", f"{reason} (value: {limit})", details)


# 카탈로그 관련 예외
class CatalogException(CatalogSearchException):
    """카탈로그 관련 예외의 기본 클래스"""
    def __init__(self, message: str, error_code: str = "CATALOG_ERROR", details: Optional[dict[str, Any]] = None):
        super().__init__(message, error_code or "CATALOG_ERROR", details)


class CatalogLoadException(CatalogException):
    """카탈로그 리소스 로딩/검증 실패"""
    def __init__(self, resource: str, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Failed to load catalog resource '{resource}': {reason}"
        super().__init__(message, "CATALOG_LOAD_ERROR",
                        details or {"resource": resource, "reason": reason})


class ProductNotFoundException(CatalogException):
    """slug에 해당하는 상품이 없을 때"""
    def __init__(self, slug: str, details: Optional[dict[str, Any]] = None):
        message = f"Product not found for slug: {slug}"
        super().__init__(message, "PRODUCT_NOT_FOUND", details or {"slug": slug})
