"""리소스 파일(YAML) 로더 유틸리티"""
import os
import yaml
from typing import Any, Dict
from functools import lru_cache

from catalog_search.core.config import settings
from catalog_search.core.exceptions import CatalogLoadException
from catalog_search.core.logging import logger


def get_resource_path(relative_path: str) -> str:
    """프로젝트 루트 기준 리소스 절대 경로 반환"""
    # catalog_search/utils/resource_loader.py -> catalog_search/utils -> catalog_search -> root
    base_dir = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
    return os.path.join(base_dir, "resources", relative_path)


@lru_cache(maxsize=32)
def load_yaml_resource(relative_path: str) -> Dict[str, Any]:
    """YAML 리소스 로드 및 캐싱

    - 파일 없음: 경고 후 빈 dict
    - 파싱 실패/최상위가 mapping이 아님: CatalogLoadException
    """
    path = get_resource_path(relative_path)
    if not os.path.exists(path):
        logger.warning(f"Resource not found: {path}")
        return {}

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.error(f"Failed to load YAML resource {path}: {e}")
        raise CatalogLoadException(relative_path, str(e)) from e

    if not isinstance(data, dict):
        raise CatalogLoadException(relative_path, f"expected mapping, got {type(data).__name__}")
    return data


def _load_records(relative_path: str, key: str) -> list[Dict[str, Any]]:
    data = load_yaml_resource(relative_path)
    records = data.get(key, [])
    if not isinstance(records, list):
        raise CatalogLoadException(relative_path, f"'{key}' must be a list")
    return records


def load_catalog_products(relative_path: str | None = None) -> list[Dict[str, Any]]:
    """상품 row 목록 로드 (products 테이블 row 형태)"""
    return _load_records(relative_path or settings.catalog_resource, "products")


def load_catalog_categories(relative_path: str | None = None) -> list[Dict[str, Any]]:
    """카테고리 row 목록 로드 (categories 테이블 row 형태)"""
    return _load_records(relative_path or settings.category_resource, "categories")
