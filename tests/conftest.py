"""전역 테스트 설정

역할:
- 테스트 환경 구성
- 공통 상품 픽스처 제공
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest


# 프로젝트 루트를 경로에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from catalog_search.schemas.product_schema import CatalogProduct, SearchableProduct  # noqa: E402
from fixtures import PRODUCTS  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def test_env() -> None:
    """테스트 환경 변수 설정 (세션 전역)"""
    os.environ["ENVIRONMENT"] = "test"
    os.environ["LOG_LEVEL"] = "INFO"


@pytest.fixture
def oak_table() -> SearchableProduct:
    """색상 white/black, 태그/카테고리 있는 상품"""
    return SearchableProduct.model_validate(PRODUCTS["oak_table"])


@pytest.fixture
def greek_lamp() -> SearchableProduct:
    """그리스어 필드 위주 상품 (영문 설명/태그 없음)"""
    return SearchableProduct.model_validate(PRODUCTS["greek_lamp"])


@pytest.fixture
def catalog_products() -> list[CatalogProduct]:
    return [
        CatalogProduct.model_validate({**PRODUCTS["oak_table"], "slug": "oak-table"}),
        CatalogProduct.model_validate({**PRODUCTS["greek_lamp"], "slug": "greek-lamp"}),
    ]
