"""리소스 로더 유닛 테스트"""
import pytest

from catalog_search.core.exceptions import CatalogLoadException
from catalog_search.utils import resource_loader
from catalog_search.utils.resource_loader import (
    load_catalog_categories,
    load_catalog_products,
    load_yaml_resource,
)


@pytest.fixture
def tmp_resources(tmp_path, monkeypatch):
    """resources/ 대신 임시 디렉터리 사용"""
    monkeypatch.setattr(resource_loader, "get_resource_path", lambda relative: str(tmp_path / relative))
    load_yaml_resource.cache_clear()
    yield tmp_path
    load_yaml_resource.cache_clear()


class TestLoadYamlResource:
    """load_yaml_resource 테스트"""

    def test_missing_file(self, tmp_resources):
        assert load_yaml_resource("nope.yaml") == {}

    def test_non_mapping_top_level(self, tmp_resources):
        (tmp_resources / "list.yaml").write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(CatalogLoadException):
            load_yaml_resource("list.yaml")

    def test_broken_yaml(self, tmp_resources):
        (tmp_resources / "broken.yaml").write_text("products: [unclosed\n", encoding="utf-8")
        with pytest.raises(CatalogLoadException):
            load_yaml_resource("broken.yaml")

    def test_products_must_be_list(self, tmp_resources):
        (tmp_resources / "products.yaml").write_text("products: {a: 1}\n", encoding="utf-8")
        with pytest.raises(CatalogLoadException):
            load_catalog_products("products.yaml")


def test_bundled_catalog_rows():
    """기본 리소스 (resources/catalog)"""
    products = load_catalog_products()
    categories = load_catalog_categories()
    assert {row["slug"] for row in products} >= {"corian-kitchen-countertop", "oslo-dining-chair"}
    assert [row["slug"] for row in categories] == ["kitchen", "lighting", "furniture", "bathroom"]
