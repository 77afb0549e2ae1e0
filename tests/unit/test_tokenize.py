"""토큰화 유닛 테스트"""
from catalog_search.utils.text import tokenize


class TestTokenize:
    """tokenize 테스트"""

    def test_separators_consumed(self):
        """공백/하이픈/슬래시/쉼표 분리"""
        assert tokenize("white/led-light, panel") == ["white", "led", "light", "panel"]

    def test_short_tokens_dropped(self):
        """2자 미만 토큰 제거"""
        assert tokenize("a b") == []
        assert tokenize("a bc d") == ["bc"]

    def test_empty_input(self):
        assert tokenize("") == []
        assert tokenize(None) == []
        assert tokenize(" - , / ") == []

    def test_order_and_duplicates_kept(self):
        """순서 유지, 중복 유지"""
        assert tokenize("LED panel led") == ["led", "panel", "led"]

    def test_greek_tokens_normalized(self):
        """그리스어 악센트/어말 시그마 정규화 후 분리"""
        assert tokenize("Λευκό-Μαύρος") == ["λευκο", "μαυροσ"]

    def test_backslash_splits_via_normalization(self):
        assert tokenize("oak\\walnut") == ["oak", "walnut"]
