"""검색어 매칭 유닛 테스트"""
import pytest

from catalog_search.utils.text import matches_search, matches_search_array
from catalog_search.utils.text.matching import matching
from catalog_search.utils.text.matching import token_matches


class TestTokenMatches:
    """토큰 1:1 매칭 규칙"""

    def test_exact(self):
        assert token_matches("co", "co") is True

    def test_prefix_requires_three_chars(self):
        """접두 일치는 검색 토큰 3자 이상"""
        assert token_matches("cor", "corian") is True
        assert token_matches("co", "corian") is False

    def test_infix_requires_four_chars(self):
        """중간 포함은 검색 토큰 4자 이상"""
        assert token_matches("rian", "corian") is True
        assert token_matches("ria", "corian") is False


class TestMatchesSearch:
    """matches_search 테스트"""

    @pytest.mark.parametrize(
        "search_term, target",
        [("", "anything"), (None, "anything"), ("ab", ""), ("ab", None), ("a", "anything"), (" a ", "a a a")],
    )
    def test_fails_closed(self, search_term, target):
        """빈 입력/2자 미만 검색어 → False"""
        assert matches_search(search_term, target) is False

    def test_all_tokens_required_any_order(self):
        """모든 토큰이 있어야 하며 순서 무관"""
        assert matches_search("White LED", "LED White Panel") is True
        assert matches_search("White LED", "White Panel") is False

    def test_prefix_match(self):
        assert matches_search("cori", "corian surface") is True
        assert matches_search("cori surf", "corian surface") is True

    def test_short_prefix_rejected_in_token_path(self):
        """토큰 경로에서 2자 접두는 일치하지 않음"""
        assert matches_search("co surf", "corian surface") is False

    def test_short_term_still_matches_as_substring(self):
        """부분 문자열 전략이 먼저 적용됨"""
        assert matches_search("co", "corian surface") is True

    def test_infix_match(self):
        assert matches_search("rian face", "corian surface") is True
        assert matches_search("ian face", "corian surface") is False

    def test_accent_and_case_insensitive(self):
        """그리스어 악센트/대소문자 무시"""
        assert matches_search("ΤΡΑΠΕΖΙ", "Τραπέζι Δρυς") is True
        assert matches_search("λευκος", "Λευκό / Μαύρο") is False
        assert matches_search("λευκο", "Λευκό / Μαύρο") is True

    def test_separators_in_target(self):
        assert matches_search("led light", "white/led-light, panel") is True

    def test_fail_fast_per_token(self, monkeypatch):
        """검색 토큰 하나라도 실패하면 나머지 토큰은 검사하지 않음"""
        calls = []
        original = matching.token_matches

        def counting(search_token, target_token):
            calls.append((search_token, target_token))
            return original(search_token, target_token)

        monkeypatch.setattr(matching, "token_matches", counting)

        assert matches_search("zzz white", "white panel") is False
        assert calls == [("zzz", "white"), ("zzz", "panel")]


class TestMatchesSearchArray:
    """matches_search_array 테스트"""

    def test_any_item(self):
        assert matches_search_array("white", ["black", "white"]) is True
        assert matches_search_array("white", ["black", "grey"]) is False

    def test_empty(self):
        assert matches_search_array("white", []) is False
        assert matches_search_array("white", None) is False
        assert matches_search_array("", ["white"]) is False
        assert matches_search_array(None, ["white"]) is False
