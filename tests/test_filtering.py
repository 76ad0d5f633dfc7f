"""
Unit tests for exact/substring product filtering.
"""
from storefront.search.filtering import filter_by_category, filter_products
from tests.conftest import COFFEE, TEA, make_product, titles


class TestExactPrecedence:
    """Exact title matches pre-empt substring matches."""

    def test_exact_match_only(self):
        catalog = [make_product("Tea"), make_product("Iced Tea"), make_product("Green Tea")]
        assert titles(filter_products(catalog, "tea")) == ["Tea"]

    def test_exact_match_case_insensitive(self):
        catalog = [make_product("Iced Tea"), make_product("ICED TEA", id="dup")]
        assert titles(filter_products(catalog, "iced tea")) == ["Iced Tea", "ICED TEA"]

    def test_substring_fallback_preserves_order(self):
        catalog = [make_product("Iced Tea"), make_product("Green Tea"), make_product("Coffee")]
        assert titles(filter_products(catalog, "tea")) == ["Iced Tea", "Green Tea"]

    def test_no_match(self):
        catalog = [make_product("Iced Tea"), make_product("Coffee")]
        assert filter_products(catalog, "juice") == []


class TestCategoryNarrowing:

    def test_category_applied_before_text(self, drinks):
        result = filter_products(drinks, "a", "coffee")
        assert titles(result) == ["Latte", "Mocha"]

    def test_exact_match_outside_category_ignored(self):
        catalog = [make_product("Tea", TEA), make_product("Tea Latte", COFFEE)]
        assert titles(filter_products(catalog, "tea", "coffee")) == ["Tea Latte"]

    def test_product_without_category_never_matches(self, drinks):
        result = filter_by_category(drinks, "coffee")
        assert "Late Fee" not in titles(result)

    def test_empty_category_id_keeps_everything(self, drinks):
        assert filter_by_category(drinks, "") == drinks
        assert filter_by_category(drinks, None) == drinks


class TestEmptyQuery:

    def test_empty_query_returns_all(self, drinks):
        assert filter_products(drinks, "") == drinks

    def test_empty_query_with_category(self, drinks):
        assert titles(filter_products(drinks, "", "tea")) == ["Tea", "Iced Tea", "Green Tea"]


class TestFilterProperties:

    def test_input_not_mutated(self, drinks):
        before = list(drinks)
        result = filter_products(drinks, "")
        assert result is not drinks
        result.clear()
        assert drinks == before

    def test_idempotent(self, drinks):
        for query, category in [("tea", None), ("a", "coffee"), ("", "tea"), ("ea", None), ("zzz", None)]:
            once = filter_products(drinks, query, category)
            assert filter_products(once, query, category) == once

    def test_deterministic(self, drinks):
        assert filter_products(drinks, "te") == filter_products(drinks, "te")
