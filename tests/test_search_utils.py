# tests/test_search_utils.py
import copy
from collections import namedtuple

import pytest

from product_search.fuzzy import AUTOCOMPLETE_THRESHOLD, score, search, suggest
from product_search.search.search_utils import SearchUtils, entry_name
from test_utils import print_test_name, print_test_result

Product = namedtuple("Product", ["name", "sku"])


class TestRankedSearch:
    """Recherche classée sur un catalogue fourni."""

    def test_weed_keeps_only_weed_and_feed(self):
        test_name = "test_weed_keeps_only_weed_and_feed"
        print_test_name(test_name)
        try:
            catalog = [
                {"name": "Scotts Turf Builder Weed & Feed 28-0-3"},
                {"name": "Milorganite 6-4-0"},
            ]
            assert search("weed", catalog, 0.3) == [catalog[0]]
            print_test_result(test_name, passed=True)
        except Exception as e:
            print_test_result(test_name, passed=False)
            raise e

    @pytest.mark.parametrize("query", ["", "   ", "\t\n"])
    def test_blank_query_returns_catalog_unchanged(self, product_dicts, query):
        assert search(query, product_dicts) == product_dicts

    def test_returned_entries_meet_threshold(self, product_dicts):
        threshold = 0.5
        for entry in search("scots turf", product_dicts, threshold):
            assert score("scots turf", entry["name"]) >= threshold

    def test_results_sorted_by_descending_score(self, bundled_catalog):
        products = bundled_catalog.unique_products()
        results = search("scots lawn food", products, 0.0)
        scores = [score("scots lawn food", p.name) for p in results]
        assert scores == sorted(scores, reverse=True)
        assert len(results) == len(products)

    def test_exact_match_ranks_first(self):
        catalog = [{"name": "Milorganite 6-4-0"}, {"name": "Milorganite"}]
        assert [e["name"] for e in search("milorganite", catalog)] == ["Milorganite", "Milorganite 6-4-0"]

    def test_ties_keep_catalog_order(self):
        catalog = [{"name": "Scotts Halts", "id": 1}, {"name": "Scotts WinterGuard", "id": 2}]
        assert [e["id"] for e in search("scotts", catalog)] == [1, 2]
        assert [e["id"] for e in search("scotts", catalog[::-1])] == [2, 1]

    def test_threshold_above_substring_score_keeps_exact_only(self, product_dicts):
        assert search("milorganite", product_dicts, 0.95) == []
        exact = search("Milorganite 6-4-0", product_dicts, 0.95)
        assert [e["id"] for e in exact] == ["milo-1", "milo-2"]

    def test_catalog_and_entries_are_not_mutated(self, product_dicts):
        before = copy.deepcopy(product_dicts)
        results = search("lesco", product_dicts)
        assert product_dicts == before
        assert results[0] is product_dicts[4]

    def test_extra_fields_are_carried_through(self, product_dicts):
        assert search("lesco", product_dicts)[0]["rate"] == 3.1

    def test_objects_with_name_attribute(self):
        catalog = [Product("Milorganite 6-4-0", 1), Product("Lesco 24-0-11", 2)]
        assert search("lesko", catalog) == [catalog[1]]

    def test_empty_catalog(self):
        assert search("milorganite", []) == []

    def test_entry_without_name_is_a_caller_error(self):
        with pytest.raises(KeyError):
            search("lawn", [{"title": "Milorganite"}])
        with pytest.raises(AttributeError):
            search("lawn", [object()])

    def test_entry_name(self):
        assert entry_name({"name": "Lesco"}) == "Lesco"
        assert entry_name(Product("Lesco", 1)) == "Lesco"


class TestAutocomplete:
    """Suggestions d'autocomplétion."""

    def test_duplicates_collapse_and_threshold_filters(self):
        test_name = "test_duplicates_collapse_and_threshold_filters"
        print_test_name(test_name)
        try:
            catalog = [
                {"name": "Milorganite 6-4-0"},
                {"name": "Milorganite 6-4-0"},
                {"name": "Scotts Turf Builder Lawn Food 32-0-4"},
            ]
            assert suggest("mi", catalog, 5) == ["Milorganite 6-4-0"]
            print_test_result(test_name, passed=True)
        except Exception as e:
            print_test_result(test_name, passed=False)
            raise e

    @pytest.mark.parametrize("query", ["", "m", "  m  ", "   "])
    def test_requires_two_characters(self, product_dicts, query):
        assert suggest(query, product_dicts) == []

    def test_two_characters_can_match(self, product_dicts):
        assert suggest("mi", product_dicts) == ["Milorganite 6-4-0"]
        assert suggest("ES", product_dicts) == ["Lesco 24-0-11 Professional Fertilizer"]

    def test_limit_keeps_ranked_order(self, bundled_catalog):
        products = bundled_catalog.unique_products()
        assert suggest("Sc", products) == [
            "Scotts Turf Builder Lawn Food 32-0-4",
            "Scotts Turf Builder Weed & Feed 28-0-3",
            "Lesco 24-0-11 Professional Fertilizer",
            "Scotts Halts Crabgrass Preventer 0-0-7",
            "Scotts SummerGuard Lawn Food + Insect 28-0-8",
        ]
        assert len(suggest("Sc", products, 2)) == 2
        assert suggest("Sc", products, 0) == []

    def test_uses_stricter_threshold(self):
        utils = SearchUtils()
        # ≈ 0.33 : retenu par la recherche, pas par l'autocomplétion
        catalog = [{"name": "abcdef"}]
        assert score("abxxxx", "abcdef") < AUTOCOMPLETE_THRESHOLD
        assert utils.search("abxxxx", catalog) == catalog
        assert utils.suggest("abxxxx", catalog) == []

    def test_unique_names_keep_first_occurrence_order(self, product_dicts):
        assert SearchUtils().unique_names(product_dicts) == [
            "Scotts Turf Builder Lawn Food 32-0-4",
            "Scotts Turf Builder Weed & Feed 28-0-3",
            "Milorganite 6-4-0",
            "Lesco 24-0-11 Professional Fertilizer",
        ]
