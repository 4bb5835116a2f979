"""
Tests for the search orchestration: validation, fast path, fault isolation
and the response shape.
"""

import threading
from unittest.mock import Mock

import pytest

from app.search.constants import ItemKind
from app.search.scanner import SCANNERS, CatalogScanner
from app.search.schemas import SearchResponseSchema
from app.search.services import SearchResponse, SearchService, SearchState


def assert_consistent(response):
    assert response.total_results == len(response.all_results)
    assert response.total_results == (
        len(response.packages) + len(response.plugins) + len(response.categories)
    )
    scores = [item.score for item in response.all_results]
    assert scores == sorted(scores, reverse=True)
    assert all(score > 0 for score in scores)


class TestValidation:
    @pytest.mark.parametrize("query", [None, 42, ["logo"], {"q": "logo"}, b"logo"])
    def test_invalid_query_fails_without_fetching(self, query):
        fetch = Mock(return_value=[])
        service = SearchService({kind: fetch for kind in ItemKind})

        response = service.search(query)

        assert response.state is SearchState.FAILED
        assert response.error == "Missing or invalid search query"
        assert response.total_results == 0
        assert response.all_results == []
        fetch.assert_not_called()

    @pytest.mark.parametrize("query", ["", "   ", "\t\n"])
    def test_empty_query_skips_fetch(self, query):
        fetch = Mock(return_value=[])
        service = SearchService({kind: fetch for kind in ItemKind})

        response = service.search(query)

        assert response.state is SearchState.DONE
        assert response.query == ""
        assert response.error is None
        assert response.total_results == 0
        assert response.packages == response.plugins == response.categories == []
        fetch.assert_not_called()


class TestSearch:
    def test_query_is_normalized(self, fetchers):
        response = SearchService(fetchers).search("  LOGO  ")

        assert response.query == "logo"
        assert response.state is SearchState.DONE

    def test_prefix_scenario(self, fetchers):
        response = SearchService(fetchers).search("wordpress")

        booster = next(item for item in response.plugins if item.id == 10)
        assert booster.score == 80
        assert booster.to_dict()["type"] == "plugin"

    def test_substring_scenario(self, fetchers):
        response = SearchService(fetchers).search("logo")

        professional = next(item for item in response.packages if item.id == 1)
        # title is a substring hit (60) but its category is a prefix hit (80)
        assert professional.score == 80

    def test_fuzzy_scenario(self, fetchers):
        response = SearchService(fetchers).search("lgoo design")

        logo_category = next(item for item in response.categories if item.id == 100)
        assert logo_category.score == pytest.approx(50.0)

    def test_results_are_merged_and_consistent(self, fetchers):
        response = SearchService(fetchers).search("logo")

        assert_consistent(response)
        kinds = {item.kind for item in response.all_results}
        assert ItemKind.PACKAGE in kinds and ItemKind.CATEGORY in kinds
        # merged list shares the per-type objects
        assert response.packages[0] in response.all_results

    def test_caps_hold_on_large_catalogs(self):
        records = [
            {"id": i, "title": "Logo", "name": "Logo", "description": ""}
            for i in range(50)
        ]
        service = SearchService({kind: (lambda: records) for kind in ItemKind})

        response = service.search("logo")

        assert len(response.packages) == 10
        assert len(response.plugins) == 10
        assert len(response.categories) == 5
        assert response.total_results == 25
        assert_consistent(response)

    def test_missing_fetcher_gives_empty_bucket(self, package_records):
        service = SearchService({ItemKind.PACKAGE: lambda: package_records})

        response = service.search("logo")

        assert response.packages
        assert response.plugins == [] and response.categories == []
        assert response.error is None


class TestFaultIsolation:
    def test_failing_plugin_catalog_is_isolated(self, fetchers):
        fetchers[ItemKind.PLUGIN] = Mock(side_effect=ConnectionError("plugins down"))

        response = SearchService(fetchers).search("logo")

        assert response.state is SearchState.DONE
        assert response.error is None
        assert response.plugins == []
        assert response.packages
        assert response.categories
        assert_consistent(response)

    def test_catalog_returning_nothing(self, fetchers):
        fetchers[ItemKind.CATEGORY] = lambda: None

        response = SearchService(fetchers).search("logo")

        assert response.categories == []
        assert response.packages

    def test_slow_catalog_is_abandoned(self, fetchers):
        release = threading.Event()

        def slow_plugins():
            release.wait(5)
            return [{"id": 99, "name": "Logo Plugin", "description": ""}]

        fetchers[ItemKind.PLUGIN] = slow_plugins
        try:
            response = SearchService(fetchers, timeout=0.2).search("logo")
        finally:
            release.set()

        assert response.plugins == []
        assert response.packages
        assert response.error is None

    def test_scoring_error_degrades_response(self, fetchers):
        broken = Mock(spec=CatalogScanner)
        broken.scan.side_effect = RuntimeError("bad record")
        scanners = {**SCANNERS, ItemKind.CATEGORY: broken}

        response = SearchService(fetchers, scanners=scanners).search("logo")

        assert response.state is SearchState.DONE
        assert "bad record" in response.error
        assert response.total_results == 0
        assert response.packages == response.plugins == response.categories == []

    def test_malformed_record_degrades_response(self, fetchers):
        fetchers[ItemKind.PACKAGE] = lambda: [None]

        response = SearchService(fetchers).search("logo")

        assert response.error
        assert response.all_results == []


class TestResponseSchema:
    def test_dump_uses_wire_names(self, fetchers):
        response = SearchService(fetchers).search("seo")

        data = SearchResponseSchema().dump(response)

        assert set(data) == {
            "packages",
            "plugins",
            "categories",
            "allResults",
            "query",
            "totalResults",
        }
        assert data["query"] == "seo"
        assert data["totalResults"] == len(data["allResults"])
        assert all("searchScore" in item and "type" in item for item in data["allResults"])

    def test_empty_query_payload(self):
        data = SearchResponseSchema().dump(SearchResponse(query=""))

        assert data == {
            "packages": [],
            "plugins": [],
            "categories": [],
            "allResults": [],
            "query": "",
            "totalResults": 0,
        }

    def test_failed_payload_omits_query(self):
        response = SearchService({}).search(None)

        data = SearchResponseSchema().dump(response)

        assert "query" not in data
        assert data["error"] == "Missing or invalid search query"
        assert data["totalResults"] == 0
