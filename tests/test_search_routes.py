"""
Integration tests for GET /search/ against the seeded SQLite catalog.
"""

import pytest

from app.libs.errors import CatalogUnavailableError
from app.plugins.services import PluginService
from external.database import db
from app.packages.models import Package


EMPTY_LISTS = ("packages", "plugins", "categories", "allResults")


class TestSearchEndpoint:
    def test_missing_query_is_rejected(self, seeded_client):
        response = seeded_client.get("/search/")

        assert response.status_code == 400
        data = response.get_json()
        assert data["error"] == "Missing or invalid search query"
        assert data["totalResults"] == 0
        for key in EMPTY_LISTS:
            assert data[key] == []

    def test_empty_query_returns_empty_result(self, seeded_client):
        response = seeded_client.get("/search/?q=")

        assert response.status_code == 200
        assert response.get_json() == {
            "packages": [],
            "plugins": [],
            "categories": [],
            "allResults": [],
            "query": "",
            "totalResults": 0,
        }

    def test_prefix_match_on_plugin_name(self, seeded_client):
        response = seeded_client.get("/search/?q=WordPress")

        assert response.status_code == 200
        data = response.get_json()
        assert data["query"] == "wordpress"
        booster = next(p for p in data["plugins"] if p["name"] == "WordPress SEO Booster")
        assert booster["searchScore"] == 80
        assert booster["type"] == "plugin"
        # record metadata passes through untouched
        assert booster["downloads"] == 1250
        assert booster["category"] == "SEO"

    def test_typo_matches_category(self, seeded_client):
        data = seeded_client.get("/search/", query_string={"q": "lgoo design"}).get_json()

        names = {c["name"]: c["searchScore"] for c in data["categories"]}
        assert names["Logo Design"] == pytest.approx(50.0)
        assert len(data["categories"]) <= 5

    def test_response_is_consistent(self, seeded_client):
        data = seeded_client.get("/search/?q=design").get_json()

        assert data["totalResults"] == len(data["allResults"])
        assert data["totalResults"] == (
            len(data["packages"]) + len(data["plugins"]) + len(data["categories"])
        )
        scores = [item["searchScore"] for item in data["allResults"]]
        assert scores == sorted(scores, reverse=True)
        assert all(score > 0 for score in scores)
        assert len(data["packages"]) <= 10
        assert len(data["plugins"]) <= 10
        assert len(data["categories"]) <= 5
        assert {item["type"] for item in data["allResults"]} <= {
            "package",
            "plugin",
            "category",
        }

    def test_inactive_records_are_not_searchable(self, seeded_app):
        with seeded_app.app_context():
            db.session.add(
                Package(
                    title="Retired Logo Bundle",
                    price="10.00 USD",
                    description="No longer offered",
                    is_active=False,
                )
            )
            db.session.commit()

        data = (
            seeded_app.test_client()
            .get("/search/", query_string={"q": "retired logo bundle"})
            .get_json()
        )

        titles = [item.get("title") for item in data["allResults"]]
        assert "Retired Logo Bundle" not in titles

    def test_failing_catalog_does_not_fail_search(self, seeded_client, monkeypatch):
        def unavailable(limit=1000):
            raise CatalogUnavailableError("plugins")

        monkeypatch.setattr(PluginService, "get_searchable_plugins", unavailable)

        response = seeded_client.get("/search/?q=logo")

        assert response.status_code == 200
        data = response.get_json()
        assert "error" not in data
        assert data["plugins"] == []
        assert data["packages"]
        assert data["categories"]
