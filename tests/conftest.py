"""
Pytest configuration and fixtures for the catalog search tests.
"""

import os
import tempfile

import pytest

# Keep log files out of the working tree; must be set before main.config loads
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="catalog-search-logs-"))
os.environ.setdefault("LOG_LEVEL", "WARNING")

from app.search.constants import ItemKind  # noqa: E402


@pytest.fixture
def app(tmp_path):
    """Flask app backed by a throwaway SQLite file."""
    from main.setup import create_app
    from external.database import db

    app = create_app(
        {
            "TESTING": True,
            "SQLALCHEMY_DATABASE_URI": f"sqlite:///{tmp_path / 'catalog.db'}",
            # search workers open their own connections
            "SQLALCHEMY_ENGINE_OPTIONS": {"connect_args": {"check_same_thread": False}},
            "SEARCH_FETCH_TIMEOUT": 10.0,
        }
    )

    with app.app_context():
        db.create_all()

    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()
        db.engine.dispose()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def seeded_app(app):
    """App whose catalog holds the sample data from the seed command."""
    result = app.test_cli_runner().invoke(args=["seed-catalog"])
    assert result.exit_code == 0, result.output
    return app


@pytest.fixture
def seeded_client(seeded_app):
    return seeded_app.test_client()


@pytest.fixture
def package_records():
    return [
        {
            "id": 1,
            "title": "Professional Logo Design",
            "description": "Five concepts and a style guide",
            "category": "Logo Design",
            "price": "350.00 USD",
        },
        {
            "id": 2,
            "title": "Basic Website Package",
            "description": "Five page responsive website",
            "category": "Websites",
            "price": "500.00 USD",
        },
        {
            "id": 3,
            "title": "Logo Refresh",
            "description": "Modernise an existing mark",
            "category": "Logo Design",
            "price": "120.00 USD",
        },
    ]


@pytest.fixture
def plugin_records():
    return [
        {
            "id": 10,
            "name": "WordPress SEO Booster",
            "description": "On-page SEO checks",
            "category": "SEO",
            "downloads": 1250,
        },
        {
            "id": 11,
            "name": "Contact Form Pro",
            "description": "Drag and drop forms",
            "category": "WordPress Plugins",
            "downloads": 5400,
        },
    ]


@pytest.fixture
def category_records():
    return [
        {"id": 100, "name": "Logo Design", "description": "Custom logos", "slug": "logo-design"},
        {"id": 101, "name": "Websites", "description": "Business websites", "slug": "websites"},
        {"id": 102, "name": "SEO", "description": "Search engine optimisation", "slug": "seo"},
    ]


@pytest.fixture
def fetchers(package_records, plugin_records, category_records):
    return {
        ItemKind.PACKAGE: lambda: package_records,
        ItemKind.PLUGIN: lambda: plugin_records,
        ItemKind.CATEGORY: lambda: category_records,
    }
