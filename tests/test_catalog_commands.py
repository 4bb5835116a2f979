"""
Tests for the catalog management CLI commands.
"""

from app.categories.models import Category
from app.packages.models import Package
from app.plugins.models import Plugin


class TestCatalogCommands:
    def test_seed_populates_everything(self, seeded_app):
        with seeded_app.app_context():
            assert Category.query.count() == 12
            assert Package.query.count() == 6
            assert Plugin.query.count() == 3
            logo = Category.query.filter_by(slug="logo-design").one()
            assert logo.parent.slug == "design-services"

    def test_seed_is_idempotent_without_force(self, seeded_app):
        result = seeded_app.test_cli_runner().invoke(args=["seed-catalog"])

        assert result.exit_code == 0
        assert "already populated" in result.output
        with seeded_app.app_context():
            assert Package.query.count() == 6

    def test_seed_force_recreates(self, seeded_app):
        result = seeded_app.test_cli_runner().invoke(args=["seed-catalog", "--force"])

        assert result.exit_code == 0
        with seeded_app.app_context():
            assert Category.query.count() == 12
            assert Package.query.count() == 6

    def test_list(self, seeded_app):
        result = seeded_app.test_cli_runner().invoke(args=["list-catalog"])

        assert result.exit_code == 0
        assert "Logo Design" in result.output
        assert "[plugin] WordPress SEO Booster" in result.output

    def test_list_empty(self, app):
        result = app.test_cli_runner().invoke(args=["list-catalog"])

        assert "Catalog is empty" in result.output

    def test_clear(self, seeded_app):
        result = seeded_app.test_cli_runner().invoke(args=["clear-catalog", "--confirm"])

        assert result.exit_code == 0
        assert "6 packages" in result.output
        with seeded_app.app_context():
            assert Category.query.count() == 0
            assert Plugin.query.count() == 0

    def test_clear_can_be_cancelled(self, seeded_app):
        result = seeded_app.test_cli_runner().invoke(args=["clear-catalog"], input="n\n")

        assert "cancelled" in result.output
        with seeded_app.app_context():
            assert Package.query.count() == 6
