from importlib import import_module
import logging
from main.config import settings

logger = logging.getLogger(__name__)

BLUEPRINT_MODULES = ["categories", "packages", "plugins", "search", "health"]


def register_blueprints(app, api):
    """Dynamically register all blueprints from app modules"""
    for module in BLUEPRINT_MODULES:
        mod = import_module(f"app.{module}.routes")
        bp = getattr(mod, "bp", None) or getattr(mod, f"{module}_bp")

        # Register with Flask-Smorest API instead of directly with app
        api.register_blueprint(bp)
        logger.info(f"Registered blueprint for {module}")


def register_commands(app):
    """Attach catalog management commands to the Flask CLI"""
    from app.catalog.management.commands.seed_catalog import seed_catalog
    from app.catalog.management.commands.list_catalog import list_catalog
    from app.catalog.management.commands.clear_catalog import clear_catalog

    for command in (seed_catalog, list_catalog, clear_catalog):
        app.cli.add_command(command)


def create_root_routes(app):
    @app.route("/status")
    def status():
        return {
            "status": "running",
            "environment": app.config.get("ENV", settings.ENV),
        }
