# python imports
import logging
import time

# package imports
from flask import Flask
from flask_migrate import Migrate
from flask_cors import CORS
from flask_smorest import Api

# app imports
from main.config import settings
from main.logger import setup_logging
from main.errors import handle_error
from main.middleware import RequestLogMiddleware
from main.routes import register_blueprints, register_commands, create_root_routes

logger = logging.getLogger(__name__)


def configure_app(app, config_overrides=None):
    """Configure Flask application"""
    app.config.from_object(settings)
    if config_overrides:
        app.config.update(config_overrides)

    # Setup extensions
    from external.database import db

    db.init_app(app)
    Migrate(app, db)
    CORS(app, origins=["*"])

    # Initialize Flask-Smorest API
    api = Api(app)

    # Register error handler
    app.register_error_handler(Exception, handle_error)

    return api


def create_app(config_overrides=None):
    """Application factory"""
    setup_logging()

    app = Flask(__name__)
    app.wsgi_app = RequestLogMiddleware(app.wsgi_app)

    # Track application start time for health checks
    app.start_time = time.time()

    api = configure_app(app, config_overrides)

    with app.app_context():
        # Models must be imported before migrations or create_all see them
        from app.categories.models import Category  # noqa
        from app.packages.models import Package  # noqa
        from app.plugins.models import Plugin  # noqa

        # Register routes
        register_blueprints(app, api)
        register_commands(app)
        create_root_routes(app)

    logger.info("Application initialized")
    return app
