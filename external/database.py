from flask_sqlalchemy import SQLAlchemy
import logging

logger = logging.getLogger(__name__)

db = SQLAlchemy()


def init_db():
    # Model modules register their tables on import
    import app.categories.models  # noqa
    import app.packages.models  # noqa
    import app.plugins.models  # noqa

    db.create_all()
    logger.info("Database initialized")
