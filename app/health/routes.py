# package imports
from flask_smorest import Blueprint
from flask.views import MethodView
from flask import current_app
import logging
import time
import psutil
import os
from sqlalchemy import func, text
from sqlalchemy.exc import SQLAlchemyError

# project imports
from external.database import db
from app.categories.models import Category
from app.packages.models import Package
from app.plugins.models import Plugin

logger = logging.getLogger(__name__)

bp = Blueprint(
    "health", __name__, description="Health check endpoints", url_prefix="/health"
)

CATALOG_MODELS = {
    "packages": Package,
    "plugins": Plugin,
    "categories": Category,
}


@bp.route("/")
class HealthCheck(MethodView):
    def get(self):
        """Basic health check endpoint"""
        return {
            "status": "healthy",
            "timestamp": time.time(),
            "version": current_app.config.get("API_VERSION", "v1"),
            "environment": current_app.config.get("ENV", "development"),
        }


@bp.route("/detailed")
class DetailedHealthCheck(MethodView):
    def get(self):
        """Detailed health check with database, catalog and system components"""
        health_status = {
            "status": "healthy",
            "timestamp": time.time(),
            "version": current_app.config.get("API_VERSION", "v1"),
            "environment": current_app.config.get("ENV", "development"),
            "components": {},
        }

        # Database health check
        try:
            response_time = self._measure_db_response_time()
            health_status["components"]["database"] = {
                "status": "healthy",
                "response_time": response_time,
            }
        except SQLAlchemyError as e:
            logger.warning(f"Database health check failed: {str(e)}")
            health_status["components"]["database"] = {
                "status": "unhealthy",
                "error": str(e),
            }
            health_status["status"] = "unhealthy"

        # Active records per catalog
        try:
            health_status["components"]["catalogs"] = self._count_active_records()
        except SQLAlchemyError as e:
            logger.warning(f"Catalog health check failed: {str(e)}")
            health_status["components"]["catalogs"] = {"error": str(e)}
            health_status["status"] = "unhealthy"

        # System resources
        health_status["components"]["system"] = {
            "cpu_usage": psutil.cpu_percent(interval=None),
            "memory_usage": psutil.virtual_memory().percent,
            "disk_usage": psutil.disk_usage("/").percent,
            "load_average": os.getloadavg() if hasattr(os, "getloadavg") else None,
        }

        # Application metrics
        health_status["components"]["application"] = {
            "uptime": time.time() - current_app.start_time
            if hasattr(current_app, "start_time")
            else None,
            "search_workers": current_app.config.get("SEARCH_MAX_WORKERS"),
            "search_timeout": current_app.config.get("SEARCH_FETCH_TIMEOUT"),
        }

        return health_status

    def _measure_db_response_time(self):
        """Measure database response time in milliseconds"""
        start_time = time.time()
        db.session.execute(text("SELECT 1"))
        return round((time.time() - start_time) * 1000, 2)

    def _count_active_records(self):
        return {
            name: db.session.query(func.count(model.id))
            .filter(model.is_active.is_(True))
            .scalar()
            for name, model in CATALOG_MODELS.items()
        }


@bp.route("/ready")
class ReadinessCheck(MethodView):
    def get(self):
        """Readiness check for container orchestration"""
        readiness_status = {"ready": True, "timestamp": time.time(), "checks": {}}

        try:
            db.session.execute(text("SELECT 1"))
            readiness_status["checks"]["database"] = True
        except SQLAlchemyError:
            readiness_status["checks"]["database"] = False
            readiness_status["ready"] = False

        readiness_status["checks"]["application"] = True

        return readiness_status


@bp.route("/live")
class LivenessCheck(MethodView):
    def get(self):
        """Liveness check for container orchestration"""
        return {"alive": True, "timestamp": time.time()}
