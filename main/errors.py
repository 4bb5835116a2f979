from flask import jsonify
from werkzeug.exceptions import HTTPException
import logging
from app.libs.errors import APIError

logger = logging.getLogger(__name__)


def handle_error(e):
    """Render any error that escaped a view as JSON"""
    if isinstance(e, APIError):
        logger.warning(f"API Error ({e.status_code}): {e.message}")
        return jsonify(e.to_dict()), e.status_code
    elif isinstance(e, HTTPException):
        logger.error(f"HTTP Error: {e.description}")
        return jsonify({"code": e.code, "message": e.description}), e.code
    else:
        logger.exception("Unhandled exception")
        return jsonify({"code": 500, "message": "Internal server error"}), 500
