"""
Health controller - health check endpoint for monitoring.
"""

import logging

from flask import Blueprint
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from ..core.api_utils import api_response
from ..core.limiter_config import limiter
from ..db.session import get_engine

logger = logging.getLogger(__name__)

health_bp = Blueprint("health", __name__)


def database_is_reachable() -> bool:
    """Run ``SELECT 1`` against the configured database."""
    try:
        with get_engine().connect() as connection:
            connection.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError as e:
        logger.error(
            "Database connection failed",
            extra={"context": {"error": str(e)}},
            exc_info=True,
        )
        return False


@health_bp.route("/health", methods=["GET"])
@limiter.exempt
def health_check():
    """
    Returns 200 with ``{"status": "healthy", "database": "connected"}`` when
    the database answers, 503 otherwise. No authentication required.
    """
    db_status = database_is_reachable()
    data = {
        "status": "healthy" if db_status else "unhealthy",
        "database": "connected" if db_status else "disconnected",
    }
    return api_response(
        db_status,
        "Service is healthy" if db_status else "Database unavailable",
        data,
        200 if db_status else 503,
    )
