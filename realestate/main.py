import logging
import os
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from flask import Flask
from werkzeug.exceptions import HTTPException

# Get logger for this module
logger = logging.getLogger(__name__)

# Load environment variables conditionally
# Only load from .env when DATABASE_URL is not already defined by the environment
if not os.getenv("DATABASE_URL"):
    load_dotenv()


def _register_error_handlers(app: Flask) -> None:
    """Map domain exceptions to JSON error envelopes."""
    from realestate.core.api_utils import api_response
    from realestate.core.exceptions import ConflictError, EntityNotFoundError
    from realestate.core.validation import ValidationError
    from realestate.schemas.dtos import ErrorResponse

    @app.errorhandler(ValidationError)
    def handle_validation_error(error: ValidationError):
        logger.info(
            "Request rejected by validation",
            extra={"context": {"message": error.message, "errors": error.errors}},
        )
        body = ErrorResponse.validation_error(error.message, error.errors)
        return api_response(False, error.message, body.to_dict(), 400)

    @app.errorhandler(EntityNotFoundError)
    def handle_not_found(error: EntityNotFoundError):
        body = ErrorResponse.not_found(error.message)
        return api_response(False, error.message, body.to_dict(), 404)

    @app.errorhandler(ConflictError)
    def handle_conflict(error: ConflictError):
        logger.info(
            "Request rejected by uniqueness rule",
            extra={"context": {"message": error.message, "field": error.field}},
        )
        body = ErrorResponse.conflict(error.message, error.field)
        return api_response(False, error.message, body.to_dict(), 409)

    @app.errorhandler(HTTPException)
    def handle_http_error(error: HTTPException):
        message = error.description or error.name
        return api_response(
            False,
            message,
            {"error": error.name.lower().replace(" ", "_")},
            error.code or 500,
        )

    @app.errorhandler(Exception)
    def handle_unexpected_error(error: Exception):
        logger.error(
            "Unhandled error",
            extra={"context": {"error": str(error), "type": type(error).__name__}},
            exc_info=True,
        )
        body = ErrorResponse.server_error()
        return api_response(False, body.message, body.to_dict(), 500)


def create_app(config_overrides: Optional[Dict[str, Any]] = None) -> Flask:
    from realestate.core.config import (
        get_limiter_storage_uri,
        get_log_level,
        is_production,
        is_testing,
        json_logs_enabled,
        log_timezone_config,
        log_to_file_enabled,
        rate_limit_enabled,
    )

    app = Flask(__name__)
    app.json.sort_keys = False

    if is_testing():
        app.config["TESTING"] = True
    if config_overrides:
        app.config.update(config_overrides)

    # Configure structured logging (after app creation so we can register hooks)
    from realestate.core.logging_config import setup_logging

    production = is_production()
    setup_logging(
        app=app,  # Pass app to register request/response hooks
        log_level=get_log_level(),
        enable_sql_echo=os.getenv("SQL_ECHO", "0") == "1",
        log_to_file=log_to_file_enabled(),
        use_json_format=json_logs_enabled(),
    )
    logger.info(
        "Logging configured",
        extra={
            "context": {
                "environment": "production" if production else "development",
                "json_format": json_logs_enabled(),
            }
        },
    )
    log_timezone_config()

    # Initialize Flask-Limiter (rate limiting) with environment-aware storage
    from realestate.core.limiter_config import limiter

    app.config["RATELIMIT_STORAGE_URI"] = get_limiter_storage_uri()
    enabled = app.config.get("RATELIMIT_ENABLED", rate_limit_enabled())
    app.config["RATELIMIT_ENABLED"] = enabled
    limiter.init_app(app)
    limiter.enabled = enabled
    if not enabled:
        logger.info(
            "Rate limiting disabled", extra={"context": {"testing": is_testing()}}
        )

    # Make sure the schema exists for the configured database
    if app.config.get("AUTO_CREATE_TABLES", not production):
        from realestate.db.session import create_tables

        create_tables()

    from realestate.controllers import (
        agent_bp,
        appointment_bp,
        client_bp,
        health_bp,
        property_bp,
        transaction_bp,
    )

    app.register_blueprint(health_bp)
    app.register_blueprint(agent_bp)
    app.register_blueprint(property_bp)
    app.register_blueprint(client_bp)
    app.register_blueprint(transaction_bp)
    app.register_blueprint(appointment_bp)

    _register_error_handlers(app)

    logger.info(
        "Application created",
        extra={"context": {"blueprints": sorted(app.blueprints)}},
    )
    return app
