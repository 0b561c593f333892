"""
Centralized configuration module for application-wide settings.

All values are read from environment variables (optionally loaded from a
.env file by the application factory) so tests and deployments can
override them without code changes.
"""

import logging
import os
from datetime import date, datetime
from zoneinfo import ZoneInfo

logger = logging.getLogger(__name__)

_TRUTHY = ("true", "1", "yes")


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower().strip() in _TRUTHY


# ===========================
# Timezone Configuration
# ===========================


def get_app_timezone() -> ZoneInfo:
    """
    Get the application timezone from environment variable.

    Returns:
        ZoneInfo: Application timezone (defaults to UTC if not configured)

    Environment Variables:
        TZ: Timezone identifier (e.g., 'America/New_York', 'UTC')
            Default: 'UTC'
    """
    tz_name = os.getenv("TZ", "UTC")

    try:
        return ZoneInfo(tz_name)
    except Exception as e:
        logger.warning(
            f"Invalid timezone '{tz_name}' specified in TZ environment variable. "
            f"Falling back to UTC. Error: {e}"
        )
        return ZoneInfo("UTC")


APP_TZ = get_app_timezone()


def now() -> datetime:
    """Current instant in the application timezone."""
    return datetime.now(APP_TZ)


def today() -> date:
    """Current calendar date in the application timezone."""
    return now().date()


def log_timezone_config():
    """Log the active timezone configuration at startup."""
    logger.info(
        "Timezone configuration initialized",
        extra={
            "context": {
                "timezone": str(APP_TZ),
                "tz_env_var": os.getenv("TZ", "UTC"),
            }
        },
    )


# ===========================
# Database Configuration
# ===========================

DEFAULT_DATABASE_URL = "sqlite:///./realestate.db"


def get_database_url() -> str:
    """Return the effective DATABASE_URL (read on every call so tests can override)."""
    return os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL)


def get_slow_query_threshold_ms() -> int:
    """Queries slower than this are logged as warnings."""
    try:
        return int(os.getenv("SLOW_QUERY_MS", "100"))
    except (TypeError, ValueError):
        return 100


# ===========================
# Runtime Flags
# ===========================


def is_testing() -> bool:
    return _env_flag("TESTING", "false")


def is_production() -> bool:
    return os.getenv("FLASK_ENV", "development") == "production"


def get_log_level() -> str:
    default = "INFO" if is_production() else "DEBUG"
    return os.getenv("LOG_LEVEL", default).upper()


def log_to_file_enabled() -> bool:
    return _env_flag("LOG_TO_FILE", "0")


def json_logs_enabled() -> bool:
    return _env_flag("LOG_JSON", "true" if is_production() else "false")


def rate_limit_enabled() -> bool:
    """Rate limiting is on by default and off under TESTING unless forced."""
    if is_testing():
        return _env_flag("RATE_LIMIT_ENABLED", "0")
    return _env_flag("RATE_LIMIT_ENABLED", "1")


def get_limiter_storage_uri() -> str:
    return os.getenv("LIMITER_STORAGE_URI", "memory://")
