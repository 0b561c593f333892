"""
Logging setup for the real-estate backend.

Every module logs through ``logging.getLogger(__name__)`` and passes
structured data as ``extra={"context": {...}}``. ``setup_logging``
installs:

- a console handler (colour text in development, JSON lines in production)
- optional rotating JSON files under ``logs/`` (all records + errors only)
- a filter stamping each record with the current request id
- Flask hooks logging each request and its response time

Usage:
    setup_logging(app, log_level="INFO")

    logger = logging.getLogger(__name__)
    logger.info("Agent created", extra={"context": {"agent_id": 123}})
"""

import json
import logging
import logging.handlers
import sys
import time
import uuid
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional, Union

from flask import Flask, g, has_request_context, request

from realestate.core.config import APP_TZ

LOG_FILE = "realestate.log"
ERROR_LOG_FILE = "realestate_errors.log"
MAX_LOG_BYTES = 10 * 1024 * 1024
LOG_BACKUPS = 5

# Loggers that are too chatty at INFO
QUIET_LOGGERS = ("werkzeug", "urllib3")


class RequestIdFilter(logging.Filter):
    """Attach ``request_id`` to every record (``"-"`` outside a request)."""

    def filter(self, record: logging.LogRecord) -> bool:
        request_id = "-"
        if has_request_context():
            request_id = g.get("request_id") or "-"
        record.request_id = request_id
        return True


class JSONFormatter(logging.Formatter):
    """One JSON object per line; ``context`` is copied from ``extra``."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, APP_TZ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "request_id": getattr(record, "request_id", "-"),
            "location": f"{record.module}.{record.funcName}:{record.lineno}",
        }
        context = getattr(record, "context", None)
        if context:
            payload["context"] = context
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


class ConsoleFormatter(logging.Formatter):
    """Coloured level names, context appended as compact JSON."""

    LEVEL_COLOURS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(self) -> None:
        super().__init__(
            "%(asctime)s %(levelname)s [%(request_id)s] %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )

    def format(self, record: logging.LogRecord) -> str:
        if not hasattr(record, "request_id"):
            record.request_id = "-"
        original = record.levelname
        colour = self.LEVEL_COLOURS.get(original, "")
        record.levelname = f"{colour}{original:<8}{self.RESET}"
        try:
            line = super().format(record)
        finally:
            record.levelname = original
        context = getattr(record, "context", None)
        if context:
            line += " " + json.dumps(context, default=str, separators=(",", ":"))
        return line


def _resolve_level(log_level: Union[int, str]) -> int:
    if isinstance(log_level, int):
        return log_level
    return getattr(logging, str(log_level).upper(), logging.INFO)


def setup_logging(
    app: Optional[Flask] = None,
    log_level: Union[int, str] = "INFO",
    enable_sql_echo: bool = False,
    log_to_file: bool = False,
    use_json_format: bool = False,
    log_dir: Optional[Path] = None,
) -> None:
    """
    Configure the root logger.

    Args:
        app: when given, request/response hooks are registered on it
        log_level: level name or number
        enable_sql_echo: log every statement through ``sqlalchemy.engine``
        log_to_file: also write JSON logs to rotating files in ``log_dir``
        use_json_format: JSON lines on the console instead of coloured text
        log_dir: directory for log files (default ``./logs``)
    """
    level = _resolve_level(log_level)
    root = logging.getLogger()
    root.setLevel(level)

    # Calling setup_logging again (one app per test) must not stack handlers
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    request_ids = RequestIdFilter()
    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)
    console.addFilter(request_ids)
    console.setFormatter(JSONFormatter() if use_json_format else ConsoleFormatter())
    root.addHandler(console)

    if log_to_file:
        _add_file_handlers(root, level, log_dir or Path.cwd() / "logs", request_ids)

    if enable_sql_echo:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    if app is not None:
        _register_request_hooks(app)

    logging.getLogger("realestate").debug(
        "Log handlers installed",
        extra={
            "context": {
                "level": logging.getLevelName(level),
                "sql_echo": enable_sql_echo,
                "to_file": log_to_file,
                "json": use_json_format,
            }
        },
    )


def _add_file_handlers(
    root: logging.Logger, level: int, log_dir: Path, request_ids: logging.Filter
) -> None:
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        for filename, handler_level in ((LOG_FILE, level), (ERROR_LOG_FILE, logging.ERROR)):
            handler = logging.handlers.RotatingFileHandler(
                log_dir / filename,
                maxBytes=MAX_LOG_BYTES,
                backupCount=LOG_BACKUPS,
                encoding="utf-8",
            )
            handler.setLevel(handler_level)
            handler.addFilter(request_ids)
            handler.setFormatter(JSONFormatter())
            root.addHandler(handler)
    except OSError as e:
        root.warning(
            "File logging unavailable, console only",
            extra={"context": {"log_dir": str(log_dir), "error": str(e)}},
        )


def _register_request_hooks(app: Flask) -> None:
    access_log = logging.getLogger("realestate.access")

    @app.before_request
    def start_request():
        g.request_started = time.perf_counter()
        g.request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
        g.route = request.url_rule.rule if request.url_rule is not None else request.path

    @app.after_request
    def finish_request(response):
        started = g.get("request_started")
        if started is None:
            return response
        duration_ms = round((time.perf_counter() - started) * 1000, 2)
        access_log.info(
            "%s %s -> %s",
            request.method,
            request.path,
            response.status_code,
            extra={
                "context": {
                    "route": g.get("route"),
                    "status_code": response.status_code,
                    "duration_ms": duration_ms,
                    "remote_addr": request.remote_addr,
                }
            },
        )
        response.headers["X-Request-ID"] = g.request_id
        return response
