"""
Slow query logging for SQLAlchemy engines.

Statements running longer than ``SLOW_QUERY_MS`` milliseconds are logged
as warnings on the ``realestate.sql`` logger with the statement, its
parameters (contact and license values masked) and the route that issued
it. ``SLOW_QUERY_MS=0`` turns the listener off.
"""

import logging
import time
from typing import Any, Dict

from flask import g, has_request_context
from sqlalchemy import event
from sqlalchemy.engine import Engine

from realestate.core.config import get_slow_query_threshold_ms

logger = logging.getLogger("realestate.sql")

# Parameter names containing any of these are never logged in clear
MASKED_PARAMS = ("email", "phone", "license")
MAX_STATEMENT_CHARS = 500
MAX_VALUE_CHARS = 120


def _clip(text: str, limit: int) -> str:
    return text if len(text) <= limit else text[:limit] + "..."


def _masked(params: Any) -> Any:
    if isinstance(params, dict):
        return {
            key: "***"
            if any(marker in str(key).lower() for marker in MASKED_PARAMS)
            else _masked(value)
            for key, value in params.items()
        }
    if isinstance(params, (list, tuple)):
        return [_masked(item) for item in params]
    if isinstance(params, bytes):
        return f"<{len(params)} bytes>"
    return _clip(repr(params), MAX_VALUE_CHARS)


def _request_fields() -> Dict[str, Any]:
    if not has_request_context():
        return {}
    return {"request_id": g.get("request_id"), "route": g.get("route")}


def register_query_timing(engine: Engine) -> None:
    """Log statements slower than SLOW_QUERY_MS; registering twice is a no-op."""
    if getattr(engine, "_query_timing_registered", False):
        return
    engine._query_timing_registered = True
    database = engine.url.database

    @event.listens_for(engine, "before_cursor_execute")
    def _start_timer(conn, cursor, statement, parameters, context, executemany):
        context._query_started = time.perf_counter()

    @event.listens_for(engine, "after_cursor_execute")
    def _stop_timer(conn, cursor, statement, parameters, context, executemany):
        started = getattr(context, "_query_started", None)
        if started is None:
            return
        elapsed_ms = (time.perf_counter() - started) * 1000.0
        threshold = get_slow_query_threshold_ms()
        if threshold <= 0 or elapsed_ms < threshold:
            return
        logger.warning(
            "Slow query (%.1f ms)",
            elapsed_ms,
            extra={
                "context": {
                    "duration_ms": round(elapsed_ms, 2),
                    "threshold_ms": threshold,
                    "database": database,
                    "statement": _clip(" ".join(statement.split()), MAX_STATEMENT_CHARS),
                    "params": _masked(parameters),
                    **_request_fields(),
                }
            },
        )
