"""
Common API utilities for consistent request parsing and response
formatting across all controllers.
"""

from datetime import date, datetime
from typing import Any, Dict, Optional

from flask import jsonify, request

from realestate.core.validation import BaseValidator, ValidationError, ValidationResult


def api_response(
    success: bool, message: str, data: Optional[Any] = None, status_code: int = 200
) -> tuple:
    """
    Standardized API response format for all endpoints.

    Args:
        success: Whether the operation was successful
        message: Human-readable message about the operation
        data: Optional data payload
        status_code: HTTP status code

    Returns:
        Tuple of (json_response, status_code)
    """
    response = {"success": success, "message": message}

    if data is not None:
        response["data"] = data

    return jsonify(response), status_code


def json_body(optional: bool = False) -> Dict[str, Any]:
    """Return the request's JSON object or raise ValidationError.

    With ``optional`` an absent or empty body reads as ``{}``.
    """
    payload = request.get_json(silent=True)
    if optional and (payload is None or payload == {}):
        return {}
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    return payload


def parse_date(raw: Any, name: str) -> Optional[date]:
    """Optional YYYY-MM-DD value from a query string or JSON body."""
    result = ValidationResult()
    value = BaseValidator.validate_date(raw, name, result)
    if not result.is_valid:
        raise ValidationError(result.errors[0]["message"], field=name)
    return value


def query_datetime(name: str, required: bool = False) -> Optional[datetime]:
    """ISO-8601 query parameter; naive values are read in APP_TZ."""
    raw = request.args.get(name)
    if required and not raw:
        raise ValidationError(f"Query parameter '{name}' is required", field=name)
    result = ValidationResult()
    value = BaseValidator.validate_datetime(raw, name, result)
    if not result.is_valid:
        raise ValidationError(result.errors[0]["message"], field=name)
    return value
