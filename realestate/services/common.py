"""Helpers shared by the application services."""

import dataclasses
import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Dict, Optional

from realestate.core.validation import READ_ONLY_FIELDS, ValidationError

logger = logging.getLogger(__name__)


def strip_read_only(data: Optional[Dict[str, Any]], entity: str) -> Dict[str, Any]:
    """Drop id/created_at/updated_at from caller input; they are never writable."""
    cleaned = dict(data or {})
    for name in READ_ONLY_FIELDS:
        if name in cleaned:
            cleaned.pop(name)
            logger.warning(
                "Ignoring system-managed field in input",
                extra={"context": {"entity": entity, "field": name}},
            )
    return cleaned


def merge_for_update(existing: Any, patch: Dict[str, Any]) -> Dict[str, Any]:
    """Current field values overlaid with the patch, ready for full validation."""
    merged = {
        name: value
        for name, value in dataclasses.asdict(existing).items()
        if name not in READ_ONLY_FIELDS
    }
    merged.update(patch)
    return merged


def enum_filter(enum_cls) -> Callable[[Any], Any]:
    def convert(value):
        if isinstance(value, enum_cls):
            return value
        return enum_cls[str(value).strip().upper()]

    return convert


def decimal_filter(value: Any) -> Decimal:
    result = Decimal(str(value).strip())
    if not result.is_finite():
        raise ValueError(value)
    return result


def coerce_filters(
    raw: Optional[Dict[str, Any]], allowed: Dict[str, Callable[[Any], Any]]
) -> Dict[str, Any]:
    """Convert raw (often query-string) filter values to typed values.

    Raises ValidationError naming the filter for unknown keys or bad values.
    """
    filters: Dict[str, Any] = {}
    for key, value in (raw or {}).items():
        if value is None or (isinstance(value, str) and value.strip() == ""):
            continue
        if key not in allowed:
            raise ValidationError(f"Unsupported filter: {key}", field=key)
        try:
            filters[key] = allowed[key](value)
        except (KeyError, ValueError, TypeError, InvalidOperation):
            raise ValidationError(f"Invalid value for filter {key}", field=key) from None
    return filters


def require_reference(repo, record_id: Optional[int], field: str, label: str) -> None:
    """A referenced id that does not exist is a validation error on that field."""
    if record_id is None:
        return
    if repo.get_by_id(record_id) is None:
        raise ValidationError(f"{label} with ID {record_id} not found", field=field)
