"""
Data Transfer Objects (DTOs) for the JSON API.

Domain entities are turned into plain JSON-safe dicts here: enums become
their names, dates and datetimes ISO-8601 strings and decimals strings,
so money never loses precision on the way out. Each response also carries
the entity's derived fields.
"""

import dataclasses
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, List, Optional


def serialize_value(value: Any) -> Any:
    """Convert a single domain value to its JSON representation."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Decimal):
        return str(value)
    return value


def serialize_entity(entity: Any) -> Dict[str, Any]:
    return {
        f.name: serialize_value(getattr(entity, f.name))
        for f in dataclasses.fields(entity)
    }


def agent_response(agent) -> Dict[str, Any]:
    data = serialize_entity(agent)
    data["full_name"] = agent.full_name
    data["license_valid"] = agent.is_license_valid()
    return data


def property_response(prop) -> Dict[str, Any]:
    data = serialize_entity(prop)
    data["full_address"] = prop.full_address
    data["short_description"] = prop.short_description
    return data


def client_response(client) -> Dict[str, Any]:
    data = serialize_entity(client)
    data["full_name"] = client.full_name
    return data


def transaction_response(transaction) -> Dict[str, Any]:
    data = serialize_entity(transaction)
    data["is_closed"] = transaction.is_closed
    return data


def appointment_response(appointment) -> Dict[str, Any]:
    data = serialize_entity(appointment)
    data["end_time"] = serialize_value(appointment.end_time)
    data["is_upcoming"] = appointment.is_upcoming()
    return data


def property_image_response(image) -> Dict[str, Any]:
    return serialize_entity(image)


def license_status_response(status: Dict[str, Any]) -> Dict[str, Any]:
    return {key: serialize_value(value) for key, value in status.items()}


@dataclass
class ErrorResponse:
    """DTO for error responses."""

    error: str
    message: str
    details: Optional[List[Dict[str, Any]]] = None

    @classmethod
    def validation_error(
        cls, message: str, details: Optional[List[Dict[str, Any]]] = None
    ) -> "ErrorResponse":
        """Create validation error response."""
        return cls(error="validation_error", message=message, details=details)

    @classmethod
    def not_found(cls, message: str) -> "ErrorResponse":
        """Create not found error response."""
        return cls(error="not_found", message=message)

    @classmethod
    def conflict(cls, message: str, field: Optional[str] = None) -> "ErrorResponse":
        """Create conflict (duplicate unique value) error response."""
        details = [{"field": field, "message": message}] if field else None
        return cls(error="conflict", message=message, details=details)

    @classmethod
    def server_error(cls, message: str = "Internal server error") -> "ErrorResponse":
        """Create server error response."""
        return cls(error="server_error", message=message)

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"error": self.error}
        if self.details is not None:
            payload["errors"] = self.details
        return payload
