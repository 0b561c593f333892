"""
Schemas package - Data Transfer Objects.

This package contains the JSON representations of domain entities that
define the API contracts.
"""

from .dtos import (
    ErrorResponse,
    agent_response,
    appointment_response,
    client_response,
    license_status_response,
    property_image_response,
    property_response,
    serialize_value,
    transaction_response,
)

__all__ = [
    # Entity responses
    "agent_response",
    "property_response",
    "client_response",
    "transaction_response",
    "appointment_response",
    "property_image_response",
    "license_status_response",
    # Common DTOs
    "ErrorResponse",
    "serialize_value",
]
