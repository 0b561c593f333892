"""
Custom exceptions for the application.
Centralized error types raised by repositories and services and mapped to
HTTP responses by the application factory.
"""

from typing import Optional


class RealEstateError(Exception):
    """Base exception for the real-estate backend."""

    pass


class EntityNotFoundError(RealEstateError):
    """Raised when a record looked up by id does not exist."""

    def __init__(self, entity: str, entity_id: Optional[int] = None):
        self.entity = entity
        self.entity_id = entity_id
        if entity_id is None:
            message = f"{entity} not found"
        else:
            message = f"{entity} with ID {entity_id} not found"
        super().__init__(message)
        self.message = message


class ConflictError(RealEstateError):
    """
    Raised when a write violates a uniqueness constraint
    (duplicate agent email, duplicate license number, duplicate client email).
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field
