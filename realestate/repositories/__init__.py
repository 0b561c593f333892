"""
Repositories package - SQLAlchemy implementations of the domain interfaces.

Repositories map database models to domain entities and own the commit,
so services never touch ORM objects directly.
"""

from .agent_repo import AgentRepository
from .appointment_repo import AppointmentRepository
from .client_repo import ClientRepository
from .property_image_repo import PropertyImageRepository
from .property_repo import PropertyRepository
from .transaction_repo import TransactionRepository

__all__ = [
    "AgentRepository",
    "PropertyRepository",
    "ClientRepository",
    "TransactionRepository",
    "AppointmentRepository",
    "PropertyImageRepository",
]
