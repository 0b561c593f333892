"""
Domain package - Pure business logic layer.

This package contains:
- enums.py: Closed status/type enumerations
- entities.py: Domain entities with derived business methods
- lifecycle.py: Explicit create/update bookkeeping (timestamps, defaults)
- interfaces.py: Repository contracts
"""

from .entities import Agent, Appointment, Client, Property, PropertyImage, Transaction
from .interfaces import (
    IAgentReader,
    IAgentRepository,
    IAgentWriter,
    IAppointmentRepository,
    IClientReader,
    IClientRepository,
    IClientWriter,
    IPropertyImageRepository,
    IPropertyReader,
    IPropertyRepository,
    IPropertyWriter,
    ITransactionRepository,
)

__all__ = [
    # Domain entities
    "Agent",
    "Property",
    "Client",
    "Transaction",
    "Appointment",
    "PropertyImage",
    # Repository interfaces
    "IAgentRepository",
    "IPropertyRepository",
    "IClientRepository",
    "ITransactionRepository",
    "IAppointmentRepository",
    "IPropertyImageRepository",
    # Segregated interfaces
    "IAgentReader",
    "IAgentWriter",
    "IPropertyReader",
    "IPropertyWriter",
    "IClientReader",
    "IClientWriter",
]
