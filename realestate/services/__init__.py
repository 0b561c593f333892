# Services package initialization
# This file makes the services directory a Python package
# and allows importing service modules

from . import agent_service
from . import appointment_service
from . import client_service
from . import property_service
from . import transaction_service

__all__ = [
    "agent_service",
    "appointment_service",
    "client_service",
    "property_service",
    "transaction_service",
]
