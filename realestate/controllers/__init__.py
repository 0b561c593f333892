"""
Controllers package - Flask blueprints for the JSON API.
"""

from .agent_controller import agent_bp
from .appointment_controller import appointment_bp
from .client_controller import client_bp
from .health_controller import health_bp
from .property_controller import property_bp
from .transaction_controller import transaction_bp

__all__ = [
    "agent_bp",
    "property_bp",
    "client_bp",
    "transaction_bp",
    "appointment_bp",
    "health_bp",
]
