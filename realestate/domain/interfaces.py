"""
Abstract interfaces for repositories following Interface Segregation Principle.

These interfaces define contracts without implementation details,
enabling dependency injection and easier testing.
"""

from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import Any, Dict, List, Optional

from .entities import Agent, Appointment, Client, Property, PropertyImage, Transaction


class IAgentReader(ABC):
    """Interface for agent read operations."""

    @abstractmethod
    def get_by_id(self, agent_id: int) -> Optional[Agent]:
        """Get agent by ID."""
        pass

    @abstractmethod
    def get_by_email(self, email: str) -> Optional[Agent]:
        """Get agent by email."""
        pass

    @abstractmethod
    def get_by_license_number(self, license_number: str) -> Optional[Agent]:
        """Get agent by license number."""
        pass

    @abstractmethod
    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Agent]:
        """List agents, optionally filtered by field equality."""
        pass

    @abstractmethod
    def list_with_expired_license(self, on: date) -> List[Agent]:
        """Agents whose license is no longer valid on the given date."""
        pass


class IAgentWriter(ABC):
    """Interface for agent write operations."""

    @abstractmethod
    def create(self, agent: Agent) -> Agent:
        """Create a new agent."""
        pass

    @abstractmethod
    def update(self, agent: Agent) -> Agent:
        """Update an existing agent."""
        pass

    @abstractmethod
    def delete(self, agent_id: int) -> bool:
        """Delete an agent together with its properties and transactions."""
        pass


class IAgentRepository(IAgentReader, IAgentWriter):
    """Complete agent repository interface combining read/write operations."""

    pass


class IPropertyReader(ABC):
    """Interface for property read operations."""

    @abstractmethod
    def get_by_id(self, property_id: int) -> Optional[Property]:
        """Get property by ID."""
        pass

    @abstractmethod
    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Property]:
        """List properties, optionally filtered by field equality."""
        pass

    @abstractmethod
    def list_by_agent(self, agent_id: int) -> List[Property]:
        """Properties listed by an agent."""
        pass

    @abstractmethod
    def list_by_owner(self, client_id: int) -> List[Property]:
        """Properties owned by a client."""
        pass

    @abstractmethod
    def search(self, criteria: Dict[str, Any]) -> List[Property]:
        """Search properties by location, type, price and room criteria."""
        pass


class IPropertyWriter(ABC):
    """Interface for property write operations."""

    @abstractmethod
    def create(self, prop: Property) -> Property:
        """Create a new property."""
        pass

    @abstractmethod
    def update(self, prop: Property) -> Property:
        """Update an existing property."""
        pass

    @abstractmethod
    def delete(self, property_id: int) -> bool:
        """Delete a property together with its images and appointments."""
        pass


class IPropertyRepository(IPropertyReader, IPropertyWriter):
    """Complete property repository interface."""

    pass


class IClientReader(ABC):
    """Interface for client read operations."""

    @abstractmethod
    def get_by_id(self, client_id: int) -> Optional[Client]:
        """Get client by ID."""
        pass

    @abstractmethod
    def get_by_email(self, email: str) -> Optional[Client]:
        """Get client by email."""
        pass

    @abstractmethod
    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Client]:
        """List clients, optionally filtered by field equality."""
        pass


class IClientWriter(ABC):
    """Interface for client write operations."""

    @abstractmethod
    def create(self, client: Client) -> Client:
        """Create a new client."""
        pass

    @abstractmethod
    def update(self, client: Client) -> Client:
        """Update an existing client."""
        pass

    @abstractmethod
    def delete(self, client_id: int) -> bool:
        """Delete a client; owned properties keep existing without an owner."""
        pass


class IClientRepository(IClientReader, IClientWriter):
    """Complete client repository interface."""

    pass


class ITransactionRepository(ABC):
    """Interface for transaction persistence."""

    @abstractmethod
    def get_by_id(self, transaction_id: int) -> Optional[Transaction]:
        pass

    @abstractmethod
    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Transaction]:
        pass

    @abstractmethod
    def list_by_agent(self, agent_id: int) -> List[Transaction]:
        pass

    @abstractmethod
    def create(self, transaction: Transaction) -> Transaction:
        pass

    @abstractmethod
    def update(self, transaction: Transaction) -> Transaction:
        pass

    @abstractmethod
    def delete(self, transaction_id: int) -> bool:
        pass


class IAppointmentRepository(ABC):
    """Interface for appointment persistence."""

    @abstractmethod
    def get_by_id(self, appointment_id: int) -> Optional[Appointment]:
        pass

    @abstractmethod
    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Appointment]:
        pass

    @abstractmethod
    def list_by_property(self, property_id: int) -> List[Appointment]:
        pass

    @abstractmethod
    def get_by_date_range(self, start: datetime, end: datetime) -> List[Appointment]:
        pass

    @abstractmethod
    def create(self, appointment: Appointment) -> Appointment:
        pass

    @abstractmethod
    def update(self, appointment: Appointment) -> Appointment:
        pass

    @abstractmethod
    def delete(self, appointment_id: int) -> bool:
        pass


class IPropertyImageRepository(ABC):
    """Interface for property image persistence."""

    @abstractmethod
    def get_by_id(self, image_id: int) -> Optional[PropertyImage]:
        pass

    @abstractmethod
    def list_by_property(self, property_id: int) -> List[PropertyImage]:
        pass

    @abstractmethod
    def create(self, image: PropertyImage) -> PropertyImage:
        pass

    @abstractmethod
    def update(self, image: PropertyImage) -> PropertyImage:
        pass

    @abstractmethod
    def delete(self, image_id: int) -> bool:
        pass
