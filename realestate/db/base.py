from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import (
    Boolean,
    Date,
    DateTime,
    Enum,
    ForeignKey,
    Integer,
    Numeric,
    String,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from realestate.domain.enums import (
    AgentStatus,
    AppointmentStatus,
    AppointmentType,
    ClientStatus,
    ClientType,
    ListingType,
    PropertyCondition,
    PropertyStatus,
    PropertyType,
    TransactionStatus,
    TransactionType,
)

from .session import Base


def _enum_column(enum_cls):
    """Persist enums by name in a VARCHAR so SQLite and PostgreSQL behave alike."""
    return Enum(enum_cls, native_enum=False, length=30, validate_strings=True)


class Agent(Base):
    """Agent model for database persistence"""

    __tablename__ = "agents"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    first_name: Mapped[str] = mapped_column(String(50), nullable=False)
    last_name: Mapped[str] = mapped_column(String(50), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    phone_number: Mapped[str] = mapped_column(String(20), nullable=False)
    license_number: Mapped[str] = mapped_column(
        String(100), unique=True, nullable=False
    )
    license_expiry_date: Mapped[date] = mapped_column(Date, nullable=False)
    address: Mapped[str] = mapped_column(String(500), nullable=False)
    city: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    state: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    postal_code: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    hire_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    commission_rate: Mapped[Optional[Decimal]] = mapped_column(
        Numeric(5, 2), nullable=True
    )
    specialization: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    bio: Mapped[Optional[str]] = mapped_column(String(1000), nullable=True)
    profile_image_url: Mapped[Optional[str]] = mapped_column(
        String(500), nullable=True
    )
    status: Mapped[AgentStatus] = mapped_column(
        _enum_column(AgentStatus), nullable=False, index=True
    )
    years_experience: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    languages_spoken: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    # Owned collections: deleting an agent deletes its listings and transactions
    properties: Mapped[List["Property"]] = relationship(
        "Property", cascade="all, delete-orphan", order_by="Property.id"
    )
    transactions: Mapped[List["Transaction"]] = relationship(
        "Transaction", cascade="all, delete-orphan", order_by="Transaction.id"
    )

    def __repr__(self):
        return (
            f"<Agent(id={self.id}, email='{self.email}', "
            f"license_number='{self.license_number}', status={self.status})>"
        )


class Client(Base):
    """Client model for database persistence"""

    __tablename__ = "clients"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    first_name: Mapped[str] = mapped_column(String(50), nullable=False)
    last_name: Mapped[str] = mapped_column(String(50), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    phone_number: Mapped[str] = mapped_column(String(20), nullable=False)
    address: Mapped[str] = mapped_column(String(500), nullable=False)
    city: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    state: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    postal_code: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    client_type: Mapped[ClientType] = mapped_column(
        _enum_column(ClientType), nullable=False, index=True
    )
    budget_min: Mapped[Optional[Decimal]] = mapped_column(
        Numeric(15, 2), nullable=True
    )
    budget_max: Mapped[Optional[Decimal]] = mapped_column(
        Numeric(15, 2), nullable=True
    )
    preferred_locations: Mapped[Optional[str]] = mapped_column(
        String(255), nullable=True
    )
    property_preferences: Mapped[Optional[str]] = mapped_column(
        String(1000), nullable=True
    )
    status: Mapped[ClientStatus] = mapped_column(
        _enum_column(ClientStatus), nullable=False, index=True
    )
    lead_source: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(String(1000), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    # Not an ownership: removing a client only clears properties.client_id
    owned_properties: Mapped[List["Property"]] = relationship(
        "Property", order_by="Property.id"
    )

    def __repr__(self):
        return f"<Client(id={self.id}, email='{self.email}', type={self.client_type})>"


class Property(Base):
    """Property (listing) model for database persistence"""

    __tablename__ = "properties"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(String(2000), nullable=True)
    address: Mapped[str] = mapped_column(String(500), nullable=False)
    city: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    state: Mapped[str] = mapped_column(String(255), nullable=False)
    postal_code: Mapped[str] = mapped_column(String(20), nullable=False)
    country: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    property_type: Mapped[PropertyType] = mapped_column(
        _enum_column(PropertyType), nullable=False, index=True
    )
    listing_type: Mapped[ListingType] = mapped_column(
        _enum_column(ListingType), nullable=False
    )
    price: Mapped[Decimal] = mapped_column(Numeric(15, 2), nullable=False)
    bedrooms: Mapped[int] = mapped_column(Integer, nullable=False)
    bathrooms: Mapped[int] = mapped_column(Integer, nullable=False)
    square_feet: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    lot_size: Mapped[Optional[Decimal]] = mapped_column(Numeric(12, 2), nullable=True)
    year_built: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    garage_spaces: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    parking_spaces: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    property_features: Mapped[Optional[str]] = mapped_column(
        String(1000), nullable=True
    )
    appliances_included: Mapped[Optional[str]] = mapped_column(
        String(500), nullable=True
    )
    heating_type: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    cooling_type: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    flooring_type: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    property_condition: Mapped[Optional[PropertyCondition]] = mapped_column(
        _enum_column(PropertyCondition), nullable=True
    )
    hoa_fee: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2), nullable=True)
    property_taxes: Mapped[Optional[Decimal]] = mapped_column(
        Numeric(10, 2), nullable=True
    )
    listing_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    available_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    status: Mapped[PropertyStatus] = mapped_column(
        _enum_column(PropertyStatus), nullable=False, index=True
    )
    virtual_tour_url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    main_image_url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    agent_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("agents.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    owner_id: Mapped[Optional[int]] = mapped_column(
        "client_id",
        Integer,
        ForeignKey("clients.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    images: Mapped[List["PropertyImage"]] = relationship(
        "PropertyImage",
        cascade="all, delete-orphan",
        order_by=lambda: [PropertyImage.display_order, PropertyImage.id],
    )
    appointments: Mapped[List["Appointment"]] = relationship(
        "Appointment", cascade="all, delete-orphan", order_by="Appointment.id"
    )

    def __repr__(self):
        return (
            f"<Property(id={self.id}, title='{self.title}', price={self.price}, "
            f"agent_id={self.agent_id}, status={self.status})>"
        )


class Transaction(Base):
    """Transaction model for sales, purchases, rentals and leases"""

    __tablename__ = "transactions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    agent_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("agents.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    property_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("properties.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    client_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("clients.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    transaction_type: Mapped[TransactionType] = mapped_column(
        _enum_column(TransactionType), nullable=False
    )
    amount: Mapped[Decimal] = mapped_column(Numeric(15, 2), nullable=False)
    commission_amount: Mapped[Optional[Decimal]] = mapped_column(
        Numeric(15, 2), nullable=True
    )
    status: Mapped[TransactionStatus] = mapped_column(
        _enum_column(TransactionStatus), nullable=False, index=True
    )
    transaction_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    closing_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(String(1000), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return (
            f"<Transaction(id={self.id}, agent_id={self.agent_id}, "
            f"amount={self.amount}, status={self.status})>"
        )


class Appointment(Base):
    """Appointment model for property viewings and meetings"""

    __tablename__ = "appointments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    property_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("properties.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    client_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("clients.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    agent_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("agents.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    scheduled_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, index=True
    )
    duration_minutes: Mapped[int] = mapped_column(Integer, nullable=False)
    appointment_type: Mapped[AppointmentType] = mapped_column(
        _enum_column(AppointmentType), nullable=False
    )
    status: Mapped[AppointmentStatus] = mapped_column(
        _enum_column(AppointmentStatus), nullable=False, index=True
    )
    notes: Mapped[Optional[str]] = mapped_column(String(1000), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return (
            f"<Appointment(id={self.id}, property_id={self.property_id}, "
            f"scheduled_at={self.scheduled_at}, status={self.status})>"
        )


class PropertyImage(Base):
    """Image attached to a property listing"""

    __tablename__ = "property_images"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    property_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("properties.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    image_url: Mapped[str] = mapped_column(String(500), nullable=False)
    caption: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    display_order: Mapped[int] = mapped_column(Integer, nullable=False)
    is_primary: Mapped[bool] = mapped_column(Boolean, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return f"<PropertyImage(id={self.id}, property_id={self.property_id})>"
