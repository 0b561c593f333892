"""
Domain entities - Pure business logic, no framework dependencies.

Each entity is the business representation of one persisted record,
independent of SQLAlchemy and Flask. Constraint rules live in
core.validation; timestamp and default bookkeeping lives in
domain.lifecycle.
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from realestate.core.config import now as app_now
from realestate.core.config import today as app_today

from .enums import (
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


@dataclass
class Agent:
    """Licensed real-estate professional who lists properties and runs transactions."""

    id: Optional[int] = None
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone_number: str = ""
    license_number: str = ""
    license_expiry_date: Optional[date] = None
    address: str = ""
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    hire_date: Optional[date] = None
    commission_rate: Optional[Decimal] = None
    specialization: Optional[str] = None
    bio: Optional[str] = None
    profile_image_url: Optional[str] = None
    status: Optional[AgentStatus] = None
    years_experience: Optional[int] = None
    languages_spoken: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def is_license_valid(self, on: Optional[date] = None) -> bool:
        """True iff the license expires strictly after ``on`` (default: today)."""
        if self.license_expiry_date is None:
            return False
        return self.license_expiry_date > (on or app_today())


@dataclass
class Property:
    """A listed real-estate unit with physical and commercial attributes."""

    id: Optional[int] = None
    title: str = ""
    description: Optional[str] = None
    address: str = ""
    city: str = ""
    state: str = ""
    postal_code: str = ""
    country: Optional[str] = None
    property_type: Optional[PropertyType] = None
    listing_type: Optional[ListingType] = None
    price: Optional[Decimal] = None
    bedrooms: Optional[int] = None
    bathrooms: Optional[int] = None
    square_feet: Optional[int] = None
    lot_size: Optional[Decimal] = None
    year_built: Optional[int] = None
    garage_spaces: Optional[int] = None
    parking_spaces: Optional[int] = None
    property_features: Optional[str] = None
    appliances_included: Optional[str] = None
    heating_type: Optional[str] = None
    cooling_type: Optional[str] = None
    flooring_type: Optional[str] = None
    property_condition: Optional[PropertyCondition] = None
    hoa_fee: Optional[Decimal] = None
    property_taxes: Optional[Decimal] = None
    listing_date: Optional[date] = None
    available_date: Optional[date] = None
    status: Optional[PropertyStatus] = None
    virtual_tour_url: Optional[str] = None
    main_image_url: Optional[str] = None
    agent_id: Optional[int] = None
    owner_id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def full_address(self) -> str:
        """Address, city, state, postal code and country, skipping unset parts."""
        result = self.address or ""
        if self.city:
            result += f", {self.city}"
        if self.state:
            result += f", {self.state}"
        if self.postal_code:
            result += f" {self.postal_code}"
        if self.country:
            result += f", {self.country}"
        return result

    @property
    def short_description(self) -> str:
        """e.g. ``"3 bed, 2 bath house"``."""
        summary = f"{self.bedrooms} bed, {self.bathrooms} bath"
        if self.property_type is not None:
            summary += f" {PropertyType(self.property_type).value.lower()}"
        return summary


@dataclass
class Client:
    """A buyer, seller, renter, landlord or investor working with agents."""

    id: Optional[int] = None
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone_number: str = ""
    address: str = ""
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    client_type: Optional[ClientType] = None
    budget_min: Optional[Decimal] = None
    budget_max: Optional[Decimal] = None
    preferred_locations: Optional[str] = None
    property_preferences: Optional[str] = None
    status: Optional[ClientStatus] = None
    lead_source: Optional[str] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def can_afford(self, price: Decimal) -> bool:
        """Whether ``price`` falls inside the client's budget (open bounds allowed)."""
        if self.budget_min is not None and price < self.budget_min:
            return False
        if self.budget_max is not None and price > self.budget_max:
            return False
        return True


@dataclass
class Transaction:
    """A sale, purchase, rental or lease handled by an agent."""

    id: Optional[int] = None
    agent_id: Optional[int] = None
    property_id: Optional[int] = None
    client_id: Optional[int] = None
    transaction_type: Optional[TransactionType] = None
    amount: Optional[Decimal] = None
    commission_amount: Optional[Decimal] = None
    status: Optional[TransactionStatus] = None
    transaction_date: Optional[date] = None
    closing_date: Optional[date] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_closed(self) -> bool:
        return self.status in (TransactionStatus.COMPLETED, TransactionStatus.CANCELLED)

    def calculate_commission(self, rate_percent: Decimal) -> Decimal:
        """Commission for ``rate_percent`` of the amount, rounded to cents."""
        amount = Decimal(self.amount or 0)
        value = amount * Decimal(rate_percent) / Decimal("100")
        return value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


@dataclass
class Appointment:
    """A scheduled visit or meeting about a property."""

    id: Optional[int] = None
    property_id: Optional[int] = None
    client_id: Optional[int] = None
    agent_id: Optional[int] = None
    scheduled_at: Optional[datetime] = None
    duration_minutes: Optional[int] = None
    appointment_type: Optional[AppointmentType] = None
    status: Optional[AppointmentStatus] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def end_time(self) -> Optional[datetime]:
        if self.scheduled_at is None:
            return None
        return self.scheduled_at + timedelta(minutes=self.duration_minutes or 0)

    def is_upcoming(self, at: Optional[datetime] = None) -> bool:
        """Scheduled in the future and not cancelled or finished."""
        if self.scheduled_at is None:
            return False
        if self.status in (
            AppointmentStatus.CANCELLED,
            AppointmentStatus.COMPLETED,
            AppointmentStatus.NO_SHOW,
        ):
            return False
        reference = at or app_now()
        scheduled = self.scheduled_at
        if scheduled.tzinfo is None and reference.tzinfo is not None:
            scheduled = scheduled.replace(tzinfo=reference.tzinfo)
        return scheduled > reference


@dataclass
class PropertyImage:
    """An image attached to a property listing."""

    id: Optional[int] = None
    property_id: Optional[int] = None
    image_url: str = ""
    caption: Optional[str] = None
    display_order: Optional[int] = None
    is_primary: Optional[bool] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
