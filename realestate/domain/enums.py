"""
Closed enumerations used by domain entities and persisted as their names.
"""

from enum import Enum


class AgentStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    SUSPENDED = "SUSPENDED"
    ON_LEAVE = "ON_LEAVE"


class PropertyType(str, Enum):
    HOUSE = "HOUSE"
    APARTMENT = "APARTMENT"
    CONDO = "CONDO"
    TOWNHOUSE = "TOWNHOUSE"
    VILLA = "VILLA"
    DUPLEX = "DUPLEX"
    LAND = "LAND"
    COMMERCIAL = "COMMERCIAL"
    OFFICE = "OFFICE"
    WAREHOUSE = "WAREHOUSE"


class ListingType(str, Enum):
    SALE = "SALE"
    RENT = "RENT"
    LEASE = "LEASE"


class PropertyCondition(str, Enum):
    EXCELLENT = "EXCELLENT"
    GOOD = "GOOD"
    FAIR = "FAIR"
    NEEDS_REPAIR = "NEEDS_REPAIR"
    NEW_CONSTRUCTION = "NEW_CONSTRUCTION"


class PropertyStatus(str, Enum):
    ACTIVE = "ACTIVE"
    PENDING = "PENDING"
    SOLD = "SOLD"
    RENTED = "RENTED"
    WITHDRAWN = "WITHDRAWN"
    EXPIRED = "EXPIRED"


class ClientType(str, Enum):
    BUYER = "BUYER"
    SELLER = "SELLER"
    RENTER = "RENTER"
    LANDLORD = "LANDLORD"
    INVESTOR = "INVESTOR"


class ClientStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    PROSPECT = "PROSPECT"
    CLOSED = "CLOSED"


class TransactionType(str, Enum):
    SALE = "SALE"
    PURCHASE = "PURCHASE"
    RENTAL = "RENTAL"
    LEASE = "LEASE"


class TransactionStatus(str, Enum):
    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class AppointmentType(str, Enum):
    VIEWING = "VIEWING"
    OPEN_HOUSE = "OPEN_HOUSE"
    CONSULTATION = "CONSULTATION"
    INSPECTION = "INSPECTION"
    CLOSING = "CLOSING"


class AppointmentStatus(str, Enum):
    SCHEDULED = "SCHEDULED"
    CONFIRMED = "CONFIRMED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"
    NO_SHOW = "NO_SHOW"
