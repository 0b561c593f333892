"""
Record lifecycle bookkeeping.

Repositories call these explicitly at the start of every insert and
update instead of relying on ORM lifecycle callbacks:

- ``stamp_created`` sets ``created_at``/``updated_at`` to the same instant
  and fills defaulted fields that are still unset.
- ``stamp_updated`` refreshes ``updated_at`` only; ``created_at`` is
  never modified after the first save.
"""

from datetime import datetime, timedelta
from typing import Any, Callable, Dict, Optional

from realestate.core.config import APP_TZ
from realestate.core.config import now as app_now

from .enums import (
    AgentStatus,
    AppointmentStatus,
    AppointmentType,
    ClientStatus,
    PropertyStatus,
    TransactionStatus,
)

DEFAULT_APPOINTMENT_MINUTES = 60

_Default = Callable[[datetime], Any]

# Per entity kind: attribute -> factory(creation instant)
CREATE_DEFAULTS: Dict[str, Dict[str, _Default]] = {
    "agent": {
        "status": lambda _now: AgentStatus.ACTIVE,
        "hire_date": lambda now: now.date(),
    },
    "property": {
        "status": lambda _now: PropertyStatus.ACTIVE,
        "listing_date": lambda now: now.date(),
    },
    "client": {
        "status": lambda _now: ClientStatus.ACTIVE,
    },
    "transaction": {
        "status": lambda _now: TransactionStatus.PENDING,
        "transaction_date": lambda now: now.date(),
    },
    "appointment": {
        "status": lambda _now: AppointmentStatus.SCHEDULED,
        "appointment_type": lambda _now: AppointmentType.VIEWING,
        "duration_minutes": lambda _now: DEFAULT_APPOINTMENT_MINUTES,
    },
    "property_image": {
        "display_order": lambda _now: 0,
        "is_primary": lambda _now: False,
    },
}


def in_app_tz(value: datetime) -> datetime:
    # SQLite hands back naive wall-clock values written in APP_TZ
    if value.tzinfo is None:
        return value.replace(tzinfo=APP_TZ)
    return value.astimezone(APP_TZ)


def stamp_created(record: Any, kind: str, now: Optional[datetime] = None) -> Any:
    """Prepare a record for its first save."""
    instant = now or app_now()
    record.created_at = instant
    record.updated_at = instant

    for attr, factory in CREATE_DEFAULTS.get(kind, {}).items():
        if getattr(record, attr, None) is None:
            setattr(record, attr, factory(instant))
    return record


def stamp_updated(record: Any, now: Optional[datetime] = None) -> Any:
    """Refresh ``updated_at`` so it is strictly greater than its previous value."""
    instant = now or app_now()
    previous = getattr(record, "updated_at", None)
    if previous is not None:
        previous = in_app_tz(previous)
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=APP_TZ)
        if instant <= previous:
            instant = previous + timedelta(microseconds=1)
    record.updated_at = instant
    return record
