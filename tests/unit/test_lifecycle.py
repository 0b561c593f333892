"""
Unit tests for create/update bookkeeping (timestamps and defaults).
"""

from datetime import datetime, timedelta, timezone

from realestate.domain.entities import (
    Agent,
    Appointment,
    Client,
    Property,
    PropertyImage,
    Transaction,
)
from realestate.domain.enums import (
    AgentStatus,
    AppointmentStatus,
    AppointmentType,
    ClientStatus,
    PropertyStatus,
    TransactionStatus,
)
from realestate.domain.lifecycle import stamp_created, stamp_updated

INSTANT = datetime(2030, 3, 15, 12, 30, tzinfo=timezone.utc)


def test_stamp_created_sets_equal_timestamps():
    agent = stamp_created(Agent(), "agent", now=INSTANT)
    assert agent.created_at == INSTANT
    assert agent.updated_at == agent.created_at


def test_agent_defaults():
    agent = stamp_created(Agent(), "agent", now=INSTANT)
    assert agent.status == AgentStatus.ACTIVE
    assert agent.hire_date == INSTANT.date()


def test_existing_values_are_kept():
    agent = stamp_created(
        Agent(status=AgentStatus.ON_LEAVE, hire_date=INSTANT.date() - timedelta(days=9)),
        "agent",
        now=INSTANT,
    )
    assert agent.status == AgentStatus.ON_LEAVE
    assert agent.hire_date == INSTANT.date() - timedelta(days=9)


def test_property_client_and_transaction_defaults():
    prop = stamp_created(Property(), "property", now=INSTANT)
    client = stamp_created(Client(), "client", now=INSTANT)
    transaction = stamp_created(Transaction(), "transaction", now=INSTANT)

    assert prop.status == PropertyStatus.ACTIVE
    assert prop.listing_date == INSTANT.date()
    assert client.status == ClientStatus.ACTIVE
    assert transaction.status == TransactionStatus.PENDING
    assert transaction.transaction_date == INSTANT.date()


def test_appointment_and_image_defaults():
    appointment = stamp_created(Appointment(), "appointment", now=INSTANT)
    image = stamp_created(PropertyImage(), "property_image", now=INSTANT)

    assert appointment.status == AppointmentStatus.SCHEDULED
    assert appointment.appointment_type == AppointmentType.VIEWING
    assert appointment.duration_minutes == 60
    assert image.display_order == 0
    assert image.is_primary is False


def test_stamp_updated_leaves_created_at():
    agent = stamp_created(Agent(), "agent", now=INSTANT)
    later = INSTANT + timedelta(minutes=5)
    stamp_updated(agent, now=later)
    assert agent.created_at == INSTANT
    assert agent.updated_at == later


def test_stamp_updated_is_strictly_increasing_for_same_instant():
    agent = stamp_created(Agent(), "agent", now=INSTANT)
    stamp_updated(agent, now=INSTANT)
    assert agent.updated_at > agent.created_at


def test_stamp_updated_never_moves_backwards():
    agent = stamp_created(Agent(), "agent", now=INSTANT)
    stamp_updated(agent, now=INSTANT - timedelta(hours=1))
    assert agent.updated_at > INSTANT


def test_stamp_updated_accepts_naive_previous_value():
    agent = Agent(updated_at=datetime(2030, 3, 15, 12, 30))
    stamp_updated(agent, now=datetime(2000, 1, 1, tzinfo=timezone.utc))
    assert agent.updated_at.tzinfo is not None
