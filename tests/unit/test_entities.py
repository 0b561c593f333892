"""
Unit tests for derived behavior on domain entities.
"""

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

import pytest

from realestate.domain.entities import (
    Agent,
    Appointment,
    Client,
    Property,
    Transaction,
)
from realestate.domain.enums import (
    AppointmentStatus,
    PropertyType,
    TransactionStatus,
)


class TestAgent:
    def test_full_name(self):
        assert Agent(first_name="Ana", last_name="Lima").full_name == "Ana Lima"

    def test_license_valid_when_expiry_after_reference_date(self):
        agent = Agent(license_expiry_date=date(2030, 1, 2))
        assert agent.is_license_valid(on=date(2030, 1, 1)) is True

    def test_license_invalid_on_expiry_day(self):
        agent = Agent(license_expiry_date=date(2030, 1, 1))
        assert agent.is_license_valid(on=date(2030, 1, 1)) is False

    def test_license_invalid_after_expiry(self):
        agent = Agent(license_expiry_date=date(2020, 1, 1))
        assert agent.is_license_valid(on=date(2020, 6, 1)) is False

    def test_license_without_expiry_is_invalid(self):
        assert Agent().is_license_valid() is False

    def test_license_defaults_to_today(self):
        agent = Agent(license_expiry_date=date.today() + timedelta(days=30))
        assert agent.is_license_valid() is True


class TestProperty:
    def test_short_description(self):
        prop = Property(bedrooms=3, bathrooms=2, property_type=PropertyType.HOUSE)
        assert prop.short_description == "3 bed, 2 bath house"

    def test_short_description_without_type(self):
        assert Property(bedrooms=1, bathrooms=1).short_description == "1 bed, 1 bath"

    def test_full_address_with_all_parts(self):
        prop = Property(
            address="742 Evergreen Terrace",
            city="Springfield",
            state="OR",
            postal_code="97403",
            country="USA",
        )
        assert prop.full_address == "742 Evergreen Terrace, Springfield, OR 97403, USA"

    def test_full_address_skips_missing_parts(self):
        prop = Property(address="1 Loop Rd", city="Austin", state="TX", postal_code="")
        assert prop.full_address == "1 Loop Rd, Austin, TX"


class TestClient:
    def test_can_afford_inside_budget(self):
        client = Client(budget_min=Decimal("100"), budget_max=Decimal("200"))
        assert client.can_afford(Decimal("150")) is True

    def test_cannot_afford_above_budget(self):
        client = Client(budget_min=Decimal("100"), budget_max=Decimal("200"))
        assert client.can_afford(Decimal("200.01")) is False

    def test_open_budget_affords_anything(self):
        assert Client().can_afford(Decimal("99999999")) is True


class TestTransaction:
    @pytest.mark.parametrize(
        "status,closed",
        [
            (TransactionStatus.PENDING, False),
            (TransactionStatus.IN_PROGRESS, False),
            (TransactionStatus.COMPLETED, True),
            (TransactionStatus.CANCELLED, True),
        ],
    )
    def test_is_closed(self, status, closed):
        assert Transaction(status=status).is_closed is closed

    def test_calculate_commission_rounds_half_up(self):
        transaction = Transaction(amount=Decimal("1000.50"))
        assert transaction.calculate_commission(Decimal("2.5")) == Decimal("25.01")


class TestAppointment:
    def test_end_time(self):
        start = datetime(2030, 5, 1, 10, 0, tzinfo=timezone.utc)
        appointment = Appointment(scheduled_at=start, duration_minutes=45)
        assert appointment.end_time == start + timedelta(minutes=45)

    def test_end_time_without_schedule(self):
        assert Appointment().end_time is None

    def test_is_upcoming(self):
        at = datetime(2030, 5, 1, 9, 0, tzinfo=timezone.utc)
        appointment = Appointment(
            scheduled_at=at + timedelta(hours=1), status=AppointmentStatus.SCHEDULED
        )
        assert appointment.is_upcoming(at) is True

    def test_cancelled_is_not_upcoming(self):
        at = datetime(2030, 5, 1, 9, 0, tzinfo=timezone.utc)
        appointment = Appointment(
            scheduled_at=at + timedelta(hours=1), status=AppointmentStatus.CANCELLED
        )
        assert appointment.is_upcoming(at) is False

    def test_past_is_not_upcoming(self):
        at = datetime(2030, 5, 1, 9, 0, tzinfo=timezone.utc)
        appointment = Appointment(scheduled_at=at - timedelta(minutes=1))
        assert appointment.is_upcoming(at) is False
