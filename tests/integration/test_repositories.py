"""
Integration tests for the SQLAlchemy repositories against in-memory SQLite.
"""

from datetime import date, timedelta
from decimal import Decimal

import pytest

from realestate.core.config import now as app_now
from realestate.core.exceptions import ConflictError
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
    ClientType,
    ListingType,
    PropertyStatus,
    PropertyType,
    TransactionStatus,
    TransactionType,
)
from realestate.repositories import (
    AgentRepository,
    AppointmentRepository,
    ClientRepository,
    PropertyImageRepository,
    PropertyRepository,
    TransactionRepository,
)

pytestmark = pytest.mark.repositories


def _agent(n: int = 1, **overrides) -> Agent:
    values = dict(
        first_name="Alice",
        last_name=f"Walker{n}",
        email=f"alice{n}@example-realty.com",
        phone_number=f"+151255501{n:02d}",
        license_number=f"LIC-{n:06d}",
        license_expiry_date=date.today() + timedelta(days=365),
        address="100 Main St",
    )
    values.update(overrides)
    return Agent(**values)


def _client(n: int = 1, **overrides) -> Client:
    values = dict(
        first_name="Brian",
        last_name=f"Lopez{n}",
        email=f"brian{n}@example.com",
        phone_number=f"+173755501{n:02d}",
        address="22 Elm St",
        client_type=ClientType.BUYER,
    )
    values.update(overrides)
    return Client(**values)


def _property(agent_id: int, **overrides) -> Property:
    values = dict(
        title="Charming bungalow",
        address="742 Evergreen Terrace",
        city="Austin",
        state="TX",
        postal_code="78704",
        property_type=PropertyType.HOUSE,
        listing_type=ListingType.SALE,
        price=Decimal("350000.00"),
        bedrooms=3,
        bathrooms=2,
        agent_id=agent_id,
    )
    values.update(overrides)
    return Property(**values)


@pytest.fixture
def repos(db_session):
    return {
        "agent": AgentRepository(db_session),
        "client": ClientRepository(db_session),
        "property": PropertyRepository(db_session),
        "image": PropertyImageRepository(db_session),
        "transaction": TransactionRepository(db_session),
        "appointment": AppointmentRepository(db_session),
    }


class TestCreateDefaults:
    def test_first_save_sets_defaults_and_equal_timestamps(self, repos):
        agent = repos["agent"].create(_agent())

        assert agent.id is not None
        assert agent.status == AgentStatus.ACTIVE
        assert agent.hire_date is not None
        assert agent.created_at is not None
        assert agent.created_at == agent.updated_at

    def test_defaults_for_every_kind(self, repos):
        agent = repos["agent"].create(_agent())
        client = repos["client"].create(_client())
        prop = repos["property"].create(_property(agent.id))
        image = repos["image"].create(
            PropertyImage(property_id=prop.id, image_url="https://img.test/a.jpg")
        )
        transaction = repos["transaction"].create(
            Transaction(
                agent_id=agent.id,
                transaction_type=TransactionType.SALE,
                amount=Decimal("1000"),
            )
        )
        appointment = repos["appointment"].create(
            Appointment(property_id=prop.id, scheduled_at=app_now() + timedelta(days=1))
        )

        assert client.status == ClientStatus.ACTIVE
        assert prop.status == PropertyStatus.ACTIVE
        assert prop.listing_date is not None
        assert image.display_order == 0
        assert image.is_primary is False
        assert transaction.status == TransactionStatus.PENDING
        assert transaction.transaction_date is not None
        assert appointment.status == AppointmentStatus.SCHEDULED
        assert appointment.appointment_type == AppointmentType.VIEWING
        assert appointment.duration_minutes == 60

    def test_price_round_trips_exactly(self, repos):
        agent = repos["agent"].create(_agent())
        prop = repos["property"].create(_property(agent.id, price=Decimal("0.01")))

        assert repos["property"].get_by_id(prop.id).price == Decimal("0.01")


class TestUpdateTimestamps:
    def test_updated_at_strictly_increases_and_created_at_is_kept(self, repos):
        agent = repos["agent"].create(_agent())
        original_created = agent.created_at

        agent.bio = "Luxury homes"
        first = repos["agent"].update(agent)
        first.bio = "Luxury homes and condos"
        second = repos["agent"].update(first)

        assert first.updated_at > original_created
        assert second.updated_at > first.updated_at
        assert second.created_at == original_created

    def test_caller_cannot_rewrite_created_at(self, repos):
        agent = repos["agent"].create(_agent())
        original_created = agent.created_at

        agent.created_at = original_created - timedelta(days=30)
        updated = repos["agent"].update(agent)

        assert updated.created_at == original_created


class TestUniqueness:
    def test_duplicate_agent_email(self, repos):
        repos["agent"].create(_agent(1))

        with pytest.raises(ConflictError) as exc_info:
            repos["agent"].create(_agent(2, email="alice1@example-realty.com"))

        assert exc_info.value.field == "email"

    def test_duplicate_license_number(self, repos):
        repos["agent"].create(_agent(1))

        with pytest.raises(ConflictError) as exc_info:
            repos["agent"].create(_agent(2, license_number="LIC-000001"))

        assert exc_info.value.field == "license_number"

    def test_session_is_usable_after_conflict(self, repos):
        repos["agent"].create(_agent(1))
        with pytest.raises(ConflictError):
            repos["client"].create(_client(1))
            repos["client"].create(_client(2, email="brian1@example.com"))

        assert repos["agent"].create(_agent(3)).id is not None

    def test_lookup_by_email_ignores_case(self, repos):
        repos["agent"].create(_agent(1))
        assert repos["agent"].get_by_email("ALICE1@example-realty.com ") is not None


class TestDeleteRules:
    def test_agent_delete_cascades_to_properties_and_transactions(self, repos):
        agent = repos["agent"].create(_agent())
        prop = repos["property"].create(_property(agent.id))
        transaction = repos["transaction"].create(
            Transaction(
                agent_id=agent.id,
                property_id=prop.id,
                transaction_type=TransactionType.SALE,
                amount=Decimal("1000"),
            )
        )

        assert repos["agent"].delete(agent.id) is True

        assert repos["property"].get_by_id(prop.id) is None
        assert repos["transaction"].get_by_id(transaction.id) is None

    def test_property_delete_keeps_agent(self, repos):
        agent = repos["agent"].create(_agent())
        prop = repos["property"].create(_property(agent.id))

        repos["property"].delete(prop.id)

        assert repos["agent"].get_by_id(agent.id) is not None

    def test_property_delete_cascades_to_images_and_appointments(self, repos):
        agent = repos["agent"].create(_agent())
        prop = repos["property"].create(_property(agent.id))
        image = repos["image"].create(
            PropertyImage(property_id=prop.id, image_url="https://img.test/a.jpg")
        )
        appointment = repos["appointment"].create(
            Appointment(property_id=prop.id, scheduled_at=app_now() + timedelta(days=1))
        )

        repos["property"].delete(prop.id)

        assert repos["image"].get_by_id(image.id) is None
        assert repos["appointment"].get_by_id(appointment.id) is None

    def test_property_delete_nulls_transaction_reference(self, repos):
        agent = repos["agent"].create(_agent())
        prop = repos["property"].create(_property(agent.id))
        transaction = repos["transaction"].create(
            Transaction(
                agent_id=agent.id,
                property_id=prop.id,
                transaction_type=TransactionType.SALE,
                amount=Decimal("1000"),
            )
        )

        repos["property"].delete(prop.id)

        assert repos["transaction"].get_by_id(transaction.id).property_id is None

    def test_client_delete_keeps_owned_property(self, repos):
        agent = repos["agent"].create(_agent())
        client = repos["client"].create(_client())
        prop = repos["property"].create(_property(agent.id, owner_id=client.id))

        repos["client"].delete(client.id)

        remaining = repos["property"].get_by_id(prop.id)
        assert remaining is not None
        assert remaining.owner_id is None

    def test_delete_missing_returns_false(self, repos):
        assert repos["agent"].delete(12345) is False


class TestQueries:
    def test_images_in_display_order(self, repos):
        agent = repos["agent"].create(_agent())
        prop = repos["property"].create(_property(agent.id))
        for order, name in [(2, "c"), (0, "a"), (1, "b1"), (1, "b2")]:
            repos["image"].create(
                PropertyImage(
                    property_id=prop.id,
                    image_url=f"https://img.test/{name}.jpg",
                    display_order=order,
                )
            )

        urls = [image.image_url for image in repos["image"].list_by_property(prop.id)]

        assert urls == [
            "https://img.test/a.jpg",
            "https://img.test/b1.jpg",
            "https://img.test/b2.jpg",
            "https://img.test/c.jpg",
        ]

    def test_search(self, repos):
        agent = repos["agent"].create(_agent())
        repos["property"].create(_property(agent.id, price=Decimal("200000"), bedrooms=2))
        big = repos["property"].create(
            _property(agent.id, price=Decimal("600000"), bedrooms=4)
        )
        repos["property"].create(
            _property(agent.id, city="Dallas", price=Decimal("650000"), bedrooms=5)
        )

        found = repos["property"].search(
            {"city": "austin", "min_price": Decimal("300000"), "min_bedrooms": 3}
        )

        assert [prop.id for prop in found] == [big.id]

    def test_list_by_owner_and_agent(self, repos):
        agent = repos["agent"].create(_agent(1))
        other = repos["agent"].create(_agent(2))
        client = repos["client"].create(_client())
        owned = repos["property"].create(_property(agent.id, owner_id=client.id))
        repos["property"].create(_property(other.id))

        assert [p.id for p in repos["property"].list_by_owner(client.id)] == [owned.id]
        assert [p.id for p in repos["property"].list_by_agent(agent.id)] == [owned.id]

    def test_expired_licenses(self, repos):
        repos["agent"].create(_agent(1, license_expiry_date=date(2020, 1, 1)))
        valid = repos["agent"].create(_agent(2, license_expiry_date=date(2040, 1, 1)))

        expired = repos["agent"].list_with_expired_license(date(2030, 1, 1))

        assert valid.id not in [agent.id for agent in expired]
        assert len(expired) == 1

    def test_appointments_in_date_range(self, repos):
        agent = repos["agent"].create(_agent())
        prop = repos["property"].create(_property(agent.id))
        start = app_now() + timedelta(days=1)
        inside = repos["appointment"].create(
            Appointment(property_id=prop.id, scheduled_at=start + timedelta(hours=2))
        )
        repos["appointment"].create(
            Appointment(property_id=prop.id, scheduled_at=start + timedelta(days=5))
        )

        found = repos["appointment"].get_by_date_range(start, start + timedelta(days=1))

        assert [appt.id for appt in found] == [inside.id]

    def test_list_filters(self, repos):
        repos["client"].create(_client(1, client_type=ClientType.SELLER))
        buyer = repos["client"].create(_client(2))

        buyers = repos["client"].list({"client_type": ClientType.BUYER})

        assert [client.id for client in buyers] == [buyer.id]
