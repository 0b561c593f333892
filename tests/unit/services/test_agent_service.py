"""
Unit tests for AgentService with mocked repositories.
"""

from datetime import date, timedelta
from unittest.mock import Mock

import pytest

from realestate.core.exceptions import ConflictError, EntityNotFoundError
from realestate.core.validation import ValidationError
from realestate.domain.entities import Agent
from realestate.services.agent_service import AgentService
from tests.factories.payload_factories import agent_payload
from tests.factories.repository_factories import AgentRepositoryFactory


@pytest.fixture
def mock_agent_repo() -> Mock:
    return AgentRepositoryFactory.create_mock_full()


@pytest.fixture
def service(mock_agent_repo) -> AgentService:
    return AgentService(mock_agent_repo)


def _existing_agent(**overrides) -> Agent:
    values = dict(
        id=7,
        first_name="Alice",
        last_name="Walker",
        email="alice@example-realty.com",
        phone_number="+15125550100",
        license_number="LIC-000007",
        license_expiry_date=date.today() - timedelta(days=3),
        address="100 Main St",
    )
    values.update(overrides)
    return Agent(**values)


@pytest.mark.services
class TestAgentServiceCreate:
    def test_create_passes_cleaned_entity_to_repository(self, service, mock_agent_repo):
        agent = service.create_agent(agent_payload(email="NEW@Example.com"))

        created = mock_agent_repo.create.call_args.args[0]
        assert isinstance(created, Agent)
        assert created.email == "new@example.com"
        assert agent.id == 1

    def test_duplicate_email_is_a_conflict(self, service, mock_agent_repo):
        mock_agent_repo.get_by_email.return_value = _existing_agent()

        with pytest.raises(ConflictError) as exc_info:
            service.create_agent(agent_payload())

        assert exc_info.value.field == "email"
        mock_agent_repo.create.assert_not_called()

    def test_duplicate_license_is_a_conflict(self, service, mock_agent_repo):
        mock_agent_repo.get_by_license_number.return_value = _existing_agent()

        with pytest.raises(ConflictError) as exc_info:
            service.create_agent(agent_payload())

        assert exc_info.value.field == "license_number"

    def test_invalid_payload_is_not_persisted(self, service, mock_agent_repo):
        with pytest.raises(ValidationError) as exc_info:
            service.create_agent(agent_payload(email="bad"))

        assert {"field": "email", "message": "Email should be valid"} in exc_info.value.errors
        mock_agent_repo.create.assert_not_called()

    def test_client_supplied_timestamps_are_dropped(self, service, mock_agent_repo):
        service.create_agent(agent_payload(created_at="1999-01-01T00:00:00", id=55))

        created = mock_agent_repo.create.call_args.args[0]
        assert created.created_at is None
        assert created.id == 1  # assigned by the mocked insert, not the caller


@pytest.mark.services
class TestAgentServiceUpdate:
    def test_update_missing_agent(self, service):
        with pytest.raises(EntityNotFoundError):
            service.update_agent(404, {"first_name": "Bob"})

    def test_expired_license_does_not_block_unrelated_edits(
        self, service, mock_agent_repo
    ):
        mock_agent_repo.get_by_id.return_value = _existing_agent()

        updated = service.update_agent(7, {"bio": "Top producer"})

        assert updated.bio == "Top producer"
        assert updated.license_expiry_date < date.today()

    def test_new_expiry_must_be_in_future(self, service, mock_agent_repo):
        mock_agent_repo.get_by_id.return_value = _existing_agent()

        with pytest.raises(ValidationError):
            service.update_agent(
                7, {"license_expiry_date": (date.today() - timedelta(days=1)).isoformat()}
            )

    def test_same_agent_keeps_its_own_email(self, service, mock_agent_repo):
        existing = _existing_agent()
        mock_agent_repo.get_by_id.return_value = existing
        mock_agent_repo.get_by_email.return_value = existing
        mock_agent_repo.get_by_license_number.return_value = existing

        service.update_agent(7, {"city": "Dallas"})

        mock_agent_repo.update.assert_called_once()


@pytest.mark.services
class TestAgentServiceQueries:
    def test_delete_missing_agent(self, service):
        with pytest.raises(EntityNotFoundError) as exc_info:
            service.delete_agent(9)
        assert exc_info.value.message == "Agent with ID 9 not found"

    def test_license_status(self, service, mock_agent_repo):
        mock_agent_repo.get_by_id.return_value = _existing_agent(
            license_expiry_date=date(2030, 6, 1)
        )

        status = service.license_status(7, on=date(2030, 5, 31))

        assert status["is_valid"] is True
        assert status["checked_on"] == date(2030, 5, 31)

    def test_list_rejects_unknown_filter(self, service):
        with pytest.raises(ValidationError) as exc_info:
            service.list_agents({"salary": "1"})
        assert exc_info.value.field == "salary"

    def test_list_converts_status_filter(self, service, mock_agent_repo):
        service.list_agents({"status": "active"})

        filters = mock_agent_repo.list.call_args.args[0]
        assert filters["status"].name == "ACTIVE"
