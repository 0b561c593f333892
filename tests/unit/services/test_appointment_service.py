"""
Unit tests for AppointmentService with mocked repositories.
"""

from datetime import timedelta
from unittest.mock import Mock

import pytest

from realestate.core.config import now as app_now
from realestate.core.exceptions import EntityNotFoundError
from realestate.core.validation import ValidationError
from realestate.domain.entities import Appointment, Property
from realestate.domain.enums import AppointmentStatus, AppointmentType
from realestate.services.appointment_service import AppointmentService
from tests.factories.payload_factories import appointment_payload
from tests.factories.repository_factories import (
    AgentRepositoryFactory,
    AppointmentRepositoryFactory,
    ClientRepositoryFactory,
    PropertyRepositoryFactory,
)


@pytest.fixture
def repos():
    property_repo = PropertyRepositoryFactory.create_mock_full()
    property_repo.get_by_id.side_effect = lambda property_id: Property(id=property_id)
    return {
        "appointment": AppointmentRepositoryFactory.create_mock_full(),
        "property": property_repo,
        "client": ClientRepositoryFactory.create_mock_full(),
        "agent": AgentRepositoryFactory.create_mock_full(),
    }


@pytest.fixture
def service(repos) -> AppointmentService:
    return AppointmentService(
        repos["appointment"], repos["property"], repos["client"], repos["agent"]
    )


def _booked(**overrides) -> Appointment:
    values = dict(
        id=6,
        property_id=2,
        scheduled_at=app_now() - timedelta(days=1),
        duration_minutes=60,
        appointment_type=AppointmentType.VIEWING,
        status=AppointmentStatus.SCHEDULED,
    )
    values.update(overrides)
    return Appointment(**values)


@pytest.mark.services
class TestAppointmentServiceCreate:
    def test_create_future_appointment(self, service, repos):
        appointment = service.create_appointment(appointment_payload(property_id=2))

        assert appointment.id == 1
        created = repos["appointment"].create.call_args.args[0]
        assert created.scheduled_at.tzinfo is not None

    def test_past_appointment_is_rejected(self, service, repos):
        payload = appointment_payload(
            property_id=2, scheduled_at=(app_now() - timedelta(hours=1)).isoformat()
        )

        with pytest.raises(ValidationError) as exc_info:
            service.create_appointment(payload)

        assert "Appointment must be scheduled in the future" in [
            error["message"] for error in exc_info.value.errors
        ]
        repos["appointment"].create.assert_not_called()

    def test_unknown_property(self, service, repos):
        repos["property"].get_by_id.side_effect = None
        repos["property"].get_by_id.return_value = None

        with pytest.raises(ValidationError) as exc_info:
            service.create_appointment(appointment_payload(property_id=50))

        assert exc_info.value.field == "property_id"

    def test_zero_duration(self, service):
        with pytest.raises(ValidationError):
            service.create_appointment(
                appointment_payload(property_id=2, duration_minutes=0)
            )


@pytest.mark.services
class TestAppointmentServiceUpdate:
    def test_notes_change_on_past_appointment(self, service, repos):
        repos["appointment"].get_by_id.return_value = _booked()

        updated = service.update_appointment(6, {"notes": "Bring the keys"})

        assert updated.notes == "Bring the keys"

    def test_reschedule_into_the_past(self, service, repos):
        repos["appointment"].get_by_id.return_value = _booked()

        with pytest.raises(ValidationError):
            service.update_appointment(
                6, {"scheduled_at": (app_now() - timedelta(days=2)).isoformat()}
            )


@pytest.mark.services
class TestCancelAppointment:
    def test_cancel_scheduled(self, service, repos):
        repos["appointment"].get_by_id.return_value = _booked()

        cancelled = service.cancel_appointment(6)

        assert cancelled.status == AppointmentStatus.CANCELLED

    def test_cancel_is_idempotent(self, service, repos):
        repos["appointment"].get_by_id.return_value = _booked(
            status=AppointmentStatus.CANCELLED
        )

        cancelled = service.cancel_appointment(6)

        assert cancelled.status == AppointmentStatus.CANCELLED
        repos["appointment"].update.assert_not_called()

    @pytest.mark.parametrize(
        "status", [AppointmentStatus.COMPLETED, AppointmentStatus.NO_SHOW]
    )
    def test_finished_appointment_cannot_be_cancelled(self, service, repos, status):
        repos["appointment"].get_by_id.return_value = _booked(status=status)

        with pytest.raises(ValidationError) as exc_info:
            service.cancel_appointment(6)

        assert exc_info.value.field == "status"

    def test_cancel_missing(self, service):
        with pytest.raises(EntityNotFoundError):
            service.cancel_appointment(404)


@pytest.mark.services
class TestAppointmentServiceQueries:
    def test_list_between(self, service, repos):
        start = app_now()
        end = start + timedelta(days=7)

        service.list_between(start, end)

        repos["appointment"].get_by_date_range.assert_called_once_with(start, end)

    def test_list_between_rejects_reversed_range(self, service, repos):
        start = app_now()

        with pytest.raises(ValidationError) as exc_info:
            service.list_between(start, start - timedelta(minutes=1))

        assert exc_info.value.field == "end"
        repos["appointment"].get_by_date_range.assert_not_called()

    def test_list_by_missing_property(self, service, repos):
        repos["property"].get_by_id.side_effect = None
        repos["property"].get_by_id.return_value = None

        with pytest.raises(EntityNotFoundError):
            service.list_by_property(3)
