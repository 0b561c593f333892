"""
Appointment service for business logic.

Appointments belong to a property; client and agent are optional. New
appointments must be scheduled in the future.
"""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from realestate.core.exceptions import EntityNotFoundError
from realestate.core.validation import AppointmentValidator, ValidationError
from realestate.domain.entities import Appointment as DomainAppointment
from realestate.domain.enums import AppointmentStatus, AppointmentType
from realestate.domain.interfaces import (
    IAgentRepository,
    IAppointmentRepository,
    IClientRepository,
    IPropertyRepository,
)
from realestate.domain.lifecycle import in_app_tz

from .common import (
    coerce_filters,
    enum_filter,
    merge_for_update,
    require_reference,
    strip_read_only,
)

logger = logging.getLogger(__name__)

LIST_FILTERS = {
    "property_id": int,
    "client_id": int,
    "agent_id": int,
    "appointment_type": enum_filter(AppointmentType),
    "status": enum_filter(AppointmentStatus),
}


class AppointmentService:
    """Application service for appointment-related use-cases."""

    def __init__(
        self,
        appointment_repo: IAppointmentRepository,
        property_repo: IPropertyRepository,
        client_repo: IClientRepository,
        agent_repo: IAgentRepository,
    ) -> None:
        self.appointment_repo = appointment_repo
        self.property_repo = property_repo
        self.client_repo = client_repo
        self.agent_repo = agent_repo

    def create_appointment(self, data: Dict[str, Any]) -> DomainAppointment:
        """Create a new appointment.

        Business Rules:
        - Property must exist; client and agent must exist when given
        - Appointment must be in the future
        - Duration is positive (defaults to 60 minutes)
        """
        payload = strip_read_only(data, "appointment")
        cleaned = (
            AppointmentValidator().validate(payload).raise_if_invalid("Appointment")
        )
        self._check_references(cleaned)

        appointment = self.appointment_repo.create(DomainAppointment(**cleaned))
        logger.info(
            "Appointment created",
            extra={
                "context": {
                    "appointment_id": appointment.id,
                    "property_id": appointment.property_id,
                    "scheduled_at": appointment.scheduled_at.isoformat(),
                }
            },
        )
        return appointment

    def get_appointment(self, appointment_id: int) -> DomainAppointment:
        appointment = self.appointment_repo.get_by_id(appointment_id)
        if appointment is None:
            raise EntityNotFoundError("Appointment", appointment_id)
        return appointment

    def list_appointments(
        self, filters: Optional[Dict[str, Any]] = None
    ) -> List[DomainAppointment]:
        return self.appointment_repo.list(coerce_filters(filters, LIST_FILTERS))

    def list_by_property(self, property_id: int) -> List[DomainAppointment]:
        if self.property_repo.get_by_id(property_id) is None:
            raise EntityNotFoundError("Property", property_id)
        return self.appointment_repo.list_by_property(property_id)

    def list_between(self, start: datetime, end: datetime) -> List[DomainAppointment]:
        if in_app_tz(end) < in_app_tz(start):
            raise ValidationError("End must not be before start", field="end")
        return self.appointment_repo.get_by_date_range(start, end)

    def update_appointment(
        self, appointment_id: int, changes: Dict[str, Any]
    ) -> DomainAppointment:
        """Partial update; rescheduling must again land in the future."""
        existing = self.get_appointment(appointment_id)
        patch = strip_read_only(changes, "appointment")
        validator = AppointmentValidator(check_future_dates="scheduled_at" in patch)
        cleaned = validator.validate(merge_for_update(existing, patch)).raise_if_invalid(
            "Appointment"
        )
        self._check_references(cleaned)

        updated = self.appointment_repo.update(
            DomainAppointment(id=appointment_id, **cleaned)
        )
        logger.info(
            "Appointment updated",
            extra={
                "context": {"appointment_id": appointment_id, "fields": sorted(patch)}
            },
        )
        return updated

    def delete_appointment(self, appointment_id: int) -> None:
        if not self.appointment_repo.delete(appointment_id):
            raise EntityNotFoundError("Appointment", appointment_id)
        logger.info(
            "Appointment deleted", extra={"context": {"appointment_id": appointment_id}}
        )

    def cancel_appointment(self, appointment_id: int) -> DomainAppointment:
        """Cancel an appointment that has not already taken place."""
        existing = self.get_appointment(appointment_id)
        if existing.status in (AppointmentStatus.COMPLETED, AppointmentStatus.NO_SHOW):
            raise ValidationError(
                "Appointment has already taken place and cannot be cancelled",
                field="status",
            )
        if existing.status == AppointmentStatus.CANCELLED:
            return existing
        return self.update_appointment(
            appointment_id, {"status": AppointmentStatus.CANCELLED}
        )

    def _check_references(self, cleaned: Dict[str, Any]) -> None:
        require_reference(
            self.property_repo, cleaned.get("property_id"), "property_id", "Property"
        )
        require_reference(
            self.client_repo, cleaned.get("client_id"), "client_id", "Client"
        )
        require_reference(self.agent_repo, cleaned.get("agent_id"), "agent_id", "Agent")
