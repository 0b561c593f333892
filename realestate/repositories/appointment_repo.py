"""Appointment repository implementation."""

from datetime import datetime
from typing import List

from realestate.db.base import Appointment as DbAppointment
from realestate.domain.entities import Appointment as DomainAppointment
from realestate.domain.interfaces import IAppointmentRepository
from realestate.domain.lifecycle import in_app_tz

from .base import BaseRepository


class AppointmentRepository(BaseRepository, IAppointmentRepository):
    """Repository for Appointment persistence operations."""

    model = DbAppointment
    entity = DomainAppointment
    kind = "appointment"
    default_order = ("scheduled_at", "id")

    def list_by_property(self, property_id: int) -> List[DomainAppointment]:
        return self._all(self.db.query(DbAppointment).filter_by(property_id=property_id))

    def get_by_date_range(
        self, start: datetime, end: datetime
    ) -> List[DomainAppointment]:
        """Appointments scheduled between ``start`` and ``end`` inclusive."""
        # Stored values are APP_TZ wall-clock times on SQLite
        query = self.db.query(DbAppointment).filter(
            DbAppointment.scheduled_at >= in_app_tz(start),
            DbAppointment.scheduled_at <= in_app_tz(end),
        )
        return self._all(query)
