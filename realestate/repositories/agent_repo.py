"""Agent repository implementation.

Emails are stored trimmed and lower-cased so lookups and the unique
constraint agree regardless of how callers typed the address.
"""

from datetime import date
from typing import List, Optional

from realestate.db.base import Agent as DbAgent
from realestate.domain.entities import Agent as DomainAgent
from realestate.domain.interfaces import IAgentRepository

from .base import BaseRepository


class AgentRepository(BaseRepository, IAgentRepository):
    """Repository for Agent persistence operations."""

    model = DbAgent
    entity = DomainAgent
    kind = "agent"
    unique_fields = (("email", "email"), ("license_number", "license number"))
    default_order = ("last_name", "first_name", "id")

    def get_by_email(self, email: str) -> Optional[DomainAgent]:
        """Get agent by email, returning domain entity."""
        if not email:
            return None
        db_agent = (
            self.db.query(DbAgent).filter_by(email=email.strip().lower()).first()
        )
        return self._to_domain(db_agent)

    def get_by_license_number(self, license_number: str) -> Optional[DomainAgent]:
        """Get agent by license number, returning domain entity."""
        if not license_number:
            return None
        db_agent = (
            self.db.query(DbAgent)
            .filter_by(license_number=license_number.strip())
            .first()
        )
        return self._to_domain(db_agent)

    def list_with_expired_license(self, on: date) -> List[DomainAgent]:
        """Agents whose license expiry date is on or before ``on``."""
        query = self.db.query(DbAgent).filter(DbAgent.license_expiry_date <= on)
        return self._all(query)
