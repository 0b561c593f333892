"""Client repository implementation.

Deleting a client never deletes properties: the ORM clears
``properties.client_id`` and the database sets transaction and
appointment references to NULL.
"""

from typing import Optional

from realestate.db.base import Client as DbClient
from realestate.domain.entities import Client as DomainClient
from realestate.domain.interfaces import IClientRepository

from .base import BaseRepository


class ClientRepository(BaseRepository, IClientRepository):
    """Repository for Client persistence operations."""

    model = DbClient
    entity = DomainClient
    kind = "client"
    unique_fields = (("email", "email"),)
    default_order = ("last_name", "first_name", "id")

    def get_by_email(self, email: str) -> Optional[DomainClient]:
        """Get client by email, returning domain entity."""
        if not email:
            return None
        db_client = (
            self.db.query(DbClient).filter_by(email=email.strip().lower()).first()
        )
        return self._to_domain(db_client)
