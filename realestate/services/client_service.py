"""
Client service for business logic.

Clients are buyers, sellers, renters, landlords and investors. The only
cross-record rule is a unique email address.
"""

import logging
from typing import Any, Dict, List, Optional

from realestate.core.exceptions import ConflictError, EntityNotFoundError
from realestate.core.validation import ClientValidator
from realestate.domain.entities import Client as DomainClient
from realestate.domain.enums import ClientStatus, ClientType
from realestate.domain.interfaces import IClientRepository

from .common import coerce_filters, enum_filter, merge_for_update, strip_read_only

logger = logging.getLogger(__name__)

LIST_FILTERS = {
    "client_type": enum_filter(ClientType),
    "status": enum_filter(ClientStatus),
    "city": str,
    "lead_source": str,
}


class ClientService:
    """Application service for client-related use-cases."""

    def __init__(self, client_repo: IClientRepository) -> None:
        self.client_repo = client_repo

    def create_client(self, data: Dict[str, Any]) -> DomainClient:
        payload = strip_read_only(data, "client")
        cleaned = ClientValidator().validate(payload).raise_if_invalid("Client")
        self._ensure_unique_email(cleaned["email"])

        client = self.client_repo.create(DomainClient(**cleaned))
        logger.info(
            "Client created",
            extra={
                "context": {"client_id": client.id, "type": client.client_type.value}
            },
        )
        return client

    def get_client(self, client_id: int) -> DomainClient:
        """Get a specific client by ID."""
        client = self.client_repo.get_by_id(client_id)
        if client is None:
            raise EntityNotFoundError("Client", client_id)
        return client

    def list_clients(
        self, filters: Optional[Dict[str, Any]] = None
    ) -> List[DomainClient]:
        return self.client_repo.list(coerce_filters(filters, LIST_FILTERS))

    def update_client(self, client_id: int, changes: Dict[str, Any]) -> DomainClient:
        existing = self.get_client(client_id)
        patch = strip_read_only(changes, "client")
        cleaned = (
            ClientValidator()
            .validate(merge_for_update(existing, patch))
            .raise_if_invalid("Client")
        )
        self._ensure_unique_email(cleaned["email"], exclude_id=client_id)

        updated = self.client_repo.update(DomainClient(id=client_id, **cleaned))
        logger.info(
            "Client updated",
            extra={"context": {"client_id": client_id, "fields": sorted(patch)}},
        )
        return updated

    def delete_client(self, client_id: int) -> None:
        """Delete a client. Owned properties stay, with no owner."""
        if not self.client_repo.delete(client_id):
            raise EntityNotFoundError("Client", client_id)
        logger.info("Client deleted", extra={"context": {"client_id": client_id}})

    def _ensure_unique_email(self, email: str, exclude_id: Optional[int] = None) -> None:
        existing = self.client_repo.get_by_email(email)
        if existing is not None and existing.id != exclude_id:
            raise ConflictError("Client with this email already exists", field="email")
