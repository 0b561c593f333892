"""
Transaction service for business logic.

A transaction always has an agent; property and client references are
optional and survive the deletion of what they point to as NULL.
"""

import logging
from datetime import date
from typing import Any, Dict, List, Optional

from realestate.core.config import today as app_today
from realestate.core.exceptions import EntityNotFoundError
from realestate.core.validation import TransactionValidator, ValidationError
from realestate.domain.entities import Transaction as DomainTransaction
from realestate.domain.enums import TransactionStatus, TransactionType
from realestate.domain.interfaces import (
    IAgentRepository,
    IClientRepository,
    IPropertyRepository,
    ITransactionRepository,
)

from .common import (
    coerce_filters,
    enum_filter,
    merge_for_update,
    require_reference,
    strip_read_only,
)

logger = logging.getLogger(__name__)

LIST_FILTERS = {
    "agent_id": int,
    "property_id": int,
    "client_id": int,
    "transaction_type": enum_filter(TransactionType),
    "status": enum_filter(TransactionStatus),
}


class TransactionService:
    """Application service for sales, purchases, rentals and leases."""

    def __init__(
        self,
        transaction_repo: ITransactionRepository,
        agent_repo: IAgentRepository,
        property_repo: IPropertyRepository,
        client_repo: IClientRepository,
    ) -> None:
        self.transaction_repo = transaction_repo
        self.agent_repo = agent_repo
        self.property_repo = property_repo
        self.client_repo = client_repo

    def create_transaction(self, data: Dict[str, Any]) -> DomainTransaction:
        payload = strip_read_only(data, "transaction")
        cleaned = (
            TransactionValidator().validate(payload).raise_if_invalid("Transaction")
        )
        self._check_references(cleaned)

        transaction = self.transaction_repo.create(DomainTransaction(**cleaned))
        logger.info(
            "Transaction created",
            extra={
                "context": {
                    "transaction_id": transaction.id,
                    "agent_id": transaction.agent_id,
                    "type": transaction.transaction_type.value,
                }
            },
        )
        return transaction

    def get_transaction(self, transaction_id: int) -> DomainTransaction:
        transaction = self.transaction_repo.get_by_id(transaction_id)
        if transaction is None:
            raise EntityNotFoundError("Transaction", transaction_id)
        return transaction

    def list_transactions(
        self, filters: Optional[Dict[str, Any]] = None
    ) -> List[DomainTransaction]:
        return self.transaction_repo.list(coerce_filters(filters, LIST_FILTERS))

    def list_by_agent(self, agent_id: int) -> List[DomainTransaction]:
        if self.agent_repo.get_by_id(agent_id) is None:
            raise EntityNotFoundError("Agent", agent_id)
        return self.transaction_repo.list_by_agent(agent_id)

    def update_transaction(
        self, transaction_id: int, changes: Dict[str, Any]
    ) -> DomainTransaction:
        existing = self.get_transaction(transaction_id)
        patch = strip_read_only(changes, "transaction")
        cleaned = (
            TransactionValidator()
            .validate(merge_for_update(existing, patch))
            .raise_if_invalid("Transaction")
        )
        self._check_references(cleaned)

        updated = self.transaction_repo.update(
            DomainTransaction(id=transaction_id, **cleaned)
        )
        logger.info(
            "Transaction updated",
            extra={
                "context": {"transaction_id": transaction_id, "fields": sorted(patch)}
            },
        )
        return updated

    def delete_transaction(self, transaction_id: int) -> None:
        if not self.transaction_repo.delete(transaction_id):
            raise EntityNotFoundError("Transaction", transaction_id)
        logger.info(
            "Transaction deleted", extra={"context": {"transaction_id": transaction_id}}
        )

    def complete_transaction(
        self, transaction_id: int, closing_date: Optional[date] = None
    ) -> DomainTransaction:
        """Mark a transaction completed.

        The closing date defaults to the stored one, else today, but never
        earlier than the transaction date.
        """
        existing = self.get_transaction(transaction_id)
        if existing.status == TransactionStatus.CANCELLED:
            raise ValidationError(
                "Cancelled transaction cannot be completed", field="status"
            )
        if closing_date is None:
            closing_date = existing.closing_date or app_today()
            if existing.transaction_date and closing_date < existing.transaction_date:
                closing_date = existing.transaction_date
        return self.update_transaction(
            transaction_id,
            {"status": TransactionStatus.COMPLETED, "closing_date": closing_date},
        )

    def _check_references(self, cleaned: Dict[str, Any]) -> None:
        require_reference(self.agent_repo, cleaned.get("agent_id"), "agent_id", "Agent")
        require_reference(
            self.property_repo, cleaned.get("property_id"), "property_id", "Property"
        )
        require_reference(
            self.client_repo, cleaned.get("client_id"), "client_id", "Client"
        )
