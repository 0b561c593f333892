"""Transaction repository implementation."""

from typing import List

from realestate.db.base import Transaction as DbTransaction
from realestate.domain.entities import Transaction as DomainTransaction
from realestate.domain.interfaces import ITransactionRepository

from .base import BaseRepository


class TransactionRepository(BaseRepository, ITransactionRepository):
    """Repository for Transaction persistence operations."""

    model = DbTransaction
    entity = DomainTransaction
    kind = "transaction"

    def list_by_agent(self, agent_id: int) -> List[DomainTransaction]:
        return self._all(self.db.query(DbTransaction).filter_by(agent_id=agent_id))
