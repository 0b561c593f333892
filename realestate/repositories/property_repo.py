"""Property repository implementation with listing search."""

from typing import Any, Dict, List

from sqlalchemy import func

from realestate.db.base import Property as DbProperty
from realestate.domain.entities import Property as DomainProperty
from realestate.domain.interfaces import IPropertyRepository

from .base import BaseRepository

# Equality criteria accepted by search(); everything else is a range
_EXACT_CRITERIA = ("property_type", "listing_type", "status", "agent_id", "owner_id")


class PropertyRepository(BaseRepository, IPropertyRepository):
    """Repository for Property persistence operations."""

    model = DbProperty
    entity = DomainProperty
    kind = "property"

    def list_by_agent(self, agent_id: int) -> List[DomainProperty]:
        return self._all(self.db.query(DbProperty).filter_by(agent_id=agent_id))

    def list_by_owner(self, client_id: int) -> List[DomainProperty]:
        return self._all(self.db.query(DbProperty).filter_by(owner_id=client_id))

    def search(self, criteria: Dict[str, Any]) -> List[DomainProperty]:
        """Search listings.

        Supported criteria (all optional, combined with AND):
            city, state: case-insensitive exact match
            property_type, listing_type, status, agent_id, owner_id: exact match
            min_price, max_price: inclusive price range
            min_bedrooms, min_bathrooms: inclusive lower bounds
        """
        query = self.db.query(DbProperty)

        for field_name in ("city", "state"):
            value = criteria.get(field_name)
            if value:
                column = getattr(DbProperty, field_name)
                query = query.filter(func.lower(column) == value.strip().lower())

        for field_name in _EXACT_CRITERIA:
            value = criteria.get(field_name)
            if value is not None:
                query = query.filter(getattr(DbProperty, field_name) == value)

        if criteria.get("min_price") is not None:
            query = query.filter(DbProperty.price >= criteria["min_price"])
        if criteria.get("max_price") is not None:
            query = query.filter(DbProperty.price <= criteria["max_price"])
        if criteria.get("min_bedrooms") is not None:
            query = query.filter(DbProperty.bedrooms >= criteria["min_bedrooms"])
        if criteria.get("min_bathrooms") is not None:
            query = query.filter(DbProperty.bathrooms >= criteria["min_bathrooms"])

        return self._all(query)
