"""Property image repository implementation."""

from typing import List

from realestate.db.base import PropertyImage as DbPropertyImage
from realestate.domain.entities import PropertyImage as DomainPropertyImage
from realestate.domain.interfaces import IPropertyImageRepository

from .base import BaseRepository


class PropertyImageRepository(BaseRepository, IPropertyImageRepository):
    """Repository for PropertyImage persistence operations."""

    model = DbPropertyImage
    entity = DomainPropertyImage
    kind = "property_image"
    default_order = ("display_order", "id")

    def list_by_property(self, property_id: int) -> List[DomainPropertyImage]:
        """Images of a property in display order."""
        return self._all(self.db.query(DbPropertyImage).filter_by(property_id=property_id))
