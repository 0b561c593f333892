"""
Property service for business logic.

Handles listings, their images and their owner assignment. A listing
always belongs to an existing agent; the owner is an optional client.
"""

import logging
from typing import Any, Dict, List, Optional

from realestate.core.exceptions import EntityNotFoundError
from realestate.core.validation import PropertyImageValidator, PropertyValidator
from realestate.domain.entities import Property as DomainProperty
from realestate.domain.entities import PropertyImage as DomainPropertyImage
from realestate.domain.enums import ListingType, PropertyStatus, PropertyType
from realestate.domain.interfaces import (
    IAgentRepository,
    IClientRepository,
    IPropertyImageRepository,
    IPropertyRepository,
)

from .common import (
    coerce_filters,
    decimal_filter,
    enum_filter,
    merge_for_update,
    require_reference,
    strip_read_only,
)

logger = logging.getLogger(__name__)

SEARCH_CRITERIA = {
    "city": str,
    "state": str,
    "property_type": enum_filter(PropertyType),
    "listing_type": enum_filter(ListingType),
    "status": enum_filter(PropertyStatus),
    "min_price": decimal_filter,
    "max_price": decimal_filter,
    "min_bedrooms": int,
    "min_bathrooms": int,
    "agent_id": int,
    "owner_id": int,
}


class PropertyService:
    """Application service for property listings."""

    def __init__(
        self,
        property_repo: IPropertyRepository,
        agent_repo: IAgentRepository,
        client_repo: IClientRepository,
        image_repo: IPropertyImageRepository,
    ) -> None:
        self.property_repo = property_repo
        self.agent_repo = agent_repo
        self.client_repo = client_repo
        self.image_repo = image_repo

    def create_property(self, data: Dict[str, Any]) -> DomainProperty:
        """Create a listing.

        Business Rules:
        - Field constraints hold (title length, price > 0, counts >= 0, ...)
        - The listing agent exists; the owner exists when given
        """
        payload = strip_read_only(data, "property")
        cleaned = PropertyValidator().validate(payload).raise_if_invalid("Property")
        self._check_references(cleaned)

        prop = self.property_repo.create(DomainProperty(**cleaned))
        logger.info(
            "Property created",
            extra={
                "context": {
                    "property_id": prop.id,
                    "agent_id": prop.agent_id,
                    "price": str(prop.price),
                }
            },
        )
        return prop

    def get_property(self, property_id: int) -> DomainProperty:
        prop = self.property_repo.get_by_id(property_id)
        if prop is None:
            raise EntityNotFoundError("Property", property_id)
        return prop

    def list_properties(
        self, criteria: Optional[Dict[str, Any]] = None
    ) -> List[DomainProperty]:
        """All listings, narrowed by any supported search criteria."""
        return self.property_repo.search(coerce_filters(criteria, SEARCH_CRITERIA))

    def list_by_agent(self, agent_id: int) -> List[DomainProperty]:
        if self.agent_repo.get_by_id(agent_id) is None:
            raise EntityNotFoundError("Agent", agent_id)
        return self.property_repo.list_by_agent(agent_id)

    def list_by_owner(self, client_id: int) -> List[DomainProperty]:
        if self.client_repo.get_by_id(client_id) is None:
            raise EntityNotFoundError("Client", client_id)
        return self.property_repo.list_by_owner(client_id)

    def list_within_budget(self, client_id: int) -> List[DomainProperty]:
        """Active listings priced inside the client's budget (open bounds allowed)."""
        client = self.client_repo.get_by_id(client_id)
        if client is None:
            raise EntityNotFoundError("Client", client_id)
        listings = self.property_repo.search({"status": PropertyStatus.ACTIVE})
        return [prop for prop in listings if client.can_afford(prop.price)]

    def update_property(
        self, property_id: int, changes: Dict[str, Any]
    ) -> DomainProperty:
        existing = self.get_property(property_id)
        patch = strip_read_only(changes, "property")
        cleaned = (
            PropertyValidator()
            .validate(merge_for_update(existing, patch))
            .raise_if_invalid("Property")
        )
        self._check_references(cleaned)

        updated = self.property_repo.update(DomainProperty(id=property_id, **cleaned))
        logger.info(
            "Property updated",
            extra={"context": {"property_id": property_id, "fields": sorted(patch)}},
        )
        return updated

    def delete_property(self, property_id: int) -> None:
        """Delete a listing with its images and appointments."""
        if not self.property_repo.delete(property_id):
            raise EntityNotFoundError("Property", property_id)
        logger.info("Property deleted", extra={"context": {"property_id": property_id}})

    def assign_owner(self, property_id: int, client_id: int) -> DomainProperty:
        return self.update_property(property_id, {"owner_id": client_id})

    def clear_owner(self, property_id: int) -> DomainProperty:
        return self.update_property(property_id, {"owner_id": None})

    # ------------------------------------------------------------------ images

    def add_image(self, property_id: int, data: Dict[str, Any]) -> DomainPropertyImage:
        self.get_property(property_id)
        payload = strip_read_only(data, "property_image")
        payload["property_id"] = property_id
        cleaned = (
            PropertyImageValidator().validate(payload).raise_if_invalid("Property image")
        )

        image = self.image_repo.create(DomainPropertyImage(**cleaned))
        logger.info(
            "Property image added",
            extra={"context": {"property_id": property_id, "image_id": image.id}},
        )
        return image

    def list_images(self, property_id: int) -> List[DomainPropertyImage]:
        """Images in display order (ties broken by id)."""
        self.get_property(property_id)
        return self.image_repo.list_by_property(property_id)

    def remove_image(self, property_id: int, image_id: int) -> None:
        image = self.image_repo.get_by_id(image_id)
        if image is None or image.property_id != property_id:
            raise EntityNotFoundError("Property image", image_id)
        self.image_repo.delete(image_id)
        logger.info(
            "Property image removed",
            extra={"context": {"property_id": property_id, "image_id": image_id}},
        )

    def _check_references(self, cleaned: Dict[str, Any]) -> None:
        require_reference(self.agent_repo, cleaned.get("agent_id"), "agent_id", "Agent")
        require_reference(self.client_repo, cleaned.get("owner_id"), "owner_id", "Client")
