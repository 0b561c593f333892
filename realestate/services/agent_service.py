"""
Agent service for business logic.

Keeps agent rules (field validation, unique email and license number,
license validity) out of controllers and repositories, and works with
domain entities only.
"""

import logging
from datetime import date
from typing import Any, Dict, List, Optional

from realestate.core.config import today as app_today
from realestate.core.exceptions import ConflictError, EntityNotFoundError
from realestate.core.validation import AgentValidator
from realestate.domain.entities import Agent as DomainAgent
from realestate.domain.enums import AgentStatus
from realestate.domain.interfaces import IAgentRepository

from .common import coerce_filters, enum_filter, merge_for_update, strip_read_only

logger = logging.getLogger(__name__)

LIST_FILTERS = {
    "status": enum_filter(AgentStatus),
    "city": str,
    "state": str,
    "specialization": str,
}


class AgentService:
    """Application service for agent-related use-cases."""

    def __init__(self, agent_repo: IAgentRepository) -> None:
        self.agent_repo = agent_repo

    def create_agent(self, data: Dict[str, Any]) -> DomainAgent:
        """Create a new agent.

        Business Rules:
        - All field constraints hold, including a license that expires in the future
        - Email and license number are unique across agents
        """
        payload = strip_read_only(data, "agent")
        cleaned = AgentValidator().validate(payload).raise_if_invalid("Agent")
        self._ensure_unique(cleaned)

        agent = self.agent_repo.create(DomainAgent(**cleaned))
        logger.info(
            "Agent created",
            extra={"context": {"agent_id": agent.id}},
        )
        return agent

    def get_agent(self, agent_id: int) -> DomainAgent:
        agent = self.agent_repo.get_by_id(agent_id)
        if agent is None:
            raise EntityNotFoundError("Agent", agent_id)
        return agent

    def list_agents(self, filters: Optional[Dict[str, Any]] = None) -> List[DomainAgent]:
        return self.agent_repo.list(coerce_filters(filters, LIST_FILTERS))

    def update_agent(self, agent_id: int, changes: Dict[str, Any]) -> DomainAgent:
        """Apply a partial update and re-validate the whole record.

        The future-expiry rule only applies when the patch sets a new
        license expiry date, so an agent whose license lapsed can still be
        edited.
        """
        existing = self.get_agent(agent_id)
        patch = strip_read_only(changes, "agent")
        validator = AgentValidator(
            check_future_dates="license_expiry_date" in patch
        )
        cleaned = validator.validate(merge_for_update(existing, patch)).raise_if_invalid(
            "Agent"
        )
        self._ensure_unique(cleaned, exclude_id=agent_id)

        updated = self.agent_repo.update(DomainAgent(id=agent_id, **cleaned))
        logger.info(
            "Agent updated",
            extra={"context": {"agent_id": agent_id, "fields": sorted(patch)}},
        )
        return updated

    def delete_agent(self, agent_id: int) -> None:
        """Delete an agent; its properties and transactions go with it."""
        if not self.agent_repo.delete(agent_id):
            raise EntityNotFoundError("Agent", agent_id)
        logger.info("Agent deleted", extra={"context": {"agent_id": agent_id}})

    def license_status(self, agent_id: int, on: Optional[date] = None) -> Dict[str, Any]:
        """Whether the agent's license is valid on ``on`` (default: today)."""
        agent = self.get_agent(agent_id)
        reference = on or app_today()
        return {
            "agent_id": agent.id,
            "license_number": agent.license_number,
            "license_expiry_date": agent.license_expiry_date,
            "checked_on": reference,
            "is_valid": agent.is_license_valid(reference),
        }

    def list_expired_licenses(self, on: Optional[date] = None) -> List[DomainAgent]:
        return self.agent_repo.list_with_expired_license(on or app_today())

    def _ensure_unique(
        self, cleaned: Dict[str, Any], exclude_id: Optional[int] = None
    ) -> None:
        by_email = self.agent_repo.get_by_email(cleaned["email"])
        if by_email is not None and by_email.id != exclude_id:
            raise ConflictError("Agent with this email already exists", field="email")

        by_license = self.agent_repo.get_by_license_number(cleaned["license_number"])
        if by_license is not None and by_license.id != exclude_id:
            raise ConflictError(
                "Agent with this license number already exists",
                field="license_number",
            )
