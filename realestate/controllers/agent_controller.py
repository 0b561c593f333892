"""
Agent controller for handling HTTP requests.

This controller:
- Handles HTTP concerns only (parsing, status codes, JSON envelopes)
- Delegates every rule to AgentService
- Lets domain errors propagate to the app-level error handlers
"""

from flask import Blueprint, request

from ..core.api_utils import api_response, json_body, parse_date
from ..core.limiter_config import WRITE_LIMIT, limiter
from ..db.session import SessionLocal
from ..repositories.agent_repo import AgentRepository
from ..repositories.client_repo import ClientRepository
from ..repositories.property_image_repo import PropertyImageRepository
from ..repositories.property_repo import PropertyRepository
from ..repositories.transaction_repo import TransactionRepository
from ..schemas.dtos import (
    agent_response,
    license_status_response,
    property_response,
    transaction_response,
)
from ..services.agent_service import AgentService
from ..services.property_service import PropertyService
from ..services.transaction_service import TransactionService

agent_bp = Blueprint("agents", __name__, url_prefix="/api/agents")

_WRITE_METHODS = ["POST", "PUT", "PATCH", "DELETE"]


def _agent_service(db) -> AgentService:
    return AgentService(AgentRepository(db))


@agent_bp.route("", methods=["GET"])
def list_agents():
    """List agents. Optional filters: status, city, state, specialization."""
    db = SessionLocal()
    try:
        agents = _agent_service(db).list_agents(request.args.to_dict())
        return api_response(
            True,
            f"{len(agents)} agent(s) found",
            [agent_response(agent) for agent in agents],
        )
    finally:
        db.close()


@agent_bp.route("", methods=["POST"])
@limiter.limit(WRITE_LIMIT, methods=_WRITE_METHODS)
def create_agent():
    db = SessionLocal()
    try:
        agent = _agent_service(db).create_agent(json_body())
        return api_response(True, "Agent created", agent_response(agent), 201)
    finally:
        db.close()


@agent_bp.route("/<int:agent_id>", methods=["GET"])
def get_agent(agent_id: int):
    db = SessionLocal()
    try:
        agent = _agent_service(db).get_agent(agent_id)
        return api_response(True, "Agent found", agent_response(agent))
    finally:
        db.close()


@agent_bp.route("/<int:agent_id>", methods=["PUT", "PATCH"])
@limiter.limit(WRITE_LIMIT, methods=_WRITE_METHODS)
def update_agent(agent_id: int):
    """Partial update: fields not sent keep their current values."""
    db = SessionLocal()
    try:
        agent = _agent_service(db).update_agent(agent_id, json_body())
        return api_response(True, "Agent updated", agent_response(agent))
    finally:
        db.close()


@agent_bp.route("/<int:agent_id>", methods=["DELETE"])
@limiter.limit(WRITE_LIMIT, methods=_WRITE_METHODS)
def delete_agent(agent_id: int):
    db = SessionLocal()
    try:
        _agent_service(db).delete_agent(agent_id)
        return api_response(True, "Agent deleted")
    finally:
        db.close()


@agent_bp.route("/<int:agent_id>/license", methods=["GET"])
def license_status(agent_id: int):
    """License validity today, or on ``?on=YYYY-MM-DD``."""
    db = SessionLocal()
    try:
        status = _agent_service(db).license_status(
            agent_id, parse_date(request.args.get("on"), "on")
        )
        message = "License is valid" if status["is_valid"] else "License has expired"
        return api_response(True, message, license_status_response(status))
    finally:
        db.close()


@agent_bp.route("/expired-licenses", methods=["GET"])
def expired_licenses():
    db = SessionLocal()
    try:
        agents = _agent_service(db).list_expired_licenses(
            parse_date(request.args.get("on"), "on")
        )
        return api_response(
            True,
            f"{len(agents)} agent(s) with an expired license",
            [agent_response(agent) for agent in agents],
        )
    finally:
        db.close()


@agent_bp.route("/<int:agent_id>/properties", methods=["GET"])
def agent_properties(agent_id: int):
    db = SessionLocal()
    try:
        service = PropertyService(
            PropertyRepository(db),
            AgentRepository(db),
            ClientRepository(db),
            PropertyImageRepository(db),
        )
        properties = service.list_by_agent(agent_id)
        return api_response(
            True,
            f"{len(properties)} property(ies) found",
            [property_response(prop) for prop in properties],
        )
    finally:
        db.close()


@agent_bp.route("/<int:agent_id>/transactions", methods=["GET"])
def agent_transactions(agent_id: int):
    db = SessionLocal()
    try:
        service = TransactionService(
            TransactionRepository(db),
            AgentRepository(db),
            PropertyRepository(db),
            ClientRepository(db),
        )
        transactions = service.list_by_agent(agent_id)
        return api_response(
            True,
            f"{len(transactions)} transaction(s) found",
            [transaction_response(tx) for tx in transactions],
        )
    finally:
        db.close()
