"""
Client controller for handling HTTP requests.

Handles HTTP concerns only; ClientService owns the rules.
"""

from flask import Blueprint, request

from ..core.api_utils import api_response, json_body
from ..core.limiter_config import WRITE_LIMIT, limiter
from ..db.session import SessionLocal
from ..repositories.agent_repo import AgentRepository
from ..repositories.client_repo import ClientRepository
from ..repositories.property_image_repo import PropertyImageRepository
from ..repositories.property_repo import PropertyRepository
from ..schemas.dtos import client_response, property_response
from ..services.client_service import ClientService
from ..services.property_service import PropertyService

client_bp = Blueprint("clients", __name__, url_prefix="/api/clients")

_WRITE_METHODS = ["POST", "PUT", "PATCH", "DELETE"]


def _client_service(db) -> ClientService:
    return ClientService(ClientRepository(db))


@client_bp.route("", methods=["GET"])
def list_clients():
    """List clients. Optional filters: client_type, status, city, lead_source."""
    db = SessionLocal()
    try:
        clients = _client_service(db).list_clients(request.args.to_dict())
        return api_response(
            True,
            f"{len(clients)} client(s) found",
            [client_response(client) for client in clients],
        )
    finally:
        db.close()


@client_bp.route("", methods=["POST"])
@limiter.limit(WRITE_LIMIT, methods=_WRITE_METHODS)
def create_client():
    db = SessionLocal()
    try:
        client = _client_service(db).create_client(json_body())
        return api_response(True, "Client created", client_response(client), 201)
    finally:
        db.close()


@client_bp.route("/<int:client_id>", methods=["GET"])
def get_client(client_id: int):
    db = SessionLocal()
    try:
        client = _client_service(db).get_client(client_id)
        return api_response(True, "Client found", client_response(client))
    finally:
        db.close()


@client_bp.route("/<int:client_id>", methods=["PUT", "PATCH"])
@limiter.limit(WRITE_LIMIT, methods=_WRITE_METHODS)
def update_client(client_id: int):
    db = SessionLocal()
    try:
        client = _client_service(db).update_client(client_id, json_body())
        return api_response(True, "Client updated", client_response(client))
    finally:
        db.close()


@client_bp.route("/<int:client_id>", methods=["DELETE"])
@limiter.limit(WRITE_LIMIT, methods=_WRITE_METHODS)
def delete_client(client_id: int):
    db = SessionLocal()
    try:
        _client_service(db).delete_client(client_id)
        return api_response(True, "Client deleted")
    finally:
        db.close()


@client_bp.route("/<int:client_id>/properties", methods=["GET"])
def owned_properties(client_id: int):
    """Properties owned by the client."""
    db = SessionLocal()
    try:
        service = PropertyService(
            PropertyRepository(db),
            AgentRepository(db),
            ClientRepository(db),
            PropertyImageRepository(db),
        )
        properties = service.list_by_owner(client_id)
        return api_response(
            True,
            f"{len(properties)} property(ies) found",
            [property_response(prop) for prop in properties],
        )
    finally:
        db.close()


@client_bp.route("/<int:client_id>/matching-properties", methods=["GET"])
def matching_properties(client_id: int):
    """Active listings the client can afford."""
    db = SessionLocal()
    try:
        service = PropertyService(
            PropertyRepository(db),
            AgentRepository(db),
            ClientRepository(db),
            PropertyImageRepository(db),
        )
        properties = service.list_within_budget(client_id)
        return api_response(
            True,
            f"{len(properties)} property(ies) within budget",
            [property_response(prop) for prop in properties],
        )
    finally:
        db.close()
