"""
Property controller for handling HTTP requests.

Covers listings, their images, their owner and their appointments.
"""

from flask import Blueprint, request

from ..core.api_utils import api_response, json_body
from ..core.limiter_config import WRITE_LIMIT, limiter
from ..core.validation import ValidationError
from ..db.session import SessionLocal
from ..repositories.agent_repo import AgentRepository
from ..repositories.appointment_repo import AppointmentRepository
from ..repositories.client_repo import ClientRepository
from ..repositories.property_image_repo import PropertyImageRepository
from ..repositories.property_repo import PropertyRepository
from ..schemas.dtos import (
    appointment_response,
    property_image_response,
    property_response,
)
from ..services.appointment_service import AppointmentService
from ..services.property_service import PropertyService

property_bp = Blueprint("properties", __name__, url_prefix="/api/properties")

_WRITE_METHODS = ["POST", "PUT", "PATCH", "DELETE"]


def _property_service(db) -> PropertyService:
    return PropertyService(
        PropertyRepository(db),
        AgentRepository(db),
        ClientRepository(db),
        PropertyImageRepository(db),
    )


@property_bp.route("", methods=["GET"])
def list_properties():
    """Search listings.

    Query parameters (all optional): city, state, property_type,
    listing_type, status, min_price, max_price, min_bedrooms,
    min_bathrooms, agent_id, owner_id.
    """
    db = SessionLocal()
    try:
        properties = _property_service(db).list_properties(request.args.to_dict())
        return api_response(
            True,
            f"{len(properties)} property(ies) found",
            [property_response(prop) for prop in properties],
        )
    finally:
        db.close()


@property_bp.route("", methods=["POST"])
@limiter.limit(WRITE_LIMIT, methods=_WRITE_METHODS)
def create_property():
    db = SessionLocal()
    try:
        prop = _property_service(db).create_property(json_body())
        return api_response(True, "Property created", property_response(prop), 201)
    finally:
        db.close()


@property_bp.route("/<int:property_id>", methods=["GET"])
def get_property(property_id: int):
    db = SessionLocal()
    try:
        prop = _property_service(db).get_property(property_id)
        return api_response(True, "Property found", property_response(prop))
    finally:
        db.close()


@property_bp.route("/<int:property_id>", methods=["PUT", "PATCH"])
@limiter.limit(WRITE_LIMIT, methods=_WRITE_METHODS)
def update_property(property_id: int):
    db = SessionLocal()
    try:
        prop = _property_service(db).update_property(property_id, json_body())
        return api_response(True, "Property updated", property_response(prop))
    finally:
        db.close()


@property_bp.route("/<int:property_id>", methods=["DELETE"])
@limiter.limit(WRITE_LIMIT, methods=_WRITE_METHODS)
def delete_property(property_id: int):
    db = SessionLocal()
    try:
        _property_service(db).delete_property(property_id)
        return api_response(True, "Property deleted")
    finally:
        db.close()


@property_bp.route("/<int:property_id>/owner", methods=["PUT"])
@limiter.limit(WRITE_LIMIT, methods=_WRITE_METHODS)
def assign_owner(property_id: int):
    """Body: {"client_id": <id>}."""
    db = SessionLocal()
    try:
        client_id = json_body().get("client_id")
        if client_id is None:
            raise ValidationError("Client ID is required", field="client_id")
        prop = _property_service(db).assign_owner(property_id, client_id)
        return api_response(True, "Owner assigned", property_response(prop))
    finally:
        db.close()


@property_bp.route("/<int:property_id>/owner", methods=["DELETE"])
@limiter.limit(WRITE_LIMIT, methods=_WRITE_METHODS)
def clear_owner(property_id: int):
    db = SessionLocal()
    try:
        prop = _property_service(db).clear_owner(property_id)
        return api_response(True, "Owner removed", property_response(prop))
    finally:
        db.close()


@property_bp.route("/<int:property_id>/images", methods=["GET"])
def list_images(property_id: int):
    db = SessionLocal()
    try:
        images = _property_service(db).list_images(property_id)
        return api_response(
            True,
            f"{len(images)} image(s) found",
            [property_image_response(image) for image in images],
        )
    finally:
        db.close()


@property_bp.route("/<int:property_id>/images", methods=["POST"])
@limiter.limit(WRITE_LIMIT, methods=_WRITE_METHODS)
def add_image(property_id: int):
    db = SessionLocal()
    try:
        image = _property_service(db).add_image(property_id, json_body())
        return api_response(
            True, "Image added", property_image_response(image), 201
        )
    finally:
        db.close()


@property_bp.route("/<int:property_id>/images/<int:image_id>", methods=["DELETE"])
@limiter.limit(WRITE_LIMIT, methods=_WRITE_METHODS)
def remove_image(property_id: int, image_id: int):
    db = SessionLocal()
    try:
        _property_service(db).remove_image(property_id, image_id)
        return api_response(True, "Image removed")
    finally:
        db.close()


@property_bp.route("/<int:property_id>/appointments", methods=["GET"])
def property_appointments(property_id: int):
    db = SessionLocal()
    try:
        service = AppointmentService(
            AppointmentRepository(db),
            PropertyRepository(db),
            ClientRepository(db),
            AgentRepository(db),
        )
        appointments = service.list_by_property(property_id)
        return api_response(
            True,
            f"{len(appointments)} appointment(s) found",
            [appointment_response(appt) for appt in appointments],
        )
    finally:
        db.close()
