"""
Appointment controller for handling HTTP requests.
"""

from flask import Blueprint, request

from ..core.api_utils import api_response, json_body, query_datetime
from ..core.limiter_config import WRITE_LIMIT, limiter
from ..db.session import SessionLocal
from ..repositories.agent_repo import AgentRepository
from ..repositories.appointment_repo import AppointmentRepository
from ..repositories.client_repo import ClientRepository
from ..repositories.property_repo import PropertyRepository
from ..schemas.dtos import appointment_response
from ..services.appointment_service import AppointmentService

appointment_bp = Blueprint("appointments", __name__, url_prefix="/api/appointments")

_WRITE_METHODS = ["POST", "PUT", "PATCH", "DELETE"]


def _appointment_service(db) -> AppointmentService:
    return AppointmentService(
        AppointmentRepository(db),
        PropertyRepository(db),
        ClientRepository(db),
        AgentRepository(db),
    )


@appointment_bp.route("", methods=["GET"])
def list_appointments():
    """Optional filters: property_id, client_id, agent_id, appointment_type, status."""
    db = SessionLocal()
    try:
        appointments = _appointment_service(db).list_appointments(
            request.args.to_dict()
        )
        return api_response(
            True,
            f"{len(appointments)} appointment(s) found",
            [appointment_response(appt) for appt in appointments],
        )
    finally:
        db.close()


@appointment_bp.route("/between", methods=["GET"])
def appointments_between():
    """Appointments with ``start <= scheduled_at <= end`` (ISO-8601 query params)."""
    db = SessionLocal()
    try:
        appointments = _appointment_service(db).list_between(
            query_datetime("start", required=True), query_datetime("end", required=True)
        )
        return api_response(
            True,
            f"{len(appointments)} appointment(s) found",
            [appointment_response(appt) for appt in appointments],
        )
    finally:
        db.close()


@appointment_bp.route("", methods=["POST"])
@limiter.limit(WRITE_LIMIT, methods=_WRITE_METHODS)
def create_appointment():
    db = SessionLocal()
    try:
        appointment = _appointment_service(db).create_appointment(json_body())
        return api_response(
            True, "Appointment created", appointment_response(appointment), 201
        )
    finally:
        db.close()


@appointment_bp.route("/<int:appointment_id>", methods=["GET"])
def get_appointment(appointment_id: int):
    db = SessionLocal()
    try:
        appointment = _appointment_service(db).get_appointment(appointment_id)
        return api_response(True, "Appointment found", appointment_response(appointment))
    finally:
        db.close()


@appointment_bp.route("/<int:appointment_id>", methods=["PUT", "PATCH"])
@limiter.limit(WRITE_LIMIT, methods=_WRITE_METHODS)
def update_appointment(appointment_id: int):
    db = SessionLocal()
    try:
        appointment = _appointment_service(db).update_appointment(
            appointment_id, json_body()
        )
        return api_response(
            True, "Appointment updated", appointment_response(appointment)
        )
    finally:
        db.close()


@appointment_bp.route("/<int:appointment_id>", methods=["DELETE"])
@limiter.limit(WRITE_LIMIT, methods=_WRITE_METHODS)
def delete_appointment(appointment_id: int):
    db = SessionLocal()
    try:
        _appointment_service(db).delete_appointment(appointment_id)
        return api_response(True, "Appointment deleted")
    finally:
        db.close()


@appointment_bp.route("/<int:appointment_id>/cancel", methods=["POST"])
@limiter.limit(WRITE_LIMIT, methods=_WRITE_METHODS)
def cancel_appointment(appointment_id: int):
    db = SessionLocal()
    try:
        appointment = _appointment_service(db).cancel_appointment(appointment_id)
        return api_response(
            True, "Appointment cancelled", appointment_response(appointment)
        )
    finally:
        db.close()
