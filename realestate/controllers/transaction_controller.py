"""
Transaction controller for handling HTTP requests.
"""

from flask import Blueprint, request

from ..core.api_utils import api_response, json_body, parse_date
from ..core.limiter_config import WRITE_LIMIT, limiter
from ..db.session import SessionLocal
from ..repositories.agent_repo import AgentRepository
from ..repositories.client_repo import ClientRepository
from ..repositories.property_repo import PropertyRepository
from ..repositories.transaction_repo import TransactionRepository
from ..schemas.dtos import transaction_response
from ..services.transaction_service import TransactionService

transaction_bp = Blueprint("transactions", __name__, url_prefix="/api/transactions")

_WRITE_METHODS = ["POST", "PUT", "PATCH", "DELETE"]


def _transaction_service(db) -> TransactionService:
    return TransactionService(
        TransactionRepository(db),
        AgentRepository(db),
        PropertyRepository(db),
        ClientRepository(db),
    )


@transaction_bp.route("", methods=["GET"])
def list_transactions():
    """Optional filters: agent_id, property_id, client_id, transaction_type, status."""
    db = SessionLocal()
    try:
        transactions = _transaction_service(db).list_transactions(
            request.args.to_dict()
        )
        return api_response(
            True,
            f"{len(transactions)} transaction(s) found",
            [transaction_response(tx) for tx in transactions],
        )
    finally:
        db.close()


@transaction_bp.route("", methods=["POST"])
@limiter.limit(WRITE_LIMIT, methods=_WRITE_METHODS)
def create_transaction():
    db = SessionLocal()
    try:
        transaction = _transaction_service(db).create_transaction(json_body())
        return api_response(
            True, "Transaction created", transaction_response(transaction), 201
        )
    finally:
        db.close()


@transaction_bp.route("/<int:transaction_id>", methods=["GET"])
def get_transaction(transaction_id: int):
    db = SessionLocal()
    try:
        transaction = _transaction_service(db).get_transaction(transaction_id)
        return api_response(True, "Transaction found", transaction_response(transaction))
    finally:
        db.close()


@transaction_bp.route("/<int:transaction_id>", methods=["PUT", "PATCH"])
@limiter.limit(WRITE_LIMIT, methods=_WRITE_METHODS)
def update_transaction(transaction_id: int):
    db = SessionLocal()
    try:
        transaction = _transaction_service(db).update_transaction(
            transaction_id, json_body()
        )
        return api_response(
            True, "Transaction updated", transaction_response(transaction)
        )
    finally:
        db.close()


@transaction_bp.route("/<int:transaction_id>", methods=["DELETE"])
@limiter.limit(WRITE_LIMIT, methods=_WRITE_METHODS)
def delete_transaction(transaction_id: int):
    db = SessionLocal()
    try:
        _transaction_service(db).delete_transaction(transaction_id)
        return api_response(True, "Transaction deleted")
    finally:
        db.close()


@transaction_bp.route("/<int:transaction_id>/complete", methods=["POST"])
@limiter.limit(WRITE_LIMIT, methods=_WRITE_METHODS)
def complete_transaction(transaction_id: int):
    """Optional body: {"closing_date": "YYYY-MM-DD"} (default: today)."""
    db = SessionLocal()
    try:
        payload = json_body(optional=True)
        closing_date = parse_date(payload.get("closing_date"), "closing_date")
        transaction = _transaction_service(db).complete_transaction(
            transaction_id, closing_date
        )
        return api_response(
            True, "Transaction completed", transaction_response(transaction)
        )
    finally:
        db.close()
