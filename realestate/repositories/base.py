"""Shared SQLAlchemy plumbing for the entity repositories.

Each concrete repository names its database model, its domain entity and
the lifecycle kind used for create-time defaults. Mapping between the two
is field-by-field on the dataclass definition, so domain entities and
database models must share attribute names.
"""

import dataclasses
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy.exc import IntegrityError

from realestate.core.exceptions import ConflictError, EntityNotFoundError
from realestate.domain.lifecycle import in_app_tz, stamp_created, stamp_updated

logger = logging.getLogger(__name__)

# Never copied from the domain entity onto the row
MANAGED_FIELDS = ("id", "created_at", "updated_at")


class BaseRepository:
    """CRUD mapping between one database model and one domain entity."""

    model: Any = None
    entity: Any = None
    kind: str = ""
    # (column, human label) pairs protected by a unique constraint
    unique_fields: Tuple[Tuple[str, str], ...] = ()
    default_order: Tuple[str, ...] = ("id",)

    def __init__(self, db_session) -> None:
        self.db = db_session

    # ------------------------------------------------------------------ mapping

    def _entity_fields(self) -> List[str]:
        return [f.name for f in dataclasses.fields(self.entity)]

    def _to_domain(self, row) -> Optional[Any]:
        """Convert DB model to domain entity."""
        if row is None:
            return None
        values = {}
        for name in self._entity_fields():
            value = getattr(row, name, None)
            if isinstance(value, datetime):
                value = in_app_tz(value)
            values[name] = value
        return self.entity(**values)

    def _copy_to_row(self, source, row) -> None:
        for name in self._entity_fields():
            if name in MANAGED_FIELDS:
                continue
            value = getattr(source, name, None)
            if isinstance(value, datetime):
                value = in_app_tz(value)
            setattr(row, name, value)

    def _ordering(self) -> List[Any]:
        return [getattr(self.model, name) for name in self.default_order]

    # ------------------------------------------------------------------ reads

    def _get_row(self, record_id: int):
        return self.db.query(self.model).filter_by(id=record_id).first()

    def get_by_id(self, record_id: int):
        """Get a record by id, returning the domain entity or None."""
        return self._to_domain(self._get_row(record_id))

    def _query(self, filters: Optional[Dict[str, Any]] = None):
        query = self.db.query(self.model)
        for key, value in (filters or {}).items():
            if value is None:
                continue
            column = getattr(self.model, key, None)
            if column is None or key not in self._entity_fields():
                raise ValueError(f"Unknown filter field: {key}")
            query = query.filter(column == value)
        return query

    def _all(self, query) -> List[Any]:
        return [self._to_domain(row) for row in query.order_by(*self._ordering()).all()]

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Any]:
        """List records, optionally filtered by field equality."""
        return self._all(self._query(filters))

    # ------------------------------------------------------------------ writes

    def create(self, record):
        """Insert a new record; timestamps and defaults are set here."""
        row = self.model()
        self._copy_to_row(record, row)
        stamp_created(row, self.kind)
        self.db.add(row)
        self._commit("create")
        self.db.refresh(row)
        created = self._to_domain(row)
        logger.info(
            f"{self.model.__name__} created",
            extra={"context": {"kind": self.kind, "id": created.id}},
        )
        return created

    def update(self, record):
        """Persist changes to an existing record; created_at never changes."""
        if not getattr(record, "id", None):
            raise ValueError(f"{self.model.__name__} ID is required for update")

        row = self._get_row(record.id)
        if row is None:
            raise EntityNotFoundError(self.model.__name__, record.id)

        self._copy_to_row(record, row)
        stamp_updated(row)
        self._commit("update")
        self.db.refresh(row)
        return self._to_domain(row)

    def delete(self, record_id: int) -> bool:
        """Delete a record by id. Returns False when it does not exist."""
        row = self._get_row(record_id)
        if row is None:
            return False

        self.db.delete(row)
        self._commit("delete")
        # Dependent rows may have been changed by ON DELETE rules
        self.db.expire_all()
        logger.info(
            f"{self.model.__name__} deleted",
            extra={"context": {"kind": self.kind, "id": record_id}},
        )
        return True

    def _commit(self, action: str) -> None:
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            field, label = self._conflicting_field(exc)
            logger.warning(
                "Integrity error on %s",
                action,
                extra={
                    "context": {
                        "kind": self.kind,
                        "field": field,
                        "error": str(exc.orig),
                    }
                },
            )
            if field:
                raise ConflictError(
                    f"{self.model.__name__} with this {label} already exists",
                    field=field,
                ) from exc
            raise ConflictError(
                f"{self.model.__name__} could not be saved: conflicting data"
            ) from exc

    def _conflicting_field(self, exc: IntegrityError) -> Tuple[Optional[str], str]:
        message = str(exc.orig).lower()
        table = self.model.__tablename__
        for column, label in self.unique_fields:
            # sqlite: "agents.email"; postgres: "agents_email_key"
            if f"{table}.{column}" in message or f"{table}_{column}" in message:
                return column, label
        return None, ""
