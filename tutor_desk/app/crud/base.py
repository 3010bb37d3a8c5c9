"""Create/update/delete with tenant stamping and patch semantics."""

import logging
from collections.abc import Mapping
from typing import Any, Generic, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from tutor_desk.app.core.errors import StorageError, ValidationError
from tutor_desk.app.core.tenant import TenantContext
from tutor_desk.app.db.base_class import Base

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)


class _Unset:
    """Marker for "leave this field unchanged" in mapping patches."""

    def __repr__(self) -> str:
        return "UNSET"


UNSET = _Unset()

READ_ONLY_FIELDS = frozenset({"id", "tutor_id", "created_at"})


def clean_patch(patch: BaseModel | Mapping[str, Any]) -> dict[str, Any]:
    """Drop "undefined" entries from a patch, keeping explicit ``None`` values.

    Pydantic patches treat fields that were never set as undefined; mapping
    patches use ``UNSET``.
    """
    if isinstance(patch, BaseModel):
        return patch.model_dump(exclude_unset=True)
    return {field: value for field, value in patch.items() if value is not UNSET}


def _describe(exc: SQLAlchemyError) -> str:
    cause = getattr(exc, "orig", None) or exc
    return str(cause)


class CRUDBase(Generic[ModelType, CreateSchemaType]):
    def __init__(self, model: Type[ModelType], label: str, create_defaults: Mapping[str, Any] | None = None):
        self.model = model
        self.label = label
        self.create_defaults = dict(create_defaults or {})

    @property
    def updatable_fields(self) -> frozenset[str]:
        return frozenset(column.key for column in self.model.__table__.columns) - READ_ONLY_FIELDS

    def _storage_error(self, db: Session, verb: str, exc: SQLAlchemyError) -> StorageError:
        db.rollback()
        logger.error("Error %s %s: %s", verb, self.label, exc)
        return StorageError(f"Failed to {verb} {self.label}: {_describe(exc)}")

    def create(self, db: Session, *, tenant: TenantContext, obj_in: CreateSchemaType) -> ModelType:
        obj = self.model(tutor_id=tenant.tutor_id, **self.create_defaults, **obj_in.model_dump())
        try:
            db.add(obj)
            db.commit()
            db.refresh(obj)
        except SQLAlchemyError as exc:
            raise self._storage_error(db, "create", exc) from exc
        return obj

    def update(
        self,
        db: Session,
        *,
        tenant: TenantContext,
        id: str,
        patch: BaseModel | Mapping[str, Any],
    ) -> ModelType:
        update_data = clean_patch(patch)
        if not update_data:
            raise ValidationError("No fields provided to update")
        unknown = sorted(set(update_data) - self.updatable_fields)
        if unknown:
            raise ValidationError(f"Cannot update {self.label} fields: {', '.join(unknown)}")

        try:
            rows = (
                db.query(self.model)
                .filter(self.model.id == id, self.model.tutor_id == tenant.tutor_id)
                .all()
            )
            if len(rows) != 1:
                raise StorageError(f"Failed to update {self.label}: expected one row for id {id}, found {len(rows)}")
            db_obj = rows[0]
            for field, value in update_data.items():
                setattr(db_obj, field, value)
            db.commit()
            db.refresh(db_obj)
        except SQLAlchemyError as exc:
            raise self._storage_error(db, "update", exc) from exc
        return db_obj

    def delete(self, db: Session, *, tenant: TenantContext, id: str) -> bool:
        """Hard delete by id. Deleting an id that matches nothing still succeeds."""
        try:
            deleted = (
                db.query(self.model)
                .filter(self.model.id == id, self.model.tutor_id == tenant.tutor_id)
                .delete(synchronize_session=False)
            )
            db.commit()
        except SQLAlchemyError as exc:
            raise self._storage_error(db, "delete", exc) from exc
        if deleted == 0:
            logger.info("Delete of %s %s matched no rows", self.label, id)
        return True
