from __future__ import annotations
import logging
from typing import Any, Iterable, Mapping, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.sql import func

from core.database import Base
from core.exceptions import NotFoundException, StoreException, ValidationException

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


def list_rows(db: Session, model: type[ModelT]) -> list[ModelT]:
    pk = model.__mapper__.primary_key[0]
    return list(db.scalars(select(model).order_by(pk)))


def get_or_404(db: Session, model: type[ModelT], key: Any, label: str) -> ModelT:
    row = db.get(model, key)
    if row is None:
        raise NotFoundException(f"{label} not found")
    return row


def commit_and_refresh(db: Session, row: Base) -> None:
    try:
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("commit failed for %s", type(row).__name__)
        raise StoreException(str(exc)) from exc
    db.refresh(row)


def insert(db: Session, row: ModelT) -> ModelT:
    db.add(row)
    commit_and_refresh(db, row)
    return row


def apply_patch(row: Base, data: Mapping[str, Any], *, required: Iterable[str] = ()) -> None:
    """Apply every key the caller sent; ``updated_at`` is bumped even for an empty patch."""
    for field in required:
        if field in data and data[field] is None:
            raise ValidationException(f"{field} cannot be null")
    for k, v in data.items():
        setattr(row, k, v)
    row.updated_at = func.now()


def delete(db: Session, row: Base) -> None:
    db.delete(row)
    try:
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("delete failed for %s", type(row).__name__)
        raise StoreException(str(exc)) from exc
