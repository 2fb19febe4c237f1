"""Application-level referential integrity.

Foreign keys are declared on the tables but the store does not enforce them,
so every write goes through these checks first:

* ``ensure_references`` before an insert/update, for each parent id in the body
* ``DependentGuard.check`` before a delete, for each table pointing at the row
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import InstrumentedAttribute, Session

from core.exceptions import ConflictException, NotFoundException

logger = logging.getLogger(__name__)


def exists(db: Session, model: type, key: Any) -> bool:
    return db.get(model, key) is not None


@dataclass(frozen=True)
class Reference:
    model: type
    key: Optional[int]
    label: str


def ensure_references(db: Session, *refs: Reference) -> None:
    """Check every provided reference, then fail once if any is missing.

    References with ``key=None`` were not supplied by the caller and are skipped.
    When several are missing the first one in argument order is reported.
    """
    missing = [ref.label for ref in refs if ref.key is not None and not exists(db, ref.model, ref.key)]
    if missing:
        raise NotFoundException(f"{missing[0]} not found")


@dataclass(frozen=True)
class DependentGuard:
    column: InstrumentedAttribute
    message: str

    def count(self, db: Session, key: Any) -> int:
        stmt = select(func.count()).select_from(self.column.class_).where(self.column == key)
        return db.scalar(stmt) or 0

    def check(self, db: Session, key: Any) -> None:
        n = self.count(db, key)
        if n > 0:
            logger.info("delete refused: %d row(s) in %s still reference %s",
                        n, self.column.class_.__tablename__, key)
            raise ConflictException(self.message)
