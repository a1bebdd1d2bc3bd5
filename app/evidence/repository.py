"""Evidence repository: insert and full-table read over the evidence table.

Insert-only; there is no update, delete or single-row lookup.
"""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.evidence import Evidence

logger = logging.getLogger(__name__)


class EvidencePersistenceError(RuntimeError):
    """Raised when the database rejects or cannot complete an evidence operation."""

    pass


def insert_evidence(db: Session, evidence: Evidence) -> Evidence:
    """Persist one evidence row and return it with id and date_time populated.

    Rolls the session back and raises EvidencePersistenceError on any
    failure while writing (constraint violation, lost connection, or a
    driver error SQLAlchemy does not wrap, such as a parameter encode error).
    """
    try:
        db.add(evidence)
        db.commit()
        db.refresh(evidence)
    except Exception as exc:
        db.rollback()
        raise EvidencePersistenceError("Failed to insert evidence") from exc
    logger.debug("Inserted evidence id=%s", evidence.id)
    return evidence


def list_evidence(db: Session) -> list[Evidence]:
    """Return every evidence row in insertion order (id breaks timestamp ties)."""
    try:
        return db.query(Evidence).order_by(Evidence.date_time.asc(), Evidence.id.asc()).all()
    except SQLAlchemyError as exc:
        raise EvidencePersistenceError("Failed to list evidence") from exc
