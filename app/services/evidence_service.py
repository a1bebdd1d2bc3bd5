"""Evidence service: save one record, list all records.

Thin pass-through to the repository; store errors propagate unchanged.
"""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from app.evidence.repository import insert_evidence, list_evidence
from app.models.evidence import Evidence

logger = logging.getLogger(__name__)


def save_evidence(db: Session, evidence: Evidence) -> Evidence:
    """Insert evidence; returns the stored row with id and date_time set."""
    saved = insert_evidence(db, evidence)
    logger.info("Evidence saved id=%s created_by=%s", saved.id, saved.created_by)
    return saved


def list_evidences(db: Session) -> list[Evidence]:
    return list_evidence(db)
