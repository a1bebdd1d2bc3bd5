"""Evidence ORM: one testimony with its author and creation time.

Insert-only; rows are never updated or deleted.
"""

from __future__ import annotations

import uuid
from datetime import UTC, datetime

from sqlalchemy import CheckConstraint, DateTime, Index, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.db.session import Base

TESTIMONY_MIN_LENGTH = 20
TESTIMONY_MAX_LENGTH = 255
CREATED_BY_MAX_LENGTH = 100


class Evidence(Base):
    """A testimony recorded by an author; id and date_time assigned on insert."""

    __tablename__ = "evidence"

    __table_args__ = (
        Index("ix_evidence_date_time", "date_time"),
        CheckConstraint(
            f"length(testimony) BETWEEN {TESTIMONY_MIN_LENGTH} AND {TESTIMONY_MAX_LENGTH}",
            name="ck_evidence_testimony_length",
        ),
        CheckConstraint(
            f"length(created_by) BETWEEN 1 AND {CREATED_BY_MAX_LENGTH}",
            name="ck_evidence_created_by_length",
        ),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    testimony: Mapped[str] = mapped_column(String(TESTIMONY_MAX_LENGTH), nullable=False)
    date_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        nullable=False,
    )
    created_by: Mapped[str] = mapped_column(String(CREATED_BY_MAX_LENGTH), nullable=False)
