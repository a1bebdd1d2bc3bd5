"""Translation between the wire form (EvidenceDTO) and the persisted form (Evidence)."""

from __future__ import annotations

from datetime import UTC, datetime

from app.models.evidence import Evidence
from app.schemas.evidence import EvidenceDTO


def _as_utc(value: datetime | None) -> datetime | None:
    # SQLite drops tzinfo on read; stored values are always UTC.
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def to_entity(dto: EvidenceDTO) -> Evidence:
    """Build an unsaved Evidence row. The wire id and dateTime are ignored."""
    return Evidence(testimony=dto.testimony, created_by=dto.created_by)


def to_dto(entity: Evidence) -> EvidenceDTO:
    return EvidenceDTO(
        id=str(entity.id) if entity.id is not None else None,
        testimony=entity.testimony,
        date_time=_as_utc(entity.date_time),
        created_by=entity.created_by,
    )
