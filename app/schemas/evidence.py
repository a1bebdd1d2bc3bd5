"""Evidence wire schemas. JSON field names follow the public API (camelCase)."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class EvidenceDTO(BaseModel):
    """Wire form of one evidence record.

    All fields are optional at parse time so that a missing value is reported
    as a validation violation (400) rather than a schema error. ``id`` and
    ``dateTime`` are assigned by the store and ignored on create.
    """

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: str | None = Field(None, description="Store-assigned identifier")
    testimony: str | None = Field(None, description="Testimony text (20-255 characters)")
    date_time: datetime | None = Field(
        None, alias="dateTime", description="Creation time (ISO-8601, UTC)"
    )
    created_by: str | None = Field(
        None, alias="createdBy", description="Author (1-100 characters)"
    )


class FieldViolation(BaseModel):
    """One failed field constraint."""

    field: str
    message: str


class ValidationErrorResponse(BaseModel):
    """Body of a 400 response."""

    detail: list[FieldViolation]
