"""Field validation for incoming evidence.

Rules mirror annotation-style constraints: a blank value fails the
"required" rule, and a present value outside its length bounds fails the
size rule. Both can fire for the same field (e.g. an empty testimony).
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from app.models.evidence import (
    CREATED_BY_MAX_LENGTH,
    TESTIMONY_MAX_LENGTH,
    TESTIMONY_MIN_LENGTH,
)
from app.schemas.evidence import EvidenceDTO, FieldViolation

TESTIMONY_REQUIRED = "Testimony is required"
TESTIMONY_LENGTH = (
    f"Testimony must be between {TESTIMONY_MIN_LENGTH} and {TESTIMONY_MAX_LENGTH} characters"
)
CREATED_BY_REQUIRED = "Created by is required"
CREATED_BY_LENGTH = f"Created by must be at most {CREATED_BY_MAX_LENGTH} characters"
TESTIMONY_ENCODING = "Testimony contains characters that are not valid UTF-8"
CREATED_BY_ENCODING = "Created by contains characters that are not valid UTF-8"
BODY_NOT_OBJECT = "Request body must be a JSON object"


class EvidenceValidationError(ValueError):
    """Raised when incoming evidence fails one or more field constraints."""

    def __init__(self, violations: list[FieldViolation]) -> None:
        self.violations = violations
        super().__init__("; ".join(f"{v.field}: {v.message}" for v in violations))


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def _is_encodable(value: str | None) -> bool:
    # JSON allows escaped lone surrogates, which no database text column accepts.
    if value is None:
        return True
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def validate_evidence(dto: EvidenceDTO) -> list[FieldViolation]:
    """Return every constraint violation in dto (empty list when valid).

    id and dateTime are not checked; the store assigns them.
    """
    violations: list[FieldViolation] = []

    if _is_blank(dto.testimony):
        violations.append(FieldViolation(field="testimony", message=TESTIMONY_REQUIRED))
    if dto.testimony is not None and not (
        TESTIMONY_MIN_LENGTH <= len(dto.testimony) <= TESTIMONY_MAX_LENGTH
    ):
        violations.append(FieldViolation(field="testimony", message=TESTIMONY_LENGTH))
    if not _is_encodable(dto.testimony):
        violations.append(FieldViolation(field="testimony", message=TESTIMONY_ENCODING))

    if _is_blank(dto.created_by):
        violations.append(FieldViolation(field="createdBy", message=CREATED_BY_REQUIRED))
    if dto.created_by is not None and len(dto.created_by) > CREATED_BY_MAX_LENGTH:
        violations.append(FieldViolation(field="createdBy", message=CREATED_BY_LENGTH))
    if not _is_encodable(dto.created_by):
        violations.append(FieldViolation(field="createdBy", message=CREATED_BY_ENCODING))

    return violations


def violations_from_pydantic(exc: ValidationError) -> list[FieldViolation]:
    """Flatten a pydantic ValidationError into field violations."""
    return [
        FieldViolation(
            field=".".join(str(part) for part in err.get("loc", ())) or "body",
            message=err.get("msg", "Invalid value"),
        )
        for err in exc.errors()
    ]


def parse_evidence(payload: Any) -> EvidenceDTO:
    """Parse and validate a decoded JSON request body.

    A missing body is treated as an empty object, so it fails the
    "required" rules instead of erroring. The client id is discarded
    unparsed. Raises EvidenceValidationError.
    """
    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        raise EvidenceValidationError([FieldViolation(field="body", message=BODY_NOT_OBJECT)])
    payload = {key: value for key, value in payload.items() if key != "id"}

    try:
        dto = EvidenceDTO.model_validate(payload)
    except ValidationError as exc:
        raise EvidenceValidationError(violations_from_pydantic(exc)) from exc

    violations = validate_evidence(dto)
    if violations:
        raise EvidenceValidationError(violations)
    return dto
