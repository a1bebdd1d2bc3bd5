"""Evidence validation, wire/row mapping and repository."""

from app.evidence.mapper import to_dto, to_entity
from app.evidence.repository import (
    EvidencePersistenceError,
    insert_evidence,
    list_evidence,
)
from app.evidence.validation import (
    EvidenceValidationError,
    parse_evidence,
    validate_evidence,
)

__all__ = [
    "EvidencePersistenceError",
    "EvidenceValidationError",
    "insert_evidence",
    "list_evidence",
    "parse_evidence",
    "to_dto",
    "to_entity",
    "validate_evidence",
]
