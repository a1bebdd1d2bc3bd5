"""Pydantic schemas for request/response validation."""

from app.schemas.evidence import EvidenceDTO, FieldViolation, ValidationErrorResponse

__all__ = [
    "EvidenceDTO",
    "FieldViolation",
    "ValidationErrorResponse",
]
