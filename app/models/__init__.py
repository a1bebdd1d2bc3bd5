"""SQLAlchemy models."""

from app.models.evidence import Evidence

__all__ = [
    "Evidence",
]
