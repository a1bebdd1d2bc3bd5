"""API routes."""

from app.api.evidence import router as evidence_router
from app.api.hello import router as hello_router

__all__ = ["evidence_router", "hello_router"]
