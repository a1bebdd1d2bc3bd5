"""Evidence API routes: list all evidence, create one."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Request
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.evidence.mapper import to_dto, to_entity
from app.evidence.validation import EvidenceValidationError, parse_evidence
from app.schemas.evidence import EvidenceDTO, ValidationErrorResponse
from app.services.evidence_service import list_evidences, save_evidence

logger = logging.getLogger(__name__)

router = APIRouter()

CREATED_MESSAGE = "Evidence created correctly!"
CREATE_FAILED_MESSAGE = "Error creating evidence"


def _location_for(request: Request, evidence_id: object) -> str:
    """Absolute URL of a new record: the request URL plus /{id}."""
    base = str(request.url.replace(query="", fragment="")).rstrip("/")
    return f"{base}/{evidence_id}"


@router.get("", response_model=list[EvidenceDTO])
def api_list_evidence(db: Session = Depends(get_db)) -> list[EvidenceDTO]:
    """List every stored evidence record."""
    return [to_dto(row) for row in list_evidences(db)]


@router.post(
    "",
    status_code=201,
    response_class=PlainTextResponse,
    responses={400: {"model": ValidationErrorResponse}},
)
def api_create_evidence(
    request: Request,
    payload: Any = Body(None),
    db: Session = Depends(get_db),
) -> PlainTextResponse:
    """Create one evidence record.

    Returns 201 with a Location header, 400 listing every violated field
    constraint, or 500 when the store fails.
    """
    try:
        dto = parse_evidence(payload)
    except EvidenceValidationError as exc:
        logger.info("Evidence rejected: %s", exc)
        raise HTTPException(
            status_code=400,
            detail=[v.model_dump() for v in exc.violations],
        ) from None

    try:
        saved = save_evidence(db, to_entity(dto))
    except Exception:
        logger.exception("Evidence creation failed")
        return PlainTextResponse(CREATE_FAILED_MESSAGE, status_code=500)

    return PlainTextResponse(
        CREATED_MESSAGE,
        status_code=201,
        headers={"Location": _location_for(request, saved.id)},
    )
