# app/routers/intake.py
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, Request

from app.core.rate_limit import PUBLIC_LIMIT, limiter
from app.dependencies import get_intake_service
from app.schemas.intake import IntakeResponse
from app.services.intake import IntakeService

router = APIRouter(prefix="/api", tags=["intake"])


@router.post("/quote", response_model=IntakeResponse)
@limiter.limit(PUBLIC_LIMIT)
def submit_quote(
    request: Request,
    payload: Dict[str, Any] = Body(...),
    service: IntakeService = Depends(get_intake_service),
) -> IntakeResponse:
    record = service.submit_quote(payload)
    return IntakeResponse(id=record.id)


@router.post("/apply", response_model=IntakeResponse)
@limiter.limit(PUBLIC_LIMIT)
def submit_application(
    request: Request,
    payload: Dict[str, Any] = Body(...),
    service: IntakeService = Depends(get_intake_service),
) -> IntakeResponse:
    record = service.submit_application(payload)
    return IntakeResponse(id=record.id)


@router.post("/contact", response_model=IntakeResponse)
@limiter.limit(PUBLIC_LIMIT)
def submit_contact(
    request: Request,
    payload: Dict[str, Any] = Body(...),
    service: IntakeService = Depends(get_intake_service),
) -> IntakeResponse:
    record = service.submit_contact(payload)
    return IntakeResponse(id=record.id)
