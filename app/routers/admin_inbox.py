# app/routers/admin_inbox.py
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Query

from app.dependencies import get_gateway, get_lifecycle
from app.domain.enums import QuoteStatus
from app.models import ContactMessage, QuoteRequest
from app.schemas.admin import QuoteStatusUpdate
from app.schemas.records import ContactMessageOut, QuoteRequestOut
from app.schemas.validation import parse_payload
from app.services.gateway import Gateway
from app.workflow.status import LifecycleManager

router = APIRouter(prefix="/api/admin", tags=["admin", "inbox"])


# ----------------------------------------------------
# Quote requests (status only, never hard-deleted)
# ----------------------------------------------------
@router.get("/quotes", response_model=List[QuoteRequestOut])
def list_quotes(
    status: Optional[QuoteStatus] = Query(None),
    gateway: Gateway = Depends(get_gateway),
):
    filters = {"status": status} if status is not None else None
    return gateway.find_many(QuoteRequest, filters, order_by=[QuoteRequest.created_at.desc()])


@router.get("/quotes/{quote_id}", response_model=QuoteRequestOut)
def get_quote(quote_id: str, gateway: Gateway = Depends(get_gateway)):
    return gateway.require(QuoteRequest, quote_id)


@router.patch("/quotes/{quote_id}", response_model=QuoteRequestOut)
def update_quote_status(
    quote_id: str,
    payload: Dict[str, Any] = Body(...),
    lifecycle: LifecycleManager = Depends(get_lifecycle),
):
    data = parse_payload(QuoteStatusUpdate, payload)
    return lifecycle.transition_quote(quote_id, data.status)


# ----------------------------------------------------
# Contact messages
# ----------------------------------------------------
@router.get("/messages", response_model=List[ContactMessageOut])
def list_messages(gateway: Gateway = Depends(get_gateway)):
    return gateway.find_many(ContactMessage, order_by=[ContactMessage.created_at.desc()])


@router.get("/messages/{message_id}", response_model=ContactMessageOut)
def get_message(message_id: str, gateway: Gateway = Depends(get_gateway)):
    return gateway.require(ContactMessage, message_id)


@router.delete("/messages/{message_id}")
def delete_message(message_id: str, gateway: Gateway = Depends(get_gateway)):
    gateway.delete(ContactMessage, message_id)
    return {"success": True}
