# app/core/errors.py
"""
Error taxonomy for intake, uploads and lifecycle updates.

Every error the services raise on purpose derives from ``ServiceError`` and
knows its HTTP status and a message that is safe to show to a visitor. The
app-level handler in ``app.main`` turns them into ``{"success": false, ...}``
bodies; routers never catch them.
"""
from __future__ import annotations

from typing import Any, Dict, Optional


class ServiceError(Exception):
    status_code: int = 400
    code: str = "error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_body(self) -> Dict[str, Any]:
        return {"success": False, "error": self.message, "code": self.code}


class ValidationError(ServiceError):
    """Client-fixable input problem; ``fields`` maps field name to message."""

    status_code = 400
    code = "validation_error"

    def __init__(self, fields: Dict[str, str], message: str = "Invalid input"):
        super().__init__(message)
        self.fields = dict(fields)

    def to_body(self) -> Dict[str, Any]:
        body = super().to_body()
        body["fields"] = self.fields
        return body


class PayloadTooLarge(ServiceError):
    status_code = 413
    code = "payload_too_large"


class UnsupportedType(ServiceError):
    status_code = 415
    code = "unsupported_type"


class NotFound(ServiceError):
    status_code = 404
    code = "not_found"

    def __init__(self, entity: str, entity_id: Optional[str] = None):
        label = f"{entity} {entity_id} not found" if entity_id else f"{entity} not found"
        super().__init__(label)
        self.entity = entity
        self.entity_id = entity_id


class ListingNotOpen(ServiceError):
    status_code = 409
    code = "listing_not_open"


class InvalidTransition(ServiceError):
    status_code = 409
    code = "invalid_transition"

    def __init__(self, entity: str, current: str, requested: str):
        super().__init__(f"Cannot move {entity} from {current} to {requested}")
        self.entity = entity
        self.current = current
        self.requested = requested

    def to_body(self) -> Dict[str, Any]:
        body = super().to_body()
        body.update(current=self.current, requested=self.requested)
        return body


class GatewayError(ServiceError):
    """Storage or persistence failure. Detail is logged, never returned."""

    status_code = 500
    code = "gateway_error"

    def __init__(self, message: str = "Internal error", detail: Optional[str] = None):
        super().__init__(message)
        self.detail = detail


class ConflictError(GatewayError):
    status_code = 409
    code = "conflict"
