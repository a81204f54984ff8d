# app/schemas/validation.py
from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping, Type, TypeVar

import pydantic
from pydantic import BaseModel

from app.core.errors import ValidationError

M = TypeVar("M", bound=BaseModel)


def field_errors(errors: Iterable[Mapping[str, Any]]) -> Dict[str, str]:
    """Collapse pydantic error entries into {field: first message}."""
    fields: Dict[str, str] = {}
    for err in errors:
        # body-level errors from FastAPI start with "body"
        loc = [str(p) for p in err.get("loc", ()) if p != "body"]
        name = ".".join(loc) or "__root__"
        msg = str(err.get("msg", "Invalid value"))
        if msg.startswith("Value error, "):
            msg = msg[len("Value error, "):]
        fields.setdefault(name, msg)
    return fields


def parse_payload(schema: Type[M], payload: Any) -> M:
    """
    Validate a raw payload against one of the input schemas.

    All-or-nothing: either the whole model is returned or ``ValidationError``
    with the complete field map is raised.
    """
    if not isinstance(payload, Mapping):
        raise ValidationError({"__root__": "Expected a JSON object"})
    try:
        return schema.model_validate(payload)
    except pydantic.ValidationError as e:
        raise ValidationError(field_errors(e.errors())) from e
