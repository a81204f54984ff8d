# app/schemas/base.py
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Wire format is camelCase (firstName, cvUrl, ...); Python side is snake_case."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


def blank_to_none(v: Any) -> Any:
    # HTML forms send "" for untouched optional inputs
    if isinstance(v, str) and not v.strip():
        return None
    return v
