"""Request binders: turn call arguments into paths, bodies and forms."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from pydantic import BaseModel


def bind_path_param(value: Any) -> str:
    """Quote a single path segment."""
    if value is None or value == "":
        raise ValueError("path parameter must be defined")
    return quote(str(value), safe="")


def bind_to_json(model: BaseModel) -> dict[str, Any]:
    """Serialize a domain model to a JSON object, dropping unset fields."""
    return model.model_dump(mode="json", by_alias=True, exclude_none=True)


def form_value(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


def bind_form(**fields: Any) -> dict[str, str]:
    """Build a form body, skipping ``None`` values."""
    return {name: form_value(value) for name, value in fields.items() if value is not None}
