"""Serialize parameter structs into query strings, JSON bodies or form bodies."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
import json

from cloudinary_api.schemas.common import ApiParams

def is_empty(value: Any) -> bool:
    """Return True for the zero/empty values that are never encoded."""
    if value is None:
        return True
    if isinstance(value, bool):
        return not value
    if isinstance(value, (int, float)):
        return value == 0
    if isinstance(value, (str, list, tuple, dict, set, frozenset)):
        return len(value) == 0
    return False


def encode_body(params: ApiParams | None) -> dict[str, Any]:
    """Encode params as a JSON body mapping, keys sorted, nested values kept nested."""
    if params is None:
        return {}
    dumped = params.model_dump(mode="json", by_alias=True)
    return {key: dumped[key] for key in sorted(dumped) if not is_empty(dumped[key])}


def encode_query(params: ApiParams | None) -> list[tuple[str, str]]:
    """Encode params as ordered query-string pairs."""
    return [(key, _scalar(value)) for key, value in encode_body(params).items()]


def encode_form(params: ApiParams | None, extra: Mapping[str, Any] | None = None) -> dict[str, str]:
    """Encode params as form fields for upload-style calls."""
    body = encode_body(params)
    if extra:
        body.update({key: value for key, value in extra.items() if not is_empty(value)})
    return {key: _scalar(body[key]) for key in sorted(body)}


def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return json.dumps(value, sort_keys=True, separators=(",", ":"))
    return str(value)
