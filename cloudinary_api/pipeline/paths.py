"""URL path construction from typed segments."""

from __future__ import annotations

from enum import Enum
from typing import Any
from urllib.parse import quote

PATH_SEPARATOR = "/"


def build_path(*segments: Any) -> str:
    """Join the non-empty segments with ``/``, preserving order.

    Enum segments contribute their value. Every segment is percent-encoded,
    except for ``/`` so public ids nested in folders keep their layout.
    """
    parts: list[str] = []
    for segment in segments:
        value = _segment_value(segment)
        if not value:
            continue
        parts.append(quote(value.strip(PATH_SEPARATOR), safe=PATH_SEPARATOR))
    return PATH_SEPARATOR.join(part for part in parts if part)


def _segment_value(segment: Any) -> str:
    if segment is None:
        return ""
    if isinstance(segment, Enum):
        return str(segment.value)
    return str(segment)
