"""Shared pydantic building blocks for endpoint parameter and result schemas."""

from __future__ import annotations

from enum import Enum
from typing import Annotated
from typing import Any

from pydantic import BaseModel
from pydantic import BeforeValidator
from pydantic import ConfigDict
from pydantic import Field
from pydantic import GetCoreSchemaHandler
from pydantic import PlainSerializer
from pydantic import model_validator
from pydantic_core import core_schema


class AssetType(str, Enum):
    """Kind of stored media object."""

    IMAGE = "image"
    VIDEO = "video"
    RAW = "raw"
    AUTO = "auto"


class DeliveryType(str, Enum):
    """Access mode under which an asset is served."""

    UPLOAD = "upload"
    PRIVATE = "private"
    AUTHENTICATED = "authenticated"
    FETCH = "fetch"
    LIST = "list"
    MULTI = "multi"
    TEXT = "text"
    ASSET = "asset"


class ModerationStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class Direction(str, Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"


class OpaqueJson:
    """Tagged wrapper for loosely specified JSON values passed through unchanged.

    Face coordinates, color histograms, exif blocks and similar fields vary by
    account feature flags, so they are kept as raw JSON instead of typed models.
    """

    __slots__ = ("value",)

    def __init__(self, value: Any = None) -> None:
        self.value = value.value if isinstance(value, OpaqueJson) else value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, OpaqueJson):
            return self.value == other.value
        return self.value == other

    def __hash__(self) -> int:
        return hash(repr(self.value))

    def __bool__(self) -> bool:
        return self.value not in (None, "", [], {})

    def __repr__(self) -> str:
        return f"OpaqueJson({self.value!r})"

    @classmethod
    def __get_pydantic_core_schema__(cls, _source: Any, _handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls,
            serialization=core_schema.plain_serializer_function_ser_schema(lambda item: item.value),
        )


def _split_comma_list(value: Any) -> Any:
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    return value


def _join_comma_list(items: list[str]) -> str:
    return ",".join(items)


# Repeated simple value, serialized comma-joined (``["a", "b"] -> "a,b"``).
CldApiArray = Annotated[
    list[str],
    BeforeValidator(_split_comma_list),
    PlainSerializer(_join_comma_list, return_type=str),
]

# Face or custom coordinates: one ``[x, y, width, height]`` box per entry.
Coordinates = list[list[int]]


def path_field(default: Any = None, **kwargs: Any) -> Any:
    """Declare a field consumed by the path builder and never encoded."""
    return Field(default, exclude=True, json_schema_extra={"path": True}, **kwargs)


class ApiParams(BaseModel):
    """Base class for endpoint parameter structs."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")


class ResponseModel(BaseModel):
    """Base for decoded response objects, top level or nested.

    Unknown keys are ignored and JSON ``null`` counts as absent, so a field
    reported as null keeps its declared default.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class ErrorRecord(ResponseModel):
    """Structured failure reported by the service."""

    message: str = ""
    http_code: int = 0

    def is_empty(self) -> bool:
        return not self.message and not self.http_code


class ApiResult(ResponseModel):
    """Base class for endpoint result structs.

    ``error`` is populated whenever the service reports a failure, possibly
    next to other populated fields.
    """

    error: ErrorRecord | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None and not self.error.is_empty()
