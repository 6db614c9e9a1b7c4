"""Decode raw JSON responses into typed result schemas."""

from __future__ import annotations

from typing import Any
from typing import TypeVar
import json

from pydantic import ValidationError

from cloudinary_api.core.errors import DecodeError
from cloudinary_api.pipeline.dispatcher import RawResponse
from cloudinary_api.schemas.common import ApiResult
from cloudinary_api.schemas.common import ErrorRecord

ResultT = TypeVar("ResultT", bound=ApiResult)

ERROR_STATUS_THRESHOLD = 400


def decode_response(raw: RawResponse, result_type: type[ResultT]) -> ResultT:
    """Decode ``raw`` into ``result_type``, populating ``error`` on failures.

    Raises :class:`DecodeError` when the body is not a JSON object or a field
    does not match its declared type. The error carries the partially decoded
    result.
    """
    payload = _parse_payload(raw, result_type)
    raw_error = payload.pop("error", None)

    try:
        result = result_type.model_validate(payload)
    except ValidationError as exc:
        partial = _partial_result(result_type, payload, exc)
        partial.error = _error_record(raw, raw_error)
        raise DecodeError(
            f"Response does not match {result_type.__name__}: {_describe(exc)}",
            result=partial,
            status_code=raw.status_code,
        ) from exc

    result.error = _error_record(raw, raw_error)
    return result


def _parse_payload(raw: RawResponse, result_type: type[ResultT]) -> dict[str, Any]:
    if not raw.body.strip():
        if raw.status_code >= ERROR_STATUS_THRESHOLD:
            return {}
        raise DecodeError(
            "Response body is empty",
            result=result_type.model_construct(),
            status_code=raw.status_code,
        )

    try:
        payload = json.loads(raw.body)
    except ValueError as exc:
        if raw.status_code >= ERROR_STATUS_THRESHOLD:
            # Gateways answer some failures with plain text or HTML.
            return {"error": {"message": _text(raw)}}
        raise DecodeError(
            "Response body is not valid JSON",
            result=result_type.model_construct(),
            status_code=raw.status_code,
        ) from exc

    if not isinstance(payload, dict):
        raise DecodeError(
            "Response payload must be a JSON object",
            result=result_type.model_construct(),
            status_code=raw.status_code,
        )
    return payload


def _error_record(raw: RawResponse, raw_error: Any) -> ErrorRecord | None:
    failed_status = raw.status_code >= ERROR_STATUS_THRESHOLD
    if raw_error in (None, "", {}) and not failed_status:
        return None

    if isinstance(raw_error, dict):
        message = str(raw_error.get("message") or "")
    elif raw_error not in (None, ""):
        message = str(raw_error)
    else:
        message = ""

    if not message:
        message = f"Request failed with status {raw.status_code}"
    http_code = raw.status_code if failed_status else 0
    return ErrorRecord(message=message, http_code=http_code)


def _partial_result(result_type: type[ResultT], payload: dict[str, Any], exc: ValidationError) -> ResultT:
    invalid = {str(issue["loc"][0]) for issue in exc.errors() if issue.get("loc")}
    remaining = {key: value for key, value in payload.items() if key not in invalid}
    try:
        return result_type.model_validate(remaining)
    except ValidationError:
        return result_type.model_construct(**remaining)


def _describe(exc: ValidationError) -> str:
    issues = []
    for issue in exc.errors():
        location = ".".join(str(part) for part in issue.get("loc", ()))
        issues.append(f"{location or 'response'}: {issue.get('msg', 'invalid value')}")
    return "; ".join(issues)


def _text(raw: RawResponse) -> str:
    text = raw.body.decode("utf-8", errors="replace").strip()
    return text[:200]
