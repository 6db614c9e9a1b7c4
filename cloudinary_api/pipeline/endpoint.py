"""Generic endpoint invocation shared by every API operation."""

from __future__ import annotations

from collections.abc import Mapping
from collections.abc import Sequence
from typing import Any
from typing import TypeVar

from cloudinary_api.core.context import CallContext
from cloudinary_api.core.errors import ServiceError
from cloudinary_api.pipeline.decoder import decode_response
from cloudinary_api.pipeline.dispatcher import AuthScheme
from cloudinary_api.pipeline.dispatcher import Dispatcher
from cloudinary_api.pipeline.encoder import encode_body
from cloudinary_api.pipeline.encoder import encode_form
from cloudinary_api.pipeline.encoder import encode_query
from cloudinary_api.pipeline.paths import build_path
from cloudinary_api.schemas.common import ApiParams
from cloudinary_api.schemas.common import ApiResult

ResultT = TypeVar("ResultT", bound=ApiResult)

GET = "GET"
POST = "POST"
DELETE = "DELETE"


def invoke(
    dispatcher: Dispatcher,
    ctx: CallContext,
    method: str,
    segments: Sequence[Any],
    params: ApiParams | None,
    result_type: type[ResultT],
    *,
    auth: AuthScheme = AuthScheme.BASIC,
    form_extra: Mapping[str, Any] | None = None,
    files: Mapping[str, Any] | None = None,
) -> ResultT:
    """Build the path, encode params, dispatch and decode into ``result_type``.

    GET calls send params as a query string. Basic-auth POST and DELETE calls
    send a JSON body, signed calls send a signed form body.

    Raises ``TransportError`` or ``CancelledError`` with no result, ``DecodeError``
    with the partial result attached, and ``ServiceError`` when the decoded
    result carries an error record.
    """
    path = build_path(*segments)
    method = method.upper()

    if auth is AuthScheme.SIGNED:
        raw = dispatcher.dispatch(
            ctx,
            method,
            path,
            form=encode_form(params, form_extra),
            files=files,
            auth=auth,
        )
    elif method == GET:
        raw = dispatcher.dispatch(ctx, method, path, query=encode_query(params), auth=auth)
    else:
        raw = dispatcher.dispatch(ctx, method, path, json_body=encode_body(params), files=files, auth=auth)

    result = decode_response(raw, result_type)
    if result.failed:
        raise ServiceError(
            message=result.error.message,
            status_code=raw.status_code,
            result=result,
        )
    return result
