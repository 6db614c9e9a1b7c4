"""Upload API endpoint group: signed calls that create and destroy assets.

See https://cloudinary.com/documentation/image_upload_api_reference
"""

from __future__ import annotations

from contextlib import ExitStack
from pathlib import Path
from typing import Any
from typing import BinaryIO
from typing import Union
import logging
import os

from cloudinary_api.core.context import CallContext
from cloudinary_api.pipeline.dispatcher import AuthScheme
from cloudinary_api.pipeline.dispatcher import Dispatcher
from cloudinary_api.pipeline.endpoint import POST
from cloudinary_api.pipeline.endpoint import invoke
from cloudinary_api.schemas.upload import DestroyParams
from cloudinary_api.schemas.upload import DestroyResult
from cloudinary_api.schemas.upload import UploadParams
from cloudinary_api.schemas.upload import UploadResult

logger = logging.getLogger(__name__)

UPLOAD = "upload"
DESTROY = "destroy"

# Sources the service fetches itself; they travel as a plain form field.
REMOTE_PREFIXES = ("http://", "https://", "ftp://", "s3://", "gs://", "data:")

UploadSource = Union[str, os.PathLike, bytes, BinaryIO]


def is_remote(source: Any) -> bool:
    return isinstance(source, str) and source.startswith(REMOTE_PREFIXES)


class UploadApi:
    """Upload API operations sharing one dispatcher."""

    def __init__(self, dispatcher: Dispatcher) -> None:
        self._dispatcher = dispatcher

    def upload(self, ctx: CallContext, file: UploadSource, params: UploadParams | None = None) -> UploadResult:
        """Upload a file, raw bytes, a binary stream or a remote URL."""
        params = params or UploadParams()
        path = [params.asset_type, UPLOAD]

        if is_remote(file):
            return invoke(
                self._dispatcher,
                ctx,
                POST,
                path,
                params,
                UploadResult,
                auth=AuthScheme.SIGNED,
                form_extra={"file": file},
            )

        with ExitStack() as stack:
            files = {"file": _multipart_file(file, stack)}
            logger.debug("Uploading %s as multipart", files["file"][0])
            return invoke(
                self._dispatcher,
                ctx,
                POST,
                path,
                params,
                UploadResult,
                auth=AuthScheme.SIGNED,
                files=files,
            )

    def destroy(self, ctx: CallContext, params: DestroyParams) -> DestroyResult:
        """Delete one asset. ``result`` is ``ok`` or ``not found``."""
        if not params.public_id:
            raise ValueError("public_id is required")
        return invoke(
            self._dispatcher,
            ctx,
            POST,
            [params.asset_type, DESTROY],
            params,
            DestroyResult,
            auth=AuthScheme.SIGNED,
        )


def _multipart_file(source: UploadSource, stack: ExitStack) -> tuple[str, Any]:
    if isinstance(source, (bytes, bytearray)):
        return "file", bytes(source)
    if isinstance(source, (str, os.PathLike)):
        file_path = Path(source)
        if not file_path.is_file():
            raise FileNotFoundError(f"Upload source not found: {file_path}")
        return file_path.name, stack.enter_context(file_path.open("rb"))
    if hasattr(source, "read"):
        name = os.path.basename(str(getattr(source, "name", "") or "")) or "file"
        return name, source
    raise TypeError(f"Unsupported upload source type: {type(source).__name__}")
