"""Authenticated HTTP dispatch with context-scoped cancellation."""

from __future__ import annotations

from collections.abc import Callable
from collections.abc import Mapping
from concurrent.futures import Future
from concurrent.futures import wait
from dataclasses import dataclass
from dataclasses import field
from enum import Enum
from typing import Any
import hashlib
import logging
import threading
import time

import requests
from requests.adapters import HTTPAdapter

from cloudinary_api.core.config import Configuration
from cloudinary_api.core.context import CallContext
from cloudinary_api.core.errors import CancelledError
from cloudinary_api.core.errors import TransportError
from cloudinary_api.pipeline.encoder import is_empty

logger = logging.getLogger(__name__)

API_VERSION = "v1_1"
DEFAULT_POLL_INTERVAL_SECONDS = 0.05

# Form fields that never take part in the upload signature.
UNSIGNED_FIELDS = frozenset({"file", "api_key", "cloud_name", "resource_type"})


class AuthScheme(str, Enum):
    """How credentials are attached to a request."""

    BASIC = "basic"
    SIGNED = "signed"


@dataclass(frozen=True)
class RawResponse:
    """Status, body and headers of one completed HTTP exchange."""

    status_code: int
    body: bytes
    headers: Mapping[str, str] = field(default_factory=dict)


def api_sign_request(params: Mapping[str, Any], api_secret: str) -> str:
    """Return the SHA-1 signature of the sorted ``key=value`` pairs plus the secret."""
    to_sign = "&".join(
        f"{key}={params[key]}"
        for key in sorted(params)
        if key not in UNSIGNED_FIELDS and not is_empty(params[key])
    )
    return hashlib.sha1(f"{to_sign}{api_secret}".encode("utf-8")).hexdigest()


class Dispatcher:
    """Issue single authenticated calls against the account's API base URL.

    No retry is performed. The blocking ``requests`` call runs on a worker
    thread so the caller can abandon it as soon as its context is done.
    """

    def __init__(
        self,
        config: Configuration,
        *,
        session: requests.Session | None = None,
        clock: Callable[[], float] = time.time,
        poll_interval: float = DEFAULT_POLL_INTERVAL_SECONDS,
    ) -> None:
        if poll_interval <= 0:
            raise ValueError("poll_interval must be positive")

        self._config = config
        self._owns_session = session is None
        self._session = session or self._build_session(config)
        self._clock = clock
        self._poll_interval = poll_interval

    @property
    def config(self) -> Configuration:
        return self._config

    def base_url(self, *, upload: bool = False) -> str:
        prefix = self._config.upload_base_url if upload else self._config.api_prefix.rstrip("/")
        return f"{prefix}/{API_VERSION}/{self._config.cloud_name}"

    def dispatch(
        self,
        ctx: CallContext,
        method: str,
        path: str,
        *,
        query: list[tuple[str, str]] | None = None,
        json_body: Mapping[str, Any] | None = None,
        form: Mapping[str, str] | None = None,
        files: Mapping[str, Any] | None = None,
        auth: AuthScheme = AuthScheme.BASIC,
    ) -> RawResponse:
        """Perform one HTTP call and return its raw status and body."""
        if ctx.done():
            raise CancelledError(f"{method} {path} not sent: {ctx.reason()}")

        upload = auth is AuthScheme.SIGNED
        url = self.base_url(upload=upload)
        if path:
            url = f"{url}/{path}"

        kwargs: dict[str, Any] = {
            "headers": self._headers(),
            "params": query or None,
            "timeout": self._timeout(ctx),
        }
        if auth is AuthScheme.SIGNED:
            kwargs["data"] = self._signed(form or {})
        else:
            kwargs["auth"] = (self._config.api_key, self._config.api_secret)
            if json_body is not None:
                kwargs["json"] = dict(json_body)
            elif form is not None:
                kwargs["data"] = dict(form)
        if files:
            kwargs["files"] = dict(files)

        logger.debug("Dispatching %s %s", method, path or "/")
        future = self._start(method, url, kwargs)
        response = self._await(ctx, future, method=method, path=path)
        try:
            body = response.content
        finally:
            response.close()

        logger.debug("Received status=%s for %s %s", response.status_code, method, path or "/")
        return RawResponse(
            status_code=response.status_code,
            body=body or b"",
            headers=dict(response.headers or {}),
        )

    def close(self) -> None:
        """Release the pooled connections of a session owned by this dispatcher."""
        if self._owns_session:
            self._session.close()

    def _start(self, method: str, url: str, kwargs: dict[str, Any]) -> Future:
        """Run the blocking request on its own daemon thread.

        Each call gets a fresh worker, so abandoned calls never hold up later
        ones. Sockets stay bounded by the session's connection pool.
        """
        future: Future = Future()

        def run() -> None:
            if not future.set_running_or_notify_cancel():
                return
            try:
                future.set_result(self._session.request(method, url, **kwargs))
            except BaseException as exc:
                future.set_exception(exc)

        threading.Thread(target=run, name="cloudinary-http", daemon=True).start()
        return future

    def _await(self, ctx: CallContext, future: Future, *, method: str, path: str) -> Any:
        while not future.done():
            if ctx.done():
                if not future.cancel():
                    future.add_done_callback(_close_abandoned)
                logger.debug("Abandoning %s %s: %s", method, path or "/", ctx.reason())
                raise CancelledError(f"{method} {path} aborted: {ctx.reason()}")
            wait([future], timeout=self._poll_interval)

        try:
            return future.result()
        except requests.Timeout as exc:
            raise TransportError(f"{method} {path} timed out") from exc
        except requests.ConnectionError as exc:
            raise TransportError(f"{method} {path} could not connect") from exc
        except requests.RequestException as exc:
            raise TransportError(f"{method} {path} failed") from exc

    def _signed(self, form: Mapping[str, str]) -> dict[str, str]:
        signed = dict(form)
        signed["timestamp"] = str(int(self._clock()))
        signed["signature"] = api_sign_request(signed, self._config.api_secret)
        signed["api_key"] = self._config.api_key
        return signed

    def _timeout(self, ctx: CallContext) -> float:
        remaining = ctx.remaining()
        if remaining is None:
            return self._config.timeout_seconds
        return max(min(self._config.timeout_seconds, remaining), self._poll_interval)

    def _headers(self) -> dict[str, str]:
        return {
            "Accept": "application/json",
            "User-Agent": self._config.user_agent,
        }

    @staticmethod
    def _build_session(config: Configuration) -> requests.Session:
        session = requests.Session()
        adapter = HTTPAdapter(pool_connections=1, pool_maxsize=config.pool_maxsize, max_retries=0)
        session.mount("https://", adapter)
        session.mount("http://", adapter)
        return session


def _close_abandoned(future: Future) -> None:
    if future.cancelled() or future.exception() is not None:
        return
    future.result().close()
