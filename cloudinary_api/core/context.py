"""Cancellation-capable execution scopes for API calls."""

from __future__ import annotations

from collections.abc import Callable
import threading
import time


class CallContext:
    """Cooperative cancellation signal with an optional deadline.

    A context is passed into every endpoint method. Cancelling it, or letting
    its deadline pass, aborts the in-flight network call. Child contexts made
    with :meth:`with_timeout` observe their parent's cancellation as well.
    """

    def __init__(
        self,
        *,
        deadline: float | None = None,
        parent: CallContext | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._event = threading.Event()
        self._deadline = deadline
        self._parent = parent
        self._clock = clock

    @classmethod
    def background(cls) -> CallContext:
        """Return a context that is never cancelled and has no deadline."""
        return cls()

    def with_timeout(self, seconds: float) -> CallContext:
        """Derive a child context that expires ``seconds`` from now."""
        if seconds <= 0:
            raise ValueError("seconds must be positive")

        deadline = self._clock() + seconds
        if self._deadline is not None:
            deadline = min(deadline, self._deadline)
        return CallContext(deadline=deadline, parent=self, clock=self._clock)

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        if self._event.is_set():
            return True
        return self._parent is not None and self._parent.cancelled

    @property
    def expired(self) -> bool:
        if self._deadline is not None and self._clock() >= self._deadline:
            return True
        return self._parent is not None and self._parent.expired

    def done(self) -> bool:
        """Return True once the context is cancelled or past its deadline."""
        return self.cancelled or self.expired

    def reason(self) -> str | None:
        if self.cancelled:
            return "context cancelled"
        if self.expired:
            return "context deadline exceeded"
        return None

    def remaining(self) -> float | None:
        """Seconds left before the deadline, ``None`` when unbounded."""
        deadlines = []
        context: CallContext | None = self
        while context is not None:
            if context._deadline is not None:
                deadlines.append(context._deadline)
            context = context._parent
        if not deadlines:
            return None
        return max(0.0, min(deadlines) - self._clock())
