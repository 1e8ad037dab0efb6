from __future__ import annotations

import asyncio
import contextlib
import inspect
from contextvars import ContextVar, Token
from typing import Any, AsyncIterator, Awaitable

from mp_http.resilience.deadline.deadline import Deadline, DeadlineExceededError

__all__ = [
    "DeadlineContext",
    "deadline_aware",
    "resolve_deadline",
]


_DEADLINE_VAR: ContextVar[Deadline | None] = ContextVar("_deadline", default=None)


class DeadlineContext:
    """Context-variable wrapper for propagating deadlines across async boundaries."""

    @staticmethod
    def set(deadline: Deadline) -> Token[Deadline | None]:
        return _DEADLINE_VAR.set(deadline)

    @staticmethod
    def get() -> Deadline | None:
        return _DEADLINE_VAR.get()

    @staticmethod
    def reset(token: Token[Deadline | None]) -> None:
        _DEADLINE_VAR.reset(token)

    @staticmethod
    def raise_if_exceeded() -> None:
        dl = _DEADLINE_VAR.get()
        if dl is not None and dl.is_expired:
            raise DeadlineExceededError("Deadline exceeded")

    @staticmethod
    @contextlib.asynccontextmanager
    async def scoped(deadline: Deadline) -> AsyncIterator[Deadline]:
        token = _DEADLINE_VAR.set(deadline)
        try:
            yield deadline
        finally:
            _DEADLINE_VAR.reset(token)


def resolve_deadline(deadline: Deadline | None = None) -> Deadline | None:
    """Return *deadline* if given, else the deadline bound to the current context."""
    return deadline or _DEADLINE_VAR.get()


async def deadline_aware(coro: Awaitable[Any], deadline: Deadline | None = None) -> Any:
    """Wrap *coro* so it times out if the given (or context) deadline expires.

    Raises :class:`DeadlineExceededError` on timeout. Task cancellation is
    never converted; ``asyncio.CancelledError`` propagates unchanged.
    """
    dl = resolve_deadline(deadline)
    if dl is None:
        return await coro
    remaining = dl.remaining_seconds
    if remaining <= 0:
        # Close the coroutine cleanly to avoid ResourceWarning
        if inspect.iscoroutine(coro):
            coro.close()
        raise DeadlineExceededError("Deadline already exceeded")
    try:
        return await asyncio.wait_for(coro, timeout=remaining)
    except asyncio.TimeoutError:
        raise DeadlineExceededError("Deadline exceeded during execution") from None
