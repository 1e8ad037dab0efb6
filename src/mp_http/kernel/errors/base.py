"""Root error class and the closed set of matchable error kinds."""

from __future__ import annotations

import enum
from typing import Any


class ErrorKind(str, enum.Enum):
    """Machine-matchable error category carried by every :class:`BaseError`.

    Kinds survive wrapping: :func:`find_kind` walks the ``__cause__`` chain,
    so a caller can ask "is this a body-read failure?" regardless of how many
    layers re-raised it.
    """

    GENERIC = "generic"
    CONFIG = "config"
    EMPTY_METHOD = "empty_method"
    UNSUPPORTED_METHOD = "unsupported_method"
    MISSING_BASE_URL = "missing_base_url"
    INVALID_BASE_URL = "invalid_base_url"
    DEADLINE_EXCEEDED = "deadline_exceeded"
    FROZEN_CLIENT = "frozen_client"
    PREPARATION_FAILED = "preparation_failed"
    SEND_FAILED = "send_failed"
    RESPONSE_BODY_UNREADABLE = "response_body_unreadable"
    STATUS_NOT_SUCCESS = "status_not_success"


class BaseError(Exception):
    """Root of the error hierarchy.

    Args:
        message: Human-readable description.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Arbitrary extra context (serialisable dict).
        cause: Original exception that triggered this error.
    """

    default_code: str = "base_error"
    kind: ErrorKind = ErrorKind.GENERIC

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        """Return a JSON-serialisable single-line string representation."""
        import json
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def is_kind(self, kind: ErrorKind) -> bool:
        """Return ``True`` if this error or any error it wraps has *kind*."""
        return find_kind(self, kind) is not None

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a plain dict (safe for logging)."""
        payload: dict[str, Any] = {
            "code": self.code,
            "kind": self.kind.value,
            "message": self.message,
            "detail": self.detail,
        }
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


def find_kind(exc: BaseException | None, kind: ErrorKind) -> BaseError | None:
    """Return the first :class:`BaseError` of *kind* in the ``__cause__`` chain of *exc*."""
    seen: set[int] = set()
    while exc is not None and id(exc) not in seen:
        seen.add(id(exc))
        if isinstance(exc, BaseError) and exc.kind is kind:
            return exc
        exc = exc.__cause__
    return None


__all__ = ["BaseError", "ErrorKind", "find_kind"]
