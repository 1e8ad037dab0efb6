"""Resilience – Deadline."""
from __future__ import annotations

import dataclasses
from datetime import UTC, datetime, timedelta
from typing import Any

from mp_http.kernel.errors import BaseError, ErrorKind


class DeadlineExceededError(BaseError):
    """Raised when the active deadline has been exceeded."""

    default_code = "deadline_exceeded"
    kind = ErrorKind.DEADLINE_EXCEEDED

    def __init__(self, message: str = "Deadline exceeded", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


@dataclasses.dataclass(frozen=True)
class Deadline:
    """An absolute deadline derived from a timeout."""
    expires_at: datetime

    @classmethod
    def after(cls, seconds: float) -> "Deadline":
        return cls(expires_at=datetime.now(UTC) + timedelta(seconds=seconds))

    @property
    def remaining_seconds(self) -> float:
        return max(0.0, (self.expires_at - datetime.now(UTC)).total_seconds())

    @property
    def is_expired(self) -> bool:
        return datetime.now(UTC) >= self.expires_at

    def raise_if_expired(self) -> None:
        if self.is_expired:
            raise DeadlineExceededError("Deadline exceeded")


__all__ = ["Deadline", "DeadlineExceededError"]
