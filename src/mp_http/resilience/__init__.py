"""Resilience – deadlines bound to outgoing requests."""

from mp_http.resilience.deadline import (
    Deadline,
    DeadlineContext,
    DeadlineExceededError,
    deadline_aware,
)

__all__ = ["Deadline", "DeadlineContext", "DeadlineExceededError", "deadline_aware"]
