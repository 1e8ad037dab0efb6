"""Resilience – Deadline propagation via contextvars."""
from mp_http.resilience.deadline.context import (
    DeadlineContext,
    deadline_aware,
    resolve_deadline,
)
from mp_http.resilience.deadline.deadline import Deadline, DeadlineExceededError

__all__ = [
    "Deadline",
    "DeadlineContext",
    "DeadlineExceededError",
    "deadline_aware",
    "resolve_deadline",
]
