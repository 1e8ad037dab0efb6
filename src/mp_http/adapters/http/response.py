"""HTTP adapter – Response."""
from __future__ import annotations

import dataclasses
import json
from typing import Any

from mp_http.kernel.types import Headers


@dataclasses.dataclass(frozen=True)
class Response:
    """Captured HTTP response.

    ``headers`` is a snapshot decoupled from the transport. ``body`` is
    ``None`` only when the body could not be read (see
    :class:`~mp_http.kernel.errors.ResponseBodyReadError`).
    """

    status_code: int
    body: bytes | None = None
    headers: Headers = dataclasses.field(default_factory=Headers)

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code <= 299

    @property
    def text(self) -> str:
        return (self.body or b"").decode("utf-8", errors="replace")

    def json(self) -> Any:
        return json.loads(self.body or b"")


__all__ = ["Response"]
