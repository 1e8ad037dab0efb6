"""HTTP adapter – Authorization header helpers."""
from __future__ import annotations

import base64


def prepare_basic_auth(username: str, password: str) -> str:
    """Return the base64 ``username:password`` credential for a Basic ``Authorization`` header."""
    return base64.b64encode(f"{username}:{password}".encode()).decode("ascii")


def basic_auth_header(username: str, password: str) -> dict[str, str]:
    return {"Authorization": f"Basic {prepare_basic_auth(username, password)}"}


__all__ = ["basic_auth_header", "prepare_basic_auth"]
