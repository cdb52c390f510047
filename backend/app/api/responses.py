from __future__ import annotations

from typing import Any


def envelope(data: Any = None, message: str | None = None, success: bool = True) -> dict:
    """`{"success", "message"?, "data"?}`; absent keys are left out."""
    body: dict[str, Any] = {"success": success}
    if message is not None:
        body["message"] = message
    if data is not None:
        body["data"] = data
    return body
