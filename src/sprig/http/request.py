"""Immutable HTTP request.

Frozen metadata built from the ASGI scope. sprig never reads request
bodies or headers; resolution needs the path, the method decides whether
a body is sent, and the client address goes into error logs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request."""

    method: str
    path: str
    client: tuple[str, int] | None = None

    @classmethod
    def from_asgi(cls, scope: dict[str, Any]) -> Request:
        """Create a Request from an ASGI HTTP scope."""
        client = scope.get("client")
        return cls(
            method=scope["method"],
            path=scope["path"],
            client=tuple(client) if client else None,
        )
