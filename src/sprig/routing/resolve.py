"""Request resolution — which file, if any, answers a request path.

Three steps, in order:

1. **Eligibility.**  Only page requests are looked up: paths without a
   ``.`` anywhere, or ending in ``.html`` / ``.htm`` (any case).  Anything
   else (``/logo.png``, ``/app.js``) is ``Rejected`` without touching the
   filesystem or the log.
2. **Explicit mapping.**  If the route table names the path, its target is
   the only candidate.  A missing target is ``NotFound``; auto-mapping is
   never tried as a fallback.
3. **Auto-mapping.**  ``/`` → ``index.html``, ``/<rest>`` → ``<rest>.html``.

Candidates that resolve outside the content root count as missing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import anyio

from sprig.routing.table import RouteTable

logger = logging.getLogger("sprig.routing")

HTML_SUFFIXES = (".html", ".htm")
INDEX_PAGE = "index.html"


@dataclass(frozen=True, slots=True)
class Found:
    """The request is answered by ``path``."""

    path: Path


@dataclass(frozen=True, slots=True)
class NotFound:
    """An eligible request whose candidate file does not exist."""

    route: str
    path: Path


@dataclass(frozen=True, slots=True)
class Rejected:
    """A non-page request; never looked up."""

    route: str


ResolutionResult = Found | NotFound | Rejected


def is_html_eligible(path: str) -> bool:
    """True if *path* is a page request (extensionless or .html/.htm)."""
    return "." not in path or path.lower().endswith(HTML_SUFFIXES)


def auto_map(path: str) -> str:
    """Filename the convention derives for *path*, relative to the root."""
    if path == "/":
        return INDEX_PAGE
    return f"{path[1:]}.html"


class Resolver:
    """Resolves request paths against a route table and a content root.

    Holds no per-request state, so one instance serves every request
    concurrently.
    """

    __slots__ = ("_content_root", "_routes")

    def __init__(self, routes: RouteTable, content_root: str | Path) -> None:
        self._routes = routes
        self._content_root = Path(content_root).resolve()

    @property
    def content_root(self) -> Path:
        return self._content_root

    @property
    def routes(self) -> RouteTable:
        return self._routes

    async def resolve(self, path: str) -> ResolutionResult:
        """Classify *path* and find the file that answers it."""
        if not is_html_eligible(path):
            return Rejected(path)

        logger.info("HTML request: %s", path, extra={"event": "html_request", "route": path})

        mapped = self._routes.lookup(path)
        if mapped is not None:
            candidate = mapped
            message = "Mapped file does not exist: %s"
        else:
            candidate = self._content_root / auto_map(path)
            message = "File not found: %s"

        if await self.is_servable(candidate):
            return Found(candidate)

        logger.error(
            message,
            candidate,
            extra={"event": "file_not_found", "route": path, "file": str(candidate)},
        )
        return NotFound(path, candidate)

    async def is_servable(self, candidate: Path) -> bool:
        """True if *candidate* is a regular file inside the content root.

        Paths the OS can't resolve (embedded NUL, symlink loops) count as
        missing.
        """
        try:
            resolved = await anyio.Path(candidate).resolve()
            if not Path(resolved).is_relative_to(self._content_root):
                return False
            return await resolved.is_file()
        except (OSError, ValueError, RuntimeError):
            return False
