"""Route table — explicit request path → file mappings.

Loaded once from a JSON object on disk::

    {"/about": "about-us.html", "/team": "people/team.html"}

Every target is joined onto the content root.  A missing route file is
normal (the table is empty and auto-mapping handles everything); a
broken one is logged and also yields an empty table, so loading never
stops the server from starting.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

from sprig.errors import RouteConfigError

logger = logging.getLogger("sprig.routing")


class RouteTable(Mapping[str, Path]):
    """Immutable mapping of request path to target file.

    Values are absolute paths under the content root.  Existence is
    checked per request, not here.
    """

    __slots__ = ("_content_root", "_routes")

    def __init__(self, routes: Mapping[str, Path] | None = None, *, content_root: Path) -> None:
        self._routes: Mapping[str, Path] = MappingProxyType(dict(routes or {}))
        self._content_root = content_root

    @classmethod
    def from_mapping(cls, mapping: Mapping[Any, Any], content_root: str | Path) -> RouteTable:
        """Build a table from decoded JSON, skipping entries that don't validate.

        Keys must be strings starting with ``/``.  Values must be non-empty
        strings naming a file that stays inside *content_root*.  Later keys
        overwrite earlier ones.
        """
        root = Path(content_root).resolve()
        routes: dict[str, Path] = {}
        for path, filename in mapping.items():
            target: Path | None = None
            reason = _invalid_reason(path, filename)
            if reason is None:
                target, reason = _resolve_target(root, filename)
            if target is None:
                logger.warning(
                    "Skipping route %r: %s",
                    path,
                    reason,
                    extra={"event": "route_skipped", "route": str(path), "reason": reason},
                )
                continue
            routes[path] = target
        return cls(routes, content_root=root)

    @property
    def content_root(self) -> Path:
        return self._content_root

    def lookup(self, path: str) -> Path | None:
        """Return the mapped file for *path*, or None if it isn't configured."""
        return self._routes.get(path)

    def __getitem__(self, key: str) -> Path:
        return self._routes[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._routes)

    def __len__(self) -> int:
        return len(self._routes)

    def __repr__(self) -> str:
        return f"RouteTable({dict(self._routes)!r})"


def _invalid_reason(path: object, filename: object) -> str | None:
    if not isinstance(path, str) or not path.startswith("/"):
        return "request path must be a string starting with '/'"
    if not isinstance(filename, str):
        return f"target must be a string, got {type(filename).__name__}"
    if not filename:
        return "target is empty"
    return None


def _resolve_target(root: Path, filename: str) -> tuple[Path | None, str | None]:
    try:
        target = (root / filename).resolve()
    except (OSError, ValueError, RuntimeError) as exc:
        return None, f"target cannot be resolved: {exc}"
    if not target.is_relative_to(root):
        return None, "target escapes the content root"
    return target, None


def _read_routes(path: Path) -> Mapping[Any, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"cannot read {path}: {exc}"
        raise RouteConfigError(msg) from exc

    try:
        data = json.loads(text)
    except (json.JSONDecodeError, RecursionError) as exc:
        msg = f"invalid JSON in {path}: {exc}"
        raise RouteConfigError(msg) from exc

    if not isinstance(data, dict):
        msg = f"{path} must contain a JSON object, got {type(data).__name__}"
        raise RouteConfigError(msg)
    return data


def load_route_table(routes_file: str | Path, content_root: str | Path) -> RouteTable:
    """Load the route table from *routes_file*.

    Returns an empty table when the file is absent or unusable.  Never raises
    for file problems; they are logged as ``config_parse_error``.
    """
    path = Path(routes_file)
    root = Path(content_root).resolve()

    if not path.exists():
        logger.debug("No route file at %s; using auto-mapping only", path)
        return RouteTable(content_root=root)

    try:
        data = _read_routes(path)
    except RouteConfigError as exc:
        logger.error(
            "Failed to parse route file",
            extra={"event": "config_parse_error", "file": str(path), "error": str(exc)},
        )
        return RouteTable(content_root=root)

    table = RouteTable.from_mapping(data, root)
    logger.info(
        "Loaded %d route(s) from %s",
        len(table),
        path,
        extra={"event": "routes_loaded", "file": str(path), "count": len(table)},
    )
    return table
