"""Production server.

Starts a pounce server with the live sprig App object.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sprig import App


def run_production_server(
    app: App,
    host: str = "127.0.0.1",
    port: int = 3000,
    workers: int = 1,
    *,
    log_format: str = "json",
    log_level: str = "info",
) -> None:
    """Run a sprig app under pounce.

    Pounce's ``run()`` takes an import string (e.g., ``"myapp:app"``),
    but sprig has a live ``App`` object. We use ``pounce.Server``
    directly with the ASGI callable.

    Args:
        app: sprig App instance.
        host: Bind address.
        port: Bind port.
        workers: Worker count (0 = auto-detect from CPU count).
        log_format: Log format ("json" or "text").
        log_level: Log level (debug, info, warning, error, critical).
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    config = ServerConfig(
        host=host,
        port=port,
        workers=workers,
        log_format=log_format,
        log_level=log_level,
    )
    server = Server(config, app)
    server.run()
