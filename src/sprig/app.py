"""sprig application class.

Holds the configuration, and on first use freezes into the compiled
state every request reads: the route table and the resolver built on it.
"""

import logging
import threading

from sprig._internal.asgi import Receive, Scope, Send
from sprig._internal.logs import LOG_FORMATS, configure_logging, level_number
from sprig.config import AppConfig
from sprig.errors import ConfigurationError
from sprig.routing.resolve import Resolver
from sprig.routing.table import RouteTable, load_route_table
from sprig.server.handler import handle_request

logger = logging.getLogger("sprig.server")


class App:
    """The sprig application.

    Freezes when ``app.run()`` is called, when the server sends the
    lifespan startup event, or on the first request, whichever comes
    first.  Freezing validates the config and loads the route table
    exactly once.

    Thread safety:
        The freeze transition uses a Lock + double-check so exactly one
        thread loads the route table, even when several pounce workers
        call ``__call__()`` concurrently on first request.  After that
        everything the request path reads is immutable.
    """

    __slots__ = (
        "_freeze_lock",
        "_frozen",
        "_resolver",
        "_routes",
        "config",
    )

    def __init__(
        self,
        config: AppConfig | None = None,
        *,
        routes: RouteTable | None = None,
    ) -> None:
        self.config: AppConfig = config or AppConfig()
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()

        # A pre-built table skips loading config.routes_file at freeze.
        self._routes: RouteTable | None = routes
        self._resolver: Resolver | None = None

    @property
    def routes(self) -> RouteTable:
        """The route table, loading it if the app hasn't frozen yet."""
        self._ensure_frozen()
        assert self._routes is not None
        return self._routes

    # -- Server --

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Configure logging, freeze, and serve until interrupted.

        Args:
            host: Override bind host.
            port: Override bind port.
        """
        configure_logging(self.config.log_level, self.config.log_format)
        self._ensure_frozen()

        _host = host or self.config.host
        _port = port or self.config.port

        logger.info(
            "Service started and listening",
            extra={"event": "server_start", "host": _host, "port": _port},
        )

        from sprig.server.production import run_production_server

        run_production_server(
            self,
            host=_host,
            port=_port,
            workers=self.config.workers,
            log_format=self.config.log_format,
            log_level=self.config.log_level,
        )

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point.

        Handles lifespan scopes directly, then delegates HTTP scopes to
        the request handler pipeline.
        """
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        self._ensure_frozen()

        assert self._resolver is not None

        await handle_request(
            scope,
            receive,
            send,
            resolver=self._resolver,
            not_found_page=self.config.not_found_page,
            cache_control=self.config.cache_control,
        )

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Run the ASGI lifespan protocol.

        Freezes the app at startup (before first HTTP request) so the route
        table is loaded before any request arrives.
        """
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                try:
                    self._ensure_frozen()
                except ConfigurationError as exc:
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return
                await send({"type": "lifespan.startup.complete"})

            elif msg_type == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return

    # -- Internal --

    def _ensure_frozen(self) -> None:
        """Thread-safe freeze with double-check locking."""
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._freeze()

    def _freeze(self) -> None:
        _validate_config(self.config)

        if self._routes is None:
            self._routes = load_route_table(self.config.routes_file, self.config.content_root)
        self._resolver = Resolver(self._routes, self.config.content_root)

        self._frozen = True


def _validate_config(config: AppConfig) -> None:
    if not 0 < config.port < 65536:
        msg = f"port must be between 1 and 65535, got {config.port}"
        raise ConfigurationError(msg)
    if config.workers < 0:
        msg = f"workers must be >= 0, got {config.workers}"
        raise ConfigurationError(msg)
    if level_number(config.log_level) is None:
        msg = f"log_level must be a logging level name, got {config.log_level!r}"
        raise ConfigurationError(msg)
    if config.log_format not in LOG_FORMATS:
        msg = f"log_format must be one of {', '.join(LOG_FORMATS)}, got {config.log_format!r}"
        raise ConfigurationError(msg)
    if not config.not_found_page:
        msg = "not_found_page must not be empty"
        raise ConfigurationError(msg)
