"""sprig exception hierarchy.

Shared across the route loader, App, and request handler so every module
raises and catches the same types.
"""


class SprigError(Exception):
    """Base for all sprig-specific errors."""


class ConfigurationError(SprigError):
    """Raised when app configuration is invalid.

    Raised during ``App._freeze()`` at startup. Fatal: the server does
    not start with a config it cannot honour.
    """


class RouteConfigError(SprigError):
    """Raised when the route file exists but cannot be turned into a table.

    Never escapes ``load_route_table()`` — the loader logs it and falls
    back to an empty table.
    """
