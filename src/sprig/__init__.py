"""sprig — serves a directory of HTML pages over ASGI.

Request paths resolve to files through an optional route table, with a
``/about`` → ``about.html`` convention for everything the table doesn't
name, and a custom 404 page when nothing matches.

Basic usage::

    from sprig import App, AppConfig

    app = App(AppConfig(content_root="html", routes_file="conf/routes.json"))
    app.run()
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "AppConfig",
    "ConfigurationError",
    "Found",
    "NotFound",
    "Rejected",
    "Request",
    "Resolver",
    "Response",
    "RouteConfigError",
    "RouteTable",
    "SprigError",
    "load_route_table",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import sprig`` fast while providing a clean top-level API.
    """
    if name == "App":
        from sprig.app import App

        return App

    if name == "AppConfig":
        from sprig.config import AppConfig

        return AppConfig

    if name == "Request":
        from sprig.http.request import Request

        return Request

    if name == "Response":
        from sprig.http.response import Response

        return Response

    if name in ("RouteTable", "load_route_table"):
        from sprig.routing import table as _table

        return getattr(_table, name)

    if name in ("Found", "NotFound", "Rejected", "Resolver"):
        from sprig.routing import resolve as _resolve

        return getattr(_resolve, name)

    if name in ("ConfigurationError", "RouteConfigError", "SprigError"):
        from sprig import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
