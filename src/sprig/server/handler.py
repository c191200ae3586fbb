"""ASGI handler — turns a resolution into a response.

The only component that touches raw ASGI HTTP scopes. Builds a typed
Request, asks the Resolver which file answers it, reads that file (or the
404 page), and sends the Response back through ASGI send().
"""

from pathlib import Path

import anyio

from sprig._internal.asgi import Receive, Scope, Send
from sprig.http.request import Request
from sprig.http.response import Response, html_page
from sprig.routing.resolve import Found, Rejected, Resolver
from sprig.server.errors import handle_internal_error, plain_not_found, rejected
from sprig.server.sender import send_response


async def read_page(path: Path) -> str:
    """Read an HTML file as UTF-8 text."""
    return await anyio.Path(path).read_text(encoding="utf-8")


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    resolver: Resolver,
    not_found_page: str,
    cache_control: str,
) -> None:
    """Process a single HTTP request through the full pipeline."""
    if scope["type"] == "websocket":
        await reject_websocket(receive, send)
        return
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope)

    try:
        response = await dispatch(
            request,
            resolver,
            not_found_page=not_found_page,
            cache_control=cache_control,
        )
    except Exception as exc:
        response = handle_internal_error(exc, request)

    await send_response(response, send, head=request.method == "HEAD")


async def reject_websocket(receive: Receive, send: Send) -> None:
    """Refuse a websocket handshake; the server answers it with HTTP 403."""
    message = await receive()
    if message["type"] == "websocket.connect":
        await send({"type": "websocket.close", "code": 1008})


async def dispatch(
    request: Request,
    resolver: Resolver,
    *,
    not_found_page: str,
    cache_control: str,
) -> Response:
    """Resolve *request* and build its response.

    Errors propagate; ``handle_request`` converts them to a 500.
    """
    result = await resolver.resolve(request.path)

    if isinstance(result, Rejected):
        return rejected()

    if isinstance(result, Found):
        return html_page(await read_page(result.path), 200, cache_control)

    page = resolver.content_root / not_found_page
    if await resolver.is_servable(page):
        return html_page(await read_page(page), 404, cache_control)
    return plain_not_found()
