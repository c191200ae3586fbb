"""Terminal responses for requests that don't end in a served page.

Maps rejected paths, misses without a custom 404 page, and unexpected
failures to their fixed plain-text responses.
"""

import logging

from sprig.http.request import Request
from sprig.http.response import Response, plain_text

logger = logging.getLogger("sprig.server")

REJECTED_BODY = "Not Found"
NOT_FOUND_BODY = "404 Not Found"
INTERNAL_ERROR_BODY = "500 Internal Server Error"


def rejected() -> Response:
    """Response for a non-page request."""
    return plain_text(REJECTED_BODY, 404)


def plain_not_found() -> Response:
    """Response for a miss when no custom 404 page exists."""
    return plain_text(NOT_FOUND_BODY, 404)


def handle_internal_error(exc: Exception, request: Request) -> Response:
    """Log an unexpected failure and return a 500."""
    logger.exception(
        "Server error processing request",
        extra={
            "event": "server_error",
            "route": request.path,
            "method": request.method,
            "client": request.client[0] if request.client else None,
            "error": str(exc),
        },
    )
    return plain_text(INTERNAL_ERROR_BODY, 500)
