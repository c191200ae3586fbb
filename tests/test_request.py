"""Tests for sprig.http.request — Request.from_asgi."""

from sprig.http.request import Request


class TestRequestFromAsgi:
    def test_builds_from_scope(self) -> None:
        scope = {
            "type": "http",
            "method": "GET",
            "path": "/about",
            "query_string": b"x=1",
            "headers": [(b"host", b"example.com")],
            "client": ["10.0.0.1", 5555],
        }

        request = Request.from_asgi(scope)

        assert request == Request(method="GET", path="/about", client=("10.0.0.1", 5555))

    def test_minimal_scope(self) -> None:
        request = Request.from_asgi({"method": "HEAD", "path": "/"})
        assert request.client is None
