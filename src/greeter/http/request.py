"""Immutable HTTP request.

Frozen metadata built once per request and passed explicitly to the
router and handlers. Nothing reads request state from ambient globals.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import unquote, urlsplit

from greeter.http.headers import Headers
from greeter.http.query import QueryParams


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    ``path`` is URL-decoded and never contains the query string or
    fragment. ``query`` holds the parsed query parameters.
    """

    method: str
    path: str
    query: QueryParams
    headers: Headers = field(default_factory=Headers)
    http_version: str = "1.1"
    client: tuple[str, int] | None = None

    @property
    def content_type(self) -> str | None:
        """The Content-Type header value."""
        return self.headers.get("content-type")

    @property
    def url(self) -> str:
        """Request path plus query string, as received."""
        qs = self.query.raw
        if qs:
            return f"{self.path}?{qs.decode('latin-1')}"
        return self.path

    # -- Factories --

    @classmethod
    def from_asgi(cls, scope: Mapping[str, Any]) -> Request:
        """Create a Request from an ASGI HTTP scope."""
        client = scope.get("client")
        return cls(
            method=scope["method"].upper(),
            path=scope["path"],
            query=QueryParams(scope.get("query_string", b"")),
            headers=Headers(tuple(scope.get("headers", ()))),
            http_version=scope.get("http_version", "1.1"),
            client=tuple(client) if client else None,
        )

    @classmethod
    def from_target(
        cls,
        method: str,
        target: str,
        *,
        headers: Mapping[str, str] | None = None,
    ) -> Request:
        """Create a Request from a method and a raw request target.

        The target may be a bare path (``/hello?name=Ada``) or an
        absolute URL. The query string and fragment are stripped from
        the path, and the path is percent-decoded::

            Request.from_target("GET", "/hello?name=Ada#top")
        """
        parts = urlsplit(target)
        return cls(
            method=method.upper(),
            path=unquote(parts.path) or "/",
            query=QueryParams(parts.query.encode("utf-8")),
            headers=Headers.from_dict(headers or {}),
        )
