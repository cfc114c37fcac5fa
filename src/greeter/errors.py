"""Greeter exception hierarchy.

Shared across Router, App, and the ASGI handler so every module
raises and catches the same types.
"""

from dataclasses import dataclass
from typing import Any


class GreeterError(Exception):
    """Base for all greeter-specific errors."""


class ConfigurationError(GreeterError):
    """Raised when app configuration is invalid.

    Typically raised while registering routes or loading ``AppConfig``.
    """


@dataclass(frozen=True, slots=True)
class HTTPError(GreeterError):
    """An error that maps directly to an HTTP status code.

    Raised by the router or handlers. The ASGI handler catches these
    and turns them into a JSON error body.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)

    def to_dict(self) -> dict[str, Any]:
        """The uniform JSON error body: ``{"error": ..., "code": ...}``."""
        return {"error": self.detail or f"Error {self.status}", "code": self.status}


class NotFound(HTTPError):  # noqa: N818
    """404: no route matched the request path."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)


class MethodNotAllowed(HTTPError):  # noqa: N818
    """405: route exists but not for this HTTP method.

    Carries an ``Allow`` header listing the valid methods.
    """

    def __init__(self, allowed: frozenset[str], detail: str = "Method Not Allowed") -> None:
        allow_value = ", ".join(sorted(allowed))
        super().__init__(
            status=405,
            detail=detail,
            headers=(("Allow", allow_value),),
        )
