"""Return-value negotiation: maps handler return values to Response objects.

isinstance-based dispatch, no magic, fully predictable. Every
negotiated response is JSON.
"""

from typing import Any

from greeter.http.response import Response, json_response


def negotiate(value: Any) -> Response:
    """Convert a handler's return value to a ``Response``.

    Dispatch order:

    1. ``Response`` -> pass through
    2. ``dict`` / ``list`` -> 200, application/json
    3. ``(value, int)`` -> negotiate value, override status
    4. ``(value, int, dict)`` -> negotiate value, override status + headers
    """
    match value:
        case Response():
            return value
        case dict() | list():
            return json_response(value)
        case (inner, int() as status):
            return negotiate(inner).with_status(status)
        case (inner, int() as status, dict() as headers):
            return negotiate(inner).with_status(status).with_headers(headers)
        case _:
            msg = (
                f"Cannot convert {type(value).__name__} to a response. "
                f"Return dict, list, Response, or a (value, status[, headers]) tuple."
            )
            raise TypeError(msg)
