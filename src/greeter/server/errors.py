"""Error handling pipeline for greeter requests.

Maps HTTPError exceptions and unexpected failures to uniform JSON
error responses: ``{"error": <reason>, "code": <status>}``.
"""

import logging

from greeter.errors import HTTPError
from greeter.http.request import Request
from greeter.http.response import Response, json_response

logger = logging.getLogger("greeter.server")


def handle_http_error(exc: HTTPError, request: Request) -> Response:
    """Map an HTTPError (404, 405, ...) to its JSON error response."""
    logger.debug("%d %s %s", exc.status, request.method, request.path)
    return json_response(exc.to_dict(), status=exc.status, headers=exc.headers)


def handle_internal_error(exc: Exception, request: Request, debug: bool) -> Response:
    """Handle unexpected exceptions as 500 errors.

    The traceback goes to the ``greeter.server`` logger. In debug mode
    the exception repr is added to the body under ``detail``.
    """
    logger.exception("500 %s %s", request.method, request.path)

    body: dict[str, object] = {"error": "Internal Server Error", "code": 500}
    if debug:
        body["detail"] = repr(exc)
    return json_response(body, status=500)
