"""ASGI handler: translates ASGI scope/messages to greeter types.

The only component that touches raw ASGI directly. Converts scope dicts
to typed Request objects, dispatches through routing, and sends the
Response back through ASGI send().
"""

import inspect
from collections.abc import Awaitable, Callable
from typing import Any

from greeter._internal.asgi import Receive, Scope, Send
from greeter._internal.invoke import invoke
from greeter.errors import HTTPError
from greeter.http.request import Request
from greeter.http.response import Response
from greeter.routing.route import RouteMatch
from greeter.routing.router import Router
from greeter.server.errors import handle_http_error, handle_internal_error
from greeter.server.negotiation import negotiate
from greeter.server.sender import send_response


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    dispatch: Callable[[Request], Awaitable[Response]],
) -> None:
    """Process a single HTTP request through the full pipeline."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope)
    response = await dispatch(request)
    await send_response(response, send)


async def dispatch_request(
    request: Request,
    *,
    router: Router,
    providers: dict[type, Callable[..., Any]] | None = None,
    debug: bool = False,
) -> Response:
    """Route *request* and produce exactly one response.

    Routing failures become 404/405 JSON responses; anything a handler
    raises becomes a 500 JSON response.
    """
    try:
        match = router.match(request.method, request.path)
        return await _invoke_handler(match, request, providers=providers)
    except HTTPError as exc:
        return handle_http_error(exc, request)
    except Exception as exc:
        return handle_internal_error(exc, request, debug)


async def _invoke_handler(
    match: RouteMatch,
    request: Request,
    *,
    providers: dict[type, Callable[..., Any]] | None = None,
) -> Response:
    """Call the matched route handler and negotiate its return value."""
    handler = match.route.handler
    kwargs = _build_handler_kwargs(handler, request, providers)
    result = await invoke(handler, **kwargs)
    return negotiate(result)


def _build_handler_kwargs(
    handler: Callable[..., Any],
    request: Request,
    providers: dict[type, Callable[..., Any]] | None = None,
) -> dict[str, Any]:
    """Inspect handler signature and build kwargs.

    Resolution order:
    1. ``request`` parameter (by name or ``Request`` annotation)
    2. Service providers (by type annotation via ``app.provide()``)
    """
    sig = inspect.signature(handler, eval_str=True)
    kwargs: dict[str, Any] = {}

    for name, param in sig.parameters.items():
        if name == "request" or param.annotation is Request:
            kwargs[name] = request
        elif (
            providers
            and param.annotation is not inspect.Parameter.empty
            and param.annotation in providers
        ):
            kwargs[name] = providers[param.annotation]()

    return kwargs
