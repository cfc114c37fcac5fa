"""Greeter application class.

Mutable during setup (route registration, providers).
Frozen at runtime when app.run(), dispatch(), or __call__() is first invoked.
"""

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from greeter._internal.asgi import Receive, Scope, Send
from greeter._internal.types import Handler
from greeter.config import AppConfig
from greeter.http.request import Request
from greeter.http.response import Response
from greeter.routing.route import Route
from greeter.routing.router import Router
from greeter.server.handler import dispatch_request, handle_request

logger = logging.getLogger("greeter.app")


@dataclass(slots=True)
class _PendingRoute:
    """A route waiting to be compiled."""

    path: str
    handler: Handler
    methods: list[str] | None
    name: str | None


class App:
    """The greeter application.

    Mutable during setup (route registration, providers).
    Frozen at runtime when ``app.run()``, ``dispatch()`` or ``__call__()``
    is first invoked.

    Thread safety:
        The setup phase is single-threaded (decorators at import time).
        The freeze transition uses a Lock + double-check to ensure exactly
        one thread compiles the app, even when several ASGI workers call
        ``__call__()`` concurrently on first request.
    """

    __slots__ = (
        "_freeze_lock",
        "_frozen",
        "_pending_routes",
        "_providers",
        "_router",
        "config",
    )

    def __init__(self, config: AppConfig | None = None) -> None:
        self.config: AppConfig = config or AppConfig()
        self._pending_routes: list[_PendingRoute] = []
        self._providers: dict[type, Callable[..., Any]] = {AppConfig: lambda: self.config}
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()

        # Compiled state: set during _freeze()
        self._router: Router | None = None

    # -- Route registration --

    def route(
        self,
        path: str,
        *,
        methods: list[str] | None = None,
        name: str | None = None,
    ) -> Callable[[Handler], Handler]:
        """Register a route handler via decorator.

        Args:
            path: Exact URL path. Matching is case-sensitive and does not
                fold trailing slashes.
            methods: HTTP methods. Defaults to ``["GET"]``.
            name: Optional route name, shown by ``greeter routes``.
        """

        def decorator(func: Handler) -> Handler:
            self._check_not_frozen()
            self._pending_routes.append(_PendingRoute(path, func, methods, name))
            return func

        return decorator

    # -- Service injection --

    def provide(self, annotation: type, factory: Callable[..., Any]) -> None:
        """Register a provider factory for dependency injection.

        When a handler parameter's type annotation matches *annotation*,
        greeter calls *factory* (with no arguments) and injects the result.
        ``AppConfig`` is provided by default::

            @app.route("/api/status")
            def status(config: AppConfig) -> dict: ...
        """
        self._check_not_frozen()
        self._providers[annotation] = factory

    # -- Dispatch --

    async def dispatch(self, request: Request) -> Response:
        """Produce the response for one explicit request value.

        This is the router's entry point: it never reads ambient
        request state, so it can be called directly from tests, the
        CLI, or any transport.
        """
        self._ensure_frozen()
        assert self._router is not None
        return await dispatch_request(
            request,
            router=self._router,
            providers=self._providers,
            debug=self.config.debug,
        )

    # -- Server --

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Start the server (dev or production based on config.debug).

        Args:
            host: Override bind host.
            port: Override bind port.
        """
        self._ensure_frozen()

        _host = host or self.config.host
        _port = port or self.config.port

        if self.config.debug:
            from greeter.server.dev import run_dev_server

            run_dev_server(self, _host, _port, reload=True)
        else:
            from greeter.server.production import run_production_server

            run_production_server(
                self,
                host=_host,
                port=_port,
                workers=self.config.workers,
                log_format=self.config.log_format,
                log_level=self.config.log_level,
            )

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point.

        Handles the lifespan scope directly, then delegates HTTP scopes
        to the request handler pipeline.
        """
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        self._ensure_frozen()
        await handle_request(scope, receive, send, dispatch=self.dispatch)

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Run the ASGI lifespan protocol.

        Freezes the app at startup (before first HTTP request) so
        configuration errors surface before the server accepts traffic.
        """
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                try:
                    self._ensure_frozen()
                except Exception as exc:
                    logger.exception("Startup failed")
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return
                await send({"type": "lifespan.startup.complete"})

            elif msg_type == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return

    # -- Internal --

    def _ensure_frozen(self) -> None:
        """Thread-safe freeze with double-check locking."""
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._freeze()

    def _freeze(self) -> None:
        """Compile the app into its frozen runtime state.

        MUST only be called while holding _freeze_lock.
        """
        router = Router()
        for pending in self._pending_routes:
            methods = frozenset(m.upper() for m in (pending.methods or ["GET"]))
            router.add(
                Route(
                    path=pending.path,
                    handler=pending.handler,
                    methods=methods,
                    name=pending.name,
                )
            )
        router.compile()
        self._router = router
        self._frozen = True
        logger.debug("Compiled %d route(s)", len(router.routes))

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = (
                "Cannot modify the app after it has started serving requests. "
                "Register routes and providers before calling app.run()."
            )
            raise RuntimeError(msg)
