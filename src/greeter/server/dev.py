"""Development server with hot reload.

Starts a pounce ASGI server with the live greeter App object.
Uses single-worker mode with reload enabled for development.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from greeter.app import App

logger = logging.getLogger("greeter.server")


def run_dev_server(
    app: App,
    host: str,
    port: int,
    *,
    reload: bool = True,
    app_path: str | None = None,
) -> None:
    """Start a pounce dev server with the given greeter App.

    Pounce's ``run()`` takes an import string (e.g., ``"myapp:app"``),
    but greeter has a live ``App`` object. We use ``pounce.Server``
    directly with the ASGI callable.

    Args:
        app: ASGI callable (greeter App instance).
        host: Bind host address.
        port: Bind port number.
        reload: Enable auto-reload on file changes (default True).
        app_path: Optional ``"module:attribute"`` import string.  When
            provided, pounce reimports the app on each reload cycle so
            that code changes on disk take effect immediately.
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    config = ServerConfig(
        host=host,
        port=port,
        workers=1,
        reload=reload,
        log_level=app.config.log_level,
    )
    logger.info("Serving %s on http://%s:%d (development)", app.config.service_name, host, port)
    server = Server(config, app, app_path=app_path)
    server.run()
