"""Production server.

Starts a multi-worker pounce server. The app is frozen before the
server forks so every worker shares one compiled route table.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from greeter.app import App

logger = logging.getLogger("greeter.server")


def run_production_server(
    app: App,
    host: str = "0.0.0.0",
    port: int = 8000,
    workers: int = 0,  # 0 = auto-detect from CPU count
    *,
    log_format: str = "text",
    log_level: str = "info",
) -> None:
    """Run a greeter app in production mode.

    Args:
        app: Greeter App instance.
        host: Bind address (default: 0.0.0.0 for all interfaces).
        port: Bind port (default: 8000).
        workers: Worker count (0 = auto-detect from CPU count).
        log_format: Access log format ("json" or "text").
        log_level: Log level (debug, info, warning, error, critical).

    Example:
        >>> from greeter.service import app
        >>> from greeter.server.production import run_production_server
        >>> run_production_server(app, workers=4)
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    app._ensure_frozen()

    config = ServerConfig(
        host=host,
        port=port,
        workers=workers,
        log_format=log_format,
        log_level=log_level,
        # The app answers its own routes; no server-side health endpoint
        health_check_path=None,
    )
    logger.info(
        "Serving %s on http://%s:%d (production, workers=%s)",
        app.config.service_name,
        host,
        port,
        workers or "auto",
    )
    server = Server(config, app)
    server.run()
