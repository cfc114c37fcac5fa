"""The greeter HTTP API: ``GET /hello`` and ``GET /api/status``.

Run:
    greeter run greeter.service:app

Both routes answer JSON; any other path is a 404 and any other method
on these paths is a 405, both with the uniform error body.
"""

from datetime import UTC, datetime

from greeter.app import App
from greeter.config import AppConfig
from greeter.http.request import Request


def hello(request: Request, config: AppConfig) -> dict[str, str]:
    """Greet ``?name=`` (or the configured default) and echo the request line.

    ``timestamp`` is wall-clock UTC, so successive responses are only
    non-decreasing while the host clock is not stepped backwards.
    """
    name = request.query.get("name") or config.default_name
    return {
        "message": f"Hello, {name}!",
        "timestamp": datetime.now(UTC).isoformat(timespec="seconds"),
        "method": request.method,
        "path": request.path,
    }


def status(config: AppConfig) -> dict[str, str]:
    """Fixed health payload; no clock, so repeated bodies are identical."""
    return {
        "status": "healthy",
        "service": config.service_name,
        "version": config.version,
    }


def create_app(config: AppConfig | None = None) -> App:
    """Build the greeter app with its two routes registered."""
    app = App(config)
    app.route("/hello", methods=["GET"], name="hello")(hello)
    app.route("/api/status", methods=["GET"], name="status")(status)
    return app


app = create_app(AppConfig.from_env())
