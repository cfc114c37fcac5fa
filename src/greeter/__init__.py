"""Greeter: a minimal JSON hello/status API served over ASGI.

Basic usage::

    from greeter import App

    app = App()

    @app.route("/hello")
    def hello(request):
        return {"message": f"Hello, {request.query.get('name') or 'World'}!"}

    app.run()

The ready-made service lives in ``greeter.service``::

    greeter run greeter.service:app
"""

__version__ = "1.0.0"
__all__ = [
    "App",
    "AppConfig",
    "ConfigurationError",
    "GreeterError",
    "HTTPError",
    "MethodNotAllowed",
    "NotFound",
    "Request",
    "Response",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import greeter`` fast while providing a clean top-level API.
    """
    if name == "App":
        from greeter.app import App

        return App

    if name == "AppConfig":
        from greeter.config import AppConfig

        return AppConfig

    if name == "Request":
        from greeter.http.request import Request

        return Request

    if name == "Response":
        from greeter.http.response import Response

        return Response

    if name in ("ConfigurationError", "GreeterError", "HTTPError", "MethodNotAllowed", "NotFound"):
        from greeter import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
