"""Compiled router with exact-match path lookup.

Paths are compared with plain string equality: no trailing-slash
folding, no case folding, no parameters. ``/hello`` matches only
``/hello``.
"""

from greeter.errors import ConfigurationError, MethodNotAllowed, NotFound
from greeter.routing.route import Route, RouteMatch


def validate_path(path: str) -> str:
    """Check that a route path is an absolute, literal path.

    Raises ``ConfigurationError`` for relative paths or paths that
    carry a query string or fragment.
    """
    if not path.startswith("/"):
        msg = f"Route path {path!r} must start with '/'."
        raise ConfigurationError(msg)
    if "?" in path or "#" in path:
        msg = f"Route path {path!r} must not contain a query string or fragment."
        raise ConfigurationError(msg)
    return path


class Router:
    """Compiled router keyed by exact path, then by method.

    Usage::

        router = Router()
        router.add(Route("/hello", hello, frozenset({"GET"})))
        router.compile()
        match = router.match("GET", "/hello")
    """

    __slots__ = ("_compiled", "_routes", "_table")

    def __init__(self) -> None:
        # path -> method -> route
        self._table: dict[str, dict[str, Route]] = {}
        self._routes: list[Route] = []
        self._compiled = False

    def add(self, route: Route) -> None:
        """Add a route to the router. Must be called before compile()."""
        if self._compiled:
            msg = "Cannot add routes after compilation."
            raise RuntimeError(msg)
        if not route.methods:
            msg = f"Route {route.path!r} must allow at least one method."
            raise ConfigurationError(msg)

        by_method = self._table.setdefault(validate_path(route.path), {})
        for method in route.methods:
            if method in by_method:
                msg = f"Duplicate route: {method} {route.path!r} is already registered."
                raise ConfigurationError(msg)
        for method in route.methods:
            by_method[method] = route
        self._routes.append(route)

    @property
    def routes(self) -> list[Route]:
        """Return all registered routes in registration order."""
        return list(self._routes)

    def compile(self) -> None:
        """Freeze the router. No more routes can be added."""
        self._compiled = True

    def match(self, method: str, path: str) -> RouteMatch:
        """Match a request path and method against the route table.

        Returns a ``RouteMatch`` on success.
        Raises ``NotFound`` if no route matches the path.
        Raises ``MethodNotAllowed`` if the path matches but the method doesn't.
        """
        by_method = self._table.get(path)
        if by_method is None:
            raise NotFound()

        route = by_method.get(method)
        if route is None:
            raise MethodNotAllowed(frozenset(by_method))

        return RouteMatch(route=route, method=method)
