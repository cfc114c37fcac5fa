"""Greeter CLI: serve, inspect, and exercise an app.

Entry point registered as ``greeter`` in ``pyproject.toml``::

    [project.scripts]
    greeter = "greeter.cli:main"
"""

import argparse
import sys

DEFAULT_APP = "greeter.service:app"


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``greeter`` command."""
    parser = argparse.ArgumentParser(
        prog="greeter",
        description="Greeter: a minimal JSON hello/status API.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- greeter run ------------------------------------------------------
    run_parser = subparsers.add_parser("run", help="Start dev or production server")
    run_parser.add_argument(
        "app",
        nargs="?",
        default=DEFAULT_APP,
        help=f"Import string (default: {DEFAULT_APP})",
    )
    run_parser.add_argument("--host", default=None, help="Bind host address")
    run_parser.add_argument("--port", type=int, default=None, help="Bind port number")
    run_parser.add_argument(
        "--production",
        action="store_true",
        help="Run in production mode (multi-worker)",
    )
    run_parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Worker count (0=auto-detect, production only)",
    )

    # -- greeter routes ---------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes")
    routes_parser.add_argument(
        "app",
        nargs="?",
        default=DEFAULT_APP,
        help=f"Import string (default: {DEFAULT_APP})",
    )

    # -- greeter call -----------------------------------------------------
    call_parser = subparsers.add_parser("call", help="Dispatch one request in-process")
    call_parser.add_argument("method", help="HTTP method (e.g. GET)")
    call_parser.add_argument("target", help="Request target (e.g. '/hello?name=Ada')")
    call_parser.add_argument(
        "app",
        nargs="?",
        default=DEFAULT_APP,
        help=f"Import string (default: {DEFAULT_APP})",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "run":
        from greeter.cli._run import run_server

        run_server(args)
    elif args.command == "routes":
        from greeter.cli._routes import run_routes

        run_routes(args)
    elif args.command == "call":
        from greeter.cli._call import run_call

        run_call(args)
