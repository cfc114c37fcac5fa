"""``greeter call``: dispatch a single request without a server.

Builds an explicit ``Request`` from the method and target, runs it
through ``App.dispatch`` on an anyio event loop, and prints the status
line and JSON body.
"""

import argparse

import anyio

from greeter.cli._resolve import resolve_or_exit
from greeter.http.request import Request


def run_call(args: argparse.Namespace) -> None:
    """Print ``<status>`` then the response body; exit 1 unless 2xx."""
    app = resolve_or_exit(args)
    request = Request.from_target(args.method, args.target)

    response = anyio.run(app.dispatch, request)

    print(response.status)
    print(response.text)
    if not 200 <= response.status < 300:
        raise SystemExit(1)
