"""``greeter run``: development or production server command."""

import argparse
import logging

from greeter.cli._resolve import resolve_or_exit


def run_server(args: argparse.Namespace) -> None:
    """Start the greeter server (dev or production mode).

    Resolves ``args.app`` to a greeter App, configures logging at the
    app's ``log_level``, then delegates to either:
    - ``run_dev_server()`` when the app runs with ``debug=True``
    - ``run_production_server()`` otherwise, or with ``--production``
    """
    app = resolve_or_exit(args)

    logging.basicConfig(
        level=app.config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    host = args.host or app.config.host
    port = args.port or app.config.port

    if args.production or not app.config.debug:
        from greeter.server.production import run_production_server

        run_production_server(
            app,
            host=host,
            port=port,
            workers=args.workers if args.workers is not None else app.config.workers,
            log_format=app.config.log_format,
            log_level=app.config.log_level,
        )
    else:
        from greeter.server.dev import run_dev_server

        run_dev_server(app, host, port, reload=True, app_path=args.app)
