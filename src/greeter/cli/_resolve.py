"""App import resolution: resolves ``"module:attribute"`` strings to App instances.

Shared by every ``greeter`` subcommand that takes an app argument.
"""

import argparse
import importlib
import sys

from greeter.app import App
from greeter.errors import GreeterError


def resolve_app(import_string: str) -> App:
    """Resolve an import string to a greeter App instance.

    Accepts ``"module:attribute"`` format.  When the attribute portion
    is omitted, defaults to ``"app"`` (e.g. ``"myapp"`` resolves to
    ``myapp.app``).

    Supports factory functions: if the resolved object is callable and
    not an App instance, it is called with no arguments.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not a greeter ``App`` or factory.
        GreeterError: If importing the module builds an invalid app, for
            example from a malformed ``GREETER_*`` variable.
    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "app"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if callable(obj) and not isinstance(obj, App):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if not isinstance(obj, App):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not a greeter.App instance"
        raise TypeError(msg)

    return obj


def resolve_or_exit(args: argparse.Namespace) -> App:
    """Resolve ``args.app``, printing the error and exiting 1 on failure."""
    try:
        return resolve_app(args.app)
    except (ImportError, AttributeError, TypeError, GreeterError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
