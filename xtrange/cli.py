"""Xtrange - unified CLI dispatcher.

All subcommands live in ``xtrange/commands/*.py`` and expose a
``register(subparsers)`` function that adds themselves to argparse.
"""
from __future__ import annotations

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="xtrange",
        description="Xtrange: talk to and inspect whoever is knocking at the door",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command")

    # Import and register each command
    from xtrange.commands import ask, characters, inspection, serve

    characters.register(sub)
    ask.register(sub)
    inspection.register(sub)
    serve.register(sub)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    # Each command stores a ``func`` on the namespace
    rc = args.func(args)
    sys.exit(rc or 0)
