#!/usr/bin/env python3
"""multilingual-routes CLI."""

import argparse

from .routes_command import RoutesCommand
from .version_command import VersionCommand


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="multilingual-routes CLI - inspect locale specific routes",
        prog="multilingual-routes"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    for command in (RoutesCommand(), VersionCommand()):
        command.register(subparsers)

    args = parser.parse_args(argv)

    if getattr(args, "execute", None) is not None:
        args.execute(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
