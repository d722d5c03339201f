"""Base class for the `multilingual-routes` subcommands."""

import argparse
from abc import ABC, abstractmethod


class CommandBase(ABC):
    """A subcommand: a name, a help line, its arguments and what it does."""

    name: str
    help: str

    def register(self, subparsers: "argparse._SubParsersAction") -> argparse.ArgumentParser:
        """Add this command to the CLI parser."""
        parser = subparsers.add_parser(self.name, help=self.help)
        parser.set_defaults(execute=self.execute)
        self.configure_parser(parser)
        return parser

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        pass

    @abstractmethod
    def execute(self, args: argparse.Namespace) -> None:
        ...
