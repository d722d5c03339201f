"""Show version information."""

import argparse
from importlib import metadata as importlib_metadata

from .command_base import CommandBase


class VersionCommand(CommandBase):
    """Command to show version information."""

    name = "version"
    help = "Show version information"

    def _get_version(self) -> str:
        """Resolve version from package metadata, fallback to the module attribute."""
        try:
            return importlib_metadata.version("multilingual-routes")
        except importlib_metadata.PackageNotFoundError:
            from multilingual_routes import __version__
            return __version__

    def execute(self, args: argparse.Namespace) -> None:
        print(f"multilingual-routes v{self._get_version()}")
