"""List registered routes: multilingual-routes routes <module:attr>."""

import argparse
import importlib
import os
import sys

from quart import Quart

from .command_base import CommandBase


def load_app(target: str) -> Quart:
    """Import ``module:attr`` (attr defaults to ``app``) and return the Quart app."""
    module_name, _, attribute = target.partition(":")
    project_root = os.environ.get("PROJECT_ROOT") or os.getcwd()
    if project_root not in sys.path:
        sys.path.insert(0, project_root)

    module = importlib.import_module(module_name)
    app = getattr(module, attribute or "app", None)
    if callable(app) and not isinstance(app, Quart):
        app = app()
    if not isinstance(app, Quart):
        raise TypeError(f"`{target}` is not a Quart application")
    return app


class RoutesCommand(CommandBase):
    """Print endpoint, methods and rule for each URL rule of an app."""

    name = "routes"
    help = "List routes of a Quart app: multilingual-routes routes <module:attr> [--locale fr]"

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("app", help="Import path of the app, e.g. app.modules.asgi.app:app")
        parser.add_argument("--locale", help="Only show routes registered for this locale")

    def execute(self, args: argparse.Namespace) -> None:
        try:
            app = load_app(args.app)
        except (ImportError, AttributeError, TypeError) as exc:
            print(f"❌ Failed to load app '{args.app}': {exc}")
            return

        rows = []
        for rule in sorted(app.url_map.iter_rules(), key=lambda r: (r.endpoint, r.rule)):
            if rule.endpoint == "static":
                continue
            if args.locale and args.locale not in rule.endpoint.split("."):
                continue
            methods = ",".join(sorted(m for m in (rule.methods or ()) if m not in ("HEAD", "OPTIONS")))
            rows.append((rule.endpoint, methods, rule.rule))

        if not rows:
            print("No routes registered.")
            return

        width = max(len(row[0]) for row in rows)
        for endpoint, methods, path in rows:
            print(f"{endpoint.ljust(width)}  {methods.ljust(7)}  {path}")
