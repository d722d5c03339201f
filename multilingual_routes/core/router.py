"""
Quart adapter for the operations multilingual routes need from a router:
adding rules, building URLs by name and reading the matched route.
"""

import re
from typing import Any, Callable, Mapping, Optional, TYPE_CHECKING

from pydantic import BaseModel, Field
from quart import Quart, has_request_context, request
from werkzeug.routing import BaseConverter, BuildError, MapAdapter

from multilingual_routes.exceptions.routing_exceptions import UnresolvedRouteError

if TYPE_CHECKING:
    from multilingual_routes.contracts.route import Route

# <name>, <name?>, <converter:name>, <converter(args):name?>
_PARAMETER_RE = re.compile(r"<(?:(?P<converter>[^<>:]+):)?(?P<name>[A-Za-z_]\w*)(?P<optional>\?)?>")


class RegexConverter(BaseConverter):
    """URL converter matching an arbitrary pattern: ``<regex("[0-9]+"):id>``."""

    part_isolating = False

    def __init__(self, map, *args, **kwargs):
        super().__init__(map, **kwargs)
        if args:
            self.regex = args[0]


class MatchedRoute(BaseModel):
    name: str = Field(..., description="Endpoint of the matched rule")
    params: dict[str, Any] = Field(default_factory=dict, description="Route arguments")
    query: dict[str, Any] = Field(default_factory=dict, description="Query string arguments; repeated keys hold a list")


def parameter_names(path: str) -> list[str]:
    return [match.group("name") for match in _PARAMETER_RE.finditer(path)]


def expand_optional_parameters(path: str) -> list[tuple[str, list[str]]]:
    """
    Expand trailing ``<name?>`` segments into concrete paths, longest first.

    ``/search/<filter?>`` gives ``[("/search/<filter>", []), ("/search", ["filter"])]``.
    Optional markers that are not trailing are treated as required.
    """
    segments = path.split("/")
    first_optional = len(segments)
    while first_optional > 0:
        match = _PARAMETER_RE.fullmatch(segments[first_optional - 1])
        if match is None or not match.group("optional"):
            break
        first_optional -= 1

    variants = []
    for end in range(len(segments), first_optional - 1, -1):
        kept = "/".join(segments[:end]).replace("?>", ">") or "/"
        dropped = [_PARAMETER_RE.fullmatch(segment).group("name") for segment in segments[end:]]
        variants.append((kept, dropped))
    return variants


def _converter_for(pattern: str) -> str:
    if '"' not in pattern:
        return f'regex("{pattern}")'
    if "'" not in pattern:
        return f"regex('{pattern}')"
    raise ValueError(f"Route constraint `{pattern}` cannot contain both quote characters")


def apply_constraints(path: str, wheres: Mapping[str, str]) -> str:
    """Rewrite bare ``<name>`` parameters that have a constraint into regex converters."""
    if not wheres:
        return path

    def replace(match: re.Match) -> str:
        name = match.group("name")
        if match.group("converter") or name not in wheres:
            return match.group(0)
        optional = "?" if match.group("optional") else ""
        return f"<{_converter_for(wheres[name])}:{name}{optional}>"

    return _PARAMETER_RE.sub(replace, path)


class QuartRouter:
    def __init__(self, app: Quart) -> None:
        self.app = app

    def register_route(self, route: 'Route', view_func: Callable, endpoint: Optional[str] = None) -> None:
        """Add one rule per optional-parameter variant of ``route``, all sharing the endpoint."""
        self.app.url_map.converters.setdefault("regex", RegexConverter)

        endpoint = route.name or endpoint
        route_defaults = route.defaults or {}
        for path, dropped in expand_optional_parameters(route.path):
            arguments = parameter_names(path)
            defaults = {key: value for key, value in route_defaults.items() if key not in arguments}
            for name in dropped:
                defaults.setdefault(name, route_defaults.get(name))

            self.app.add_url_rule(
                apply_constraints(path, route.wheres or {}),
                endpoint=endpoint,
                view_func=view_func,
                methods=route.methods,
                defaults=defaults or None,
            )

    def has_route(self, name: str) -> bool:
        return name in self.app.view_functions

    def generate_url(self, name: str, parameters: Optional[Mapping[str, Any]] = None, *,
                     absolute: bool = True, locale: Optional[str] = None) -> str:
        """Build the URL of a named route; unknown parameters become the query string."""
        try:
            return self._url_adapter().build(name, dict(parameters or {}), force_external=absolute)
        except BuildError as e:
            raise UnresolvedRouteError(name, locale or name.split(".", 1)[0], reason=str(e)) from e

    def current_route(self) -> Optional[MatchedRoute]:
        if not has_request_context():
            return None
        rule = request.url_rule
        if rule is None:
            return None
        return MatchedRoute(
            name=rule.endpoint,
            params=dict(request.view_args or {}),
            query={key: values[0] if len(values) == 1 else values
                   for key, values in request.args.to_dict(flat=False).items()},
        )

    def _url_adapter(self) -> MapAdapter:
        adapter = None
        if has_request_context():
            adapter = self.app.create_url_adapter(request._get_current_object())
        else:
            adapter = self.app.create_url_adapter(None)

        if adapter is None:
            adapter = self.app.url_map.bind(
                self.app.config.get("SERVER_NAME") or "localhost",
                url_scheme=self.app.config.get("PREFERRED_URL_SCHEME") or "http",
            )
        return adapter
