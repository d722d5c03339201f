"""
URL generation for multilingual routes.

Usage:
    from multilingual_routes import localized_route, current_route

    localized_route('search.results', {'filter': 'Foo'}, 'fr')   # http://localhost/fr/recherche/Foo
    localized_route('home')                                      # active locale
    current_route('fr')                                          # this page, in French
"""

import logging
from typing import Any, Mapping, Optional, TYPE_CHECKING

from quart import current_app

from multilingual_routes.application import Application
from multilingual_routes.config import MultilingualConfig
from multilingual_routes.core import resolution
from multilingual_routes.core.localization import get_locale, has_active_locale
from multilingual_routes.core.router import QuartRouter
from multilingual_routes.exceptions.routing_exceptions import NoCurrentRouteError, UnresolvedRouteError

if TYPE_CHECKING:
    from quart import Quart


def resolve_locale(locale: Optional[str], config: MultilingualConfig) -> str:
    """
    Requested locale when supported; otherwise the active locale, then the default.

    An unsupported locale is not an error: it is replaced silently.
    """
    if locale and locale in config.supported_locales:
        return locale

    active = get_locale() if has_active_locale() else config.default
    fallback = active if active in config.supported_locales else config.default
    if locale:
        logging.debug(f"Unsupported locale `{locale}` requested, using `{fallback}`")
    return fallback


def localized_route(name: str, parameters: Optional[Mapping[str, Any]] = None, locale: Optional[str] = None,
                    absolute: bool = True, *, app: Optional['Quart'] = None) -> str:
    """
    Generate the URL of a multilingual route in a locale.

    Args:
        name: Route key, group name or locale override name. A name already
            qualified with a locale (``fr.test``) is used as-is.
        parameters: Route parameters; the rest become the query string.
        locale: Target locale; the active locale when omitted.
        absolute: Generate a full URL rather than a path.
        app: Quart app; defaults to ``current_app``.

    Raises:
        UnresolvedRouteError: No route of that name exists in the locale, or
            it cannot be built with the given parameters.
    """
    config = Application().get_config()
    locale = resolve_locale(locale, config)
    router = QuartRouter(app or current_app._get_current_object())

    for candidate in resolution.candidate_names(name, locale, config):
        if router.has_route(candidate):
            return router.generate_url(candidate, parameters, absolute=absolute, locale=locale)

    raise UnresolvedRouteError(name, locale)


def current_route(locale: Optional[str] = None, absolute: bool = True, *, app: Optional['Quart'] = None) -> str:
    """
    URL of the route matched by the current request, in another locale.

    Route arguments and query string arguments are carried over; route
    arguments win on conflicts.

    Raises:
        NoCurrentRouteError: Outside a request, or before a route matched.
    """
    app = app or current_app._get_current_object()
    matched = QuartRouter(app).current_route()
    if matched is None:
        raise NoCurrentRouteError()

    config = Application().get_config()
    base = resolution.strip_locale(matched.name, config)
    return localized_route(base, {**matched.query, **matched.params}, locale, absolute, app=app)
