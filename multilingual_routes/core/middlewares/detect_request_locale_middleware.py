from typing import Any, Callable, Awaitable

from quart import request

from multilingual_routes.contracts.middleware import Middleware
from multilingual_routes.core.locales import detect_locale
from multilingual_routes.core.localization import set_locale, reset_locale


class DetectRequestLocaleMiddleware(Middleware):
    """Activate the locale named by the first path segment for the rest of the request.

    ``/fr/recherche`` runs the handler with ``fr`` active; ``/search`` leaves
    the active locale untouched. The previous locale is restored once the
    handler chain returns.
    """

    async def handle(self, next_handler: Callable[..., Awaitable[Any]], *args, **kwargs) -> Any:
        locale = detect_locale(request.path)
        if locale is None:
            return await next_handler(*args, **kwargs)

        token = set_locale(locale)
        try:
            return await next_handler(*args, **kwargs)
        finally:
            reset_locale(token)
