from typing import Optional

from multilingual_routes.exceptions.common_exceptions import AppException


class ConfigurationError(RuntimeError):
    def __init__(self, message: Optional[str] = None):
        super().__init__(
            message or "No supported locales configured. Set `LOCALES_SUPPORTED` or pass `supported_locales` to boot()."
        )

class UnresolvedRouteError(AppException, ValueError):
    """No concrete route exists for the requested name in the requested locale."""

    def __init__(self, name: str, locale: str, *, reason: Optional[str] = None):
        self.name = name
        self.locale = locale
        message = f"Route [{name}] is not defined for locale [{locale}]."
        if reason:
            message = f"Route [{name}] cannot be generated for locale [{locale}]: {reason}"
        super().__init__(message, data={"name": name, "locale": locale})

class NoCurrentRouteError(AppException, LookupError):
    def __init__(self):
        super().__init__("No route has been matched for the current request.")
