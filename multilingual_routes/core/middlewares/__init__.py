"""Collection of core middleware exports.

Only middlewares that ship with the package are re-exported here so they
can be imported directly from :mod:`multilingual_routes`.
"""

from .detect_request_locale_middleware import DetectRequestLocaleMiddleware
from .handle_exceptions_middleware import HandleExceptionsMiddleware

__all__ = [
    "DetectRequestLocaleMiddleware",
    "HandleExceptionsMiddleware",
]
