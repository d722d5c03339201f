"""Custom exceptions for multilingual route registration and resolution."""

from .common_exceptions import (
    AppException,
    EnvInvalidException,
)
from .http_exceptions import (
    HttpException,
    ServerErrorException,
    NotFoundException,
)
from .routing_exceptions import (
    ConfigurationError,
    UnresolvedRouteError,
    NoCurrentRouteError,
)


__all__ = [
    # common
    "AppException",
    "EnvInvalidException",
    # http
    "HttpException",
    "ServerErrorException",
    "NotFoundException",
    # routing
    "ConfigurationError",
    "UnresolvedRouteError",
    "NoCurrentRouteError",
]
