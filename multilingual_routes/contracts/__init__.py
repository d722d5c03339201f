"""Contract classes and abstract interfaces.

These are the building blocks used across the package and are exported so
they can be imported directly from :mod:`multilingual_routes`.
"""

from .middleware import Middleware
from .route import Route
from .multilingual_route import MultilingualRoute, RegistrationContext

__all__ = [
    "Middleware",
    "Route",
    "MultilingualRoute",
    "RegistrationContext",
]
