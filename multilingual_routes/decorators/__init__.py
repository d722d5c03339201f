from .middleware_decorator import middleware
from .singleton_decorator import singleton

__all__ = [
    "middleware",
    "singleton",
]
