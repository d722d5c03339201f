from abc import ABC, abstractmethod
from functools import wraps
from typing import Callable, Any, Awaitable


class Middleware(ABC):
    """
    A step around a route handler.

    Quart calls handlers with the route arguments as keyword arguments
    (``slug="hello"``); a middleware receives the same arguments and decides
    whether and how to call the next step of the chain.
    """

    @abstractmethod
    async def handle(self, next_handler: Callable[..., Awaitable[Any]], *args, **kwargs) -> Any:
        """
        Args:
            next_handler: The next step: another middleware or the handler itself.
            *args, **kwargs: Route arguments to pass along.

        Returns:
            The response produced by the rest of the chain (or a replacement).
        """

    def __call__(self, func: Callable[..., Awaitable[Any]]) -> Callable[..., Awaitable[Any]]:
        """Wrap ``func``; the wrapper keeps its name so endpoints stay readable."""
        @wraps(func)
        async def wrapper(*args, **kwargs):
            return await self.handle(func, *args, **kwargs)
        return wrapper
