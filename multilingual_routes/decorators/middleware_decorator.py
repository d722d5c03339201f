import inspect
from typing import Callable, Type, Union

from multilingual_routes.contracts.middleware import Middleware


def _instantiate(middleware: Union[Type[Middleware], Middleware]) -> Middleware:
    if inspect.isclass(middleware):
        if not issubclass(middleware, Middleware):
            raise TypeError(f"{middleware} must inherit from Middleware")
        return middleware()
    if not isinstance(middleware, Middleware):
        raise TypeError(f"{middleware} must be an instance of Middleware")
    return middleware


def middleware(*middlewares: Union[Type[Middleware], Middleware]) -> Callable[[Callable], Callable]:
    """
    Apply middlewares (classes or instances) to a handler, first one outermost.

    Usage:
        @middleware(DetectRequestLocaleMiddleware)
        async def about(locale):
            return __('pages.about')

        @middleware(DetectRequestLocaleMiddleware(), AuditMiddleware)
        async def contact(locale):
            ...
    """
    if not middlewares:
        raise TypeError("middleware() requires at least one middleware")
    instances = [_instantiate(item) for item in middlewares]

    def decorator(func: Callable) -> Callable:
        for instance in reversed(instances):
            func = instance(func)
        return func

    return decorator
