from typing import TYPE_CHECKING, Any, Callable, List, Type

from quart import Quart

from multilingual_routes.contracts.middleware import Middleware
from multilingual_routes.core.middlewares.handle_exceptions_middleware import HandleExceptionsMiddleware
from multilingual_routes.core.router import QuartRouter

if TYPE_CHECKING:
    from multilingual_routes.contracts.route import Route

def apply_middleware_chain(handler: Callable, middlewares: list[Middleware | Type[Middleware] | Callable]) -> Callable:
    """Apply a chain of middleware classes to a handler"""
    if not middlewares:
        return handler
    
    wrapped_handler = handler
    for middleware in reversed(middlewares):  # Apply middlewares in reverse order so they execute in correct order
        resolved_middleware: Callable
        # Allow passing middleware classes, instances, or plain callables
        if isinstance(middleware, type) and issubclass(middleware, Middleware):
            resolved_middleware = middleware()  # type: ignore[call-arg]
        else:
            resolved_middleware = middleware  # type: ignore[assignment]

        if isinstance(resolved_middleware, Middleware) or callable(resolved_middleware):
            wrapped_handler = resolved_middleware(wrapped_handler)  # type: ignore[misc]
        else:
            raise ValueError("Middleware must be a Middleware subclass/instance or a callable")
    
    return wrapped_handler

def register_routes(app: Quart, routes: List[Any]) -> List['Route']:
    """Register routes (plain, grouped or multilingual) with the Quart application.

    Returns the concrete routes that were registered.
    """
    # Flatten all routes; multilingual routes expand into one route per locale here
    flattened_routes = []
    for route in routes:
        flattened_routes.extend(route.flatten())
    
    router = QuartRouter(app)
    registered = []
    for route in flattened_routes:
        if route.handler is None:
            continue  # Skip group routes without handlers
            
        # HandleExceptionsMiddleware always runs first, then route-specific middlewares
        all_middlewares = [HandleExceptionsMiddleware]
        if route.middlewares:
            all_middlewares.extend(route.middlewares)
        
        wrapped_handler = apply_middleware_chain(route.handler, all_middlewares)
        
        # Unnamed routes get a unique endpoint per method+path to avoid collisions
        endpoint_name = f"{wrapped_handler.__name__}:{','.join(sorted(route.methods or []))}:{route.path}"
        router.register_route(route, wrapped_handler, endpoint_name)
        registered.append(route)

    return registered
