from typing import Any, Callable, Optional, Union, List, TYPE_CHECKING

from pydantic import BaseModel, Field, ConfigDict

from multilingual_routes.contracts.middleware import Middleware

if TYPE_CHECKING:
    from multilingual_routes.contracts.multilingual_route import MultilingualRoute


class Route(BaseModel):
    path: str = Field(..., description="The path of the route")
    handler: Optional[Callable] = Field(default=None, description="The handler of the route")
    methods: Optional[list[str]] = Field(default=None, description="The methods of the route")
    middlewares: Optional[list[Union[Middleware, Callable, type]]] = Field(default=None, description="The middlewares of the route")
    prefix: Optional[str] = Field(default="", description="The prefix for route groups")
    routes: Optional[list[Any]] = Field(default=None, description="Nested routes (or multilingual routes) for groups")
    name: Optional[str] = Field(default=None, description="Route name, or the name prefix for route groups")
    locale: Optional[str] = Field(default=None, description="Locale of a concrete multilingual route")
    defaults: Optional[dict[str, Any]] = Field(default=None, description="Default values for route parameters")
    wheres: Optional[dict[str, str]] = Field(default=None, description="Regex constraints for route parameters")

    model_config = ConfigDict(arbitrary_types_allowed=True)
    
    def __init__(self, **data):
        super().__init__(**data)
        # Ensure routes is always a list for groups
        if self.routes is None and self.handler is None:
            self.routes = []
    
    # HTTP method class methods
    @classmethod
    def get(cls, path: str, handler: Callable, middlewares: Optional[List[Union[Middleware, Callable]]] = None, *, name: Optional[str] = None) -> 'Route':
        return cls(path=path, handler=handler, methods=["GET"], middlewares=middlewares, name=name)
    
    @classmethod
    def post(cls, path: str, handler: Callable, middlewares: Optional[List[Union[Middleware, Callable]]] = None, *, name: Optional[str] = None) -> 'Route':
        return cls(path=path, handler=handler, methods=["POST"], middlewares=middlewares, name=name)
    
    @classmethod
    def patch(cls, path: str, handler: Callable, middlewares: Optional[List[Union[Middleware, Callable]]] = None, *, name: Optional[str] = None) -> 'Route':
        return cls(path=path, handler=handler, methods=["PATCH"], middlewares=middlewares, name=name)
    
    @classmethod
    def delete(cls, path: str, handler: Callable, middlewares: Optional[List[Union[Middleware, Callable]]] = None, *, name: Optional[str] = None) -> 'Route':
        return cls(path=path, handler=handler, methods=["DELETE"], middlewares=middlewares, name=name)
    
    @classmethod
    def put(cls, path: str, handler: Callable, middlewares: Optional[List[Union[Middleware, Callable]]] = None, *, name: Optional[str] = None) -> 'Route':
        return cls(path=path, handler=handler, methods=["PUT"], middlewares=middlewares, name=name)

    @classmethod
    def multilingual(cls, key: str, handler: Optional[Callable] = None) -> 'MultilingualRoute':
        """Start a route that is registered once per supported locale."""
        from multilingual_routes.contracts.multilingual_route import MultilingualRoute
        return MultilingualRoute(key=key, handler=handler)

    # Route grouping method
    @classmethod
    def group(cls, prefix: str = "", routes: Optional[List[Any]] = None, middlewares: Optional[List[Union[Middleware, Callable]]] = None, *, name: Optional[str] = None) -> 'Route':
        """Create a route group with path prefix, name prefix (e.g. ``admin.``), routes and middlewares"""
        return cls(
            path="",  # Groups don't have individual paths
            prefix=prefix,
            routes=routes or [],
            middlewares=middlewares,
            name=name,
        )

    def flatten(self, parent_prefix: str = "", parent_middlewares: Optional[List[Union[Middleware, Callable]]] = None, parent_name: str = "") -> List['Route']:
        """Flatten route groups into individual routes"""
        parent_middlewares = parent_middlewares or []
        
        # If this is a regular route (has handler), return it with applied prefix, name prefix and middlewares
        if self.handler is not None:
            full_path = parent_prefix.rstrip('/') + '/' + self.path.lstrip('/')
            full_path = full_path.replace('//', '/').rstrip('/') or '/'
            
            combined_middlewares = parent_middlewares + (self.middlewares or [])
            
            return [self.model_copy(update={
                'path': full_path,
                'middlewares': combined_middlewares if combined_middlewares else None,
                'name': f"{parent_name}{self.name}" if self.name else None,
            })]
        
        # If this is a group, process all nested routes
        flattened = []
        if self.routes:
            current_prefix = parent_prefix.rstrip('/') + '/' + (self.prefix or '').lstrip('/')
            current_prefix = current_prefix.replace('//', '/').rstrip('/') or '/'
            
            current_middlewares = parent_middlewares + (self.middlewares or [])
            current_name = parent_name + (self.name or '')
            
            for route in self.routes:
                flattened.extend(route.flatten(current_prefix, current_middlewares, current_name))
        
        return flattened
