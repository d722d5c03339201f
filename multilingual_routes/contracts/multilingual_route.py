import logging
from typing import Any, Callable, Iterable, Mapping, Optional, Union, List, TYPE_CHECKING

from pydantic import BaseModel, Field, ConfigDict, field_validator
from quart import render_template

from multilingual_routes.application import Application
from multilingual_routes.config import MultilingualConfig
from multilingual_routes.contracts.middleware import Middleware
from multilingual_routes.contracts.route import Route
from multilingual_routes.core import resolution
from multilingual_routes.core.middlewares.detect_request_locale_middleware import DetectRequestLocaleMiddleware
from multilingual_routes.exceptions.http_exceptions import NotFoundException
from multilingual_routes.exceptions.routing_exceptions import ConfigurationError

if TYPE_CHECKING:
    from quart import Quart


class RegistrationContext(BaseModel):
    """Everything a registration reads besides the builder itself."""

    config: MultilingualConfig = Field(..., description="Locale configuration")
    path_prefix: str = Field(default="", description="Path prefix of the enclosing route groups")
    name_prefix: str = Field(default="", description="Name prefix of the enclosing route groups (e.g. `admin.`)")
    middlewares: list[Any] = Field(default_factory=list, description="Middlewares of the enclosing route groups")

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    @classmethod
    def from_application(cls, **values: Any) -> 'RegistrationContext':
        return cls(config=Application().get_config(), **values)


class MultilingualRoute(BaseModel):
    """
    A route registered once per supported locale.

    Every modifier returns a new builder, so the value handed to
    :meth:`register` fully describes the routes it creates::

        Route.multilingual("search", search_controller.index) \\
            .name("search.results") \\
            .where("filter", ".*") \\
            .register(app)
    """

    key: str = Field(..., description="Route key: translation lookup key and default base name")
    handler: Optional[Callable] = Field(default=None, description="Async handler; None registers a placeholder")
    methods: list[str] = Field(default_factory=lambda: ["GET"], description="HTTP methods")
    group_name: Optional[str] = Field(default=None, description="Base name replacing the key in every locale")
    locale_names: dict[str, str] = Field(default_factory=dict, description="Base name per locale")
    include_locales: Optional[list[str]] = Field(default=None, description="Only register these locales")
    exclude_locales: Optional[list[str]] = Field(default=None, description="Never register these locales")
    parameter_defaults: dict[str, Any] = Field(default_factory=dict, description="Defaults shared by every locale")
    wheres: dict[str, str] = Field(default_factory=dict, description="Parameter regex constraints")
    middlewares: list[Any] = Field(default_factory=list, description="Route level middlewares")
    template: Optional[str] = Field(default=None, description="Template rendered by view routes")
    template_context: dict[str, Any] = Field(default_factory=dict, description="Context passed to the template")

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    @field_validator("key")
    @classmethod
    def _normalize_key(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("A multilingual route requires a non-empty key")
        return resolution.normalize_key(value)

    # ---------------- modifiers ----------------
    def name(self, name: str) -> 'MultilingualRoute':
        return self.model_copy(update={"group_name": name})

    def names(self, names: Mapping[str, str]) -> 'MultilingualRoute':
        return self.model_copy(update={"locale_names": {**self.locale_names, **names}})

    def only(self, locales: Iterable[str]) -> 'MultilingualRoute':
        return self.model_copy(update={"include_locales": list(locales)})

    def except_(self, locales: Iterable[str]) -> 'MultilingualRoute':
        return self.model_copy(update={"exclude_locales": list(locales)})

    def defaults(self, defaults: Mapping[str, Any]) -> 'MultilingualRoute':
        return self.model_copy(update={"parameter_defaults": {**self.parameter_defaults, **defaults}})

    def where(self, name: Union[str, Mapping[str, str]], pattern: Optional[str] = None) -> 'MultilingualRoute':
        constraints = dict(name) if isinstance(name, Mapping) else {name: pattern}
        if any(value is None for value in constraints.values()):
            raise ValueError("A route constraint requires a pattern")
        return self.model_copy(update={"wheres": {**self.wheres, **constraints}})

    def method(self, *methods: str) -> 'MultilingualRoute':
        return self.model_copy(update={"methods": [method.upper() for method in methods]})

    def view(self, template: str, context: Optional[Mapping[str, Any]] = None) -> 'MultilingualRoute':
        return self.model_copy(update={"template": template, "template_context": dict(context or {})})

    def middleware(self, *middlewares: Union[Middleware, Callable, type]) -> 'MultilingualRoute':
        return self.model_copy(update={"middlewares": [*self.middlewares, *middlewares]})

    # ---------------- expansion ----------------
    def locales(self, config: MultilingualConfig) -> list[str]:
        return resolution.eligible_locales(config, self.include_locales, self.exclude_locales)

    def route_name(self, locale: str, config: MultilingualConfig, name_prefix: str = "") -> str:
        base = resolution.base_name(self.key, locale, self.group_name, self.locale_names)
        return resolution.route_name(base, locale, config, name_prefix)

    def route_path(self, locale: str, config: MultilingualConfig, path_prefix: str = "") -> str:
        return resolution.route_path(self.key, locale, config, path_prefix)

    def register(self, app: Optional['Quart'] = None, context: Optional[RegistrationContext] = None) -> List[Route]:
        """
        Expand into one concrete route per eligible locale.

        Args:
            app: When given, the concrete routes are also added to this app.
            context: Enclosing groups and configuration; defaults to the
                application configuration with no prefixes.

        Returns:
            The concrete routes, in supported-locale order.

        Raises:
            ConfigurationError: If no supported locales are configured.
        """
        context = context or RegistrationContext.from_application()
        config = context.config
        if not config.supported_locales:
            raise ConfigurationError()

        handler = self._resolve_handler()
        middlewares = [DetectRequestLocaleMiddleware, *context.middlewares, *self.middlewares]

        routes: List[Route] = []
        for locale in self.locales(config):
            route = Route(
                path=self.route_path(locale, config, context.path_prefix),
                handler=handler,
                methods=list(self.methods),
                middlewares=middlewares,
                name=self.route_name(locale, config, context.name_prefix),
                locale=locale,
                defaults=dict(self.parameter_defaults) or None,
                wheres=dict(self.wheres) or None,
            )
            logging.debug(f"Multilingual route `{self.key}` [{locale}] -> {route.name} {route.path}")
            routes.append(route)

        if app is not None:
            from multilingual_routes.utils.routing_utils import register_routes
            register_routes(app, routes)

        return routes

    def flatten(self, parent_prefix: str = "", parent_middlewares: Optional[list] = None, parent_name: str = "") -> List[Route]:
        """Expand inside a route group, picking up its path prefix, name prefix and middlewares."""
        context = RegistrationContext.from_application(
            path_prefix=parent_prefix,
            name_prefix=parent_name,
            middlewares=list(parent_middlewares or []),
        )
        return self.register(context=context)

    def _resolve_handler(self) -> Callable:
        if self.template is not None:
            template, template_context = self.template, self.template_context

            async def view(**kwargs):
                return await render_template(template, **template_context)

            return view

        if self.handler is not None:
            return self.handler

        key = self.key

        async def placeholder(**kwargs):
            raise NotFoundException(message=f"Route `{key}` has no handler.")

        return placeholder
