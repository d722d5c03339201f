import pytest
from pydantic import ValidationError

from multilingual_routes import Route, MultilingualRoute, RegistrationContext, register_routes
from multilingual_routes.config import MultilingualConfig
from multilingual_routes.contracts.middleware import Middleware
from multilingual_routes.core.middlewares import DetectRequestLocaleMiddleware
from multilingual_routes.exceptions import ConfigurationError


async def show(**kwargs):
    return "show"


class AuditMiddleware(Middleware):
    async def handle(self, next_handler, *args, **kwargs):
        return await next_handler(*args, **kwargs)


def test_modifiers_return_new_builders():
    route = Route.multilingual("test", show)
    named = route.name("foo")

    assert route.group_name is None
    assert named.group_name == "foo"
    assert named is not route
    assert isinstance(named, MultilingualRoute)


def test_builder_values_are_frozen():
    route = Route.multilingual("test", show)

    with pytest.raises(ValidationError):
        route.key = "other"


def test_mapping_modifiers_merge():
    route = (
        Route.multilingual("test", show)
        .names({"en": "testing"})
        .names({"fr": "teste"})
        .defaults({"page": 1})
        .defaults({"sort": "asc"})
        .where("id", "[0-9]+")
        .where({"slug": "[a-z-]+"})
    )

    assert route.locale_names == {"en": "testing", "fr": "teste"}
    assert route.parameter_defaults == {"page": 1, "sort": "asc"}
    assert route.wheres == {"id": "[0-9]+", "slug": "[a-z-]+"}


def test_where_requires_a_pattern():
    with pytest.raises(ValueError):
        Route.multilingual("test").where("id")


def test_methods_are_upper_cased():
    assert Route.multilingual("test").method("post", "put").methods == ["POST", "PUT"]
    assert Route.multilingual("test").methods == ["GET"]


@pytest.mark.parametrize("key", ["", "   "])
def test_an_empty_key_is_rejected(key):
    with pytest.raises(ValidationError):
        Route.multilingual(key)


def test_keys_are_normalized():
    assert Route.multilingual("/about").key == "about"
    assert Route.multilingual("/").key == "/"


def test_include_wins_over_exclude():
    config = MultilingualConfig(supported_locales=["en", "fr", "de"])
    route = Route.multilingual("test").except_(["fr"]).only(["fr", "de"])

    assert route.locales(config) == ["fr", "de"]


def test_register_expands_one_route_per_locale(test_translations):
    routes = Route.multilingual("test", show).register()

    assert [route.locale for route in routes] == ["en", "fr"]
    assert [route.name for route in routes] == ["en.test", "fr.test"]
    assert [route.path for route in routes] == ["/test", "/fr/teste"]
    assert all(route.handler is show for route in routes)


def test_register_follows_the_configured_locale_order(configure):
    configure(supported_locales=["fr", "de", "en"], default_locale="en")

    routes = Route.multilingual("test", show).register()

    assert [route.locale for route in routes] == ["fr", "de", "en"]
    assert [route.path for route in routes] == ["/fr/test", "/de/test", "/test"]


def test_every_route_detects_the_request_locale_first():
    routes = Route.multilingual("test", show).middleware(AuditMiddleware).register()

    for route in routes:
        assert route.middlewares == [DetectRequestLocaleMiddleware, AuditMiddleware]


def test_register_requires_supported_locales(configure):
    configure(supported_locales=[])

    with pytest.raises(ConfigurationError):
        Route.multilingual("test", show).register()


def test_register_with_an_explicit_context():
    context = RegistrationContext(
        config=MultilingualConfig(supported_locales=["de", "it"], default_locale="de", prefix_default=True),
        path_prefix="/shop",
        name_prefix="shop.",
    )

    routes = Route.multilingual("cart", show).register(context=context)

    assert [route.name for route in routes] == ["de.shop.cart", "it.shop.cart"]
    assert [route.path for route in routes] == ["/de/shop/cart", "/it/shop/cart"]


def test_groups_pass_their_prefixes_and_middlewares(app):
    registered = register_routes(app, [
        Route.group("/admin", middlewares=[AuditMiddleware], name="admin.", routes=[
            Route.multilingual("users", show),
            Route.get("/health", show, name="health"),
        ]),
    ])

    by_name = {route.name: route for route in registered}
    assert set(by_name) == {"en.admin.users", "fr.admin.users", "admin.health"}
    assert by_name["fr.admin.users"].path == "/fr/admin/users"
    assert by_name["fr.admin.users"].middlewares == [DetectRequestLocaleMiddleware, AuditMiddleware]
    assert by_name["admin.health"].path == "/admin/health"
    assert "admin.health" in app.view_functions


def test_register_without_app_adds_no_rules(app):
    Route.multilingual("test", show).register()

    assert "en.test" not in app.view_functions
