from __future__ import annotations

import pytest

from multilingual_routes import Route, current_route, localized_route, register_routes
from multilingual_routes.exceptions import NoCurrentRouteError


async def in_french(**kwargs):
    return current_route("fr")


@pytest.mark.asyncio
async def test_the_current_route_can_be_retrieved_in_a_different_locale(app, test_translations):
    Route.multilingual("test", in_french).register(app)

    response = await app.test_client().get("/test")

    assert await response.get_data(as_text=True) == localized_route("test", {}, "fr", app=app)


@pytest.mark.asyncio
async def test_the_current_route_can_be_retrieved_in_a_different_locale_with_query_strings(app, test_translations, sample_value):
    Route.multilingual("test", in_french).register(app)

    response = await app.test_client().get("/test", query_string={"foo": sample_value})

    assert await response.get_data(as_text=True) == localized_route("test", {"foo": sample_value}, "fr", app=app)


@pytest.mark.asyncio
async def test_route_parameters_are_carried_to_the_other_locale(app):
    async def in_english(**kwargs):
        return current_route("en")

    Route.multilingual("post/<slug>", in_english).name("post").register(app)

    response = await app.test_client().get("/fr/post/bonjour", query_string={"slug": "ignored", "page": "2"})

    assert await response.get_data(as_text=True) == "http://localhost/post/bonjour?page=2"


@pytest.mark.asyncio
async def test_the_current_route_switch_respects_name_prefix_before_locale(app, configure):
    configure(name_prefix_before_locale=True)

    register_routes(app, [
        Route.group("/admin", name="admin.", routes=[
            Route.multilingual("users", in_french),
        ]),
    ])

    response = await app.test_client().get("/admin/users")

    assert await response.get_data(as_text=True) == "http://localhost/fr/admin/users"


@pytest.mark.asyncio
async def test_it_requires_a_matched_route(app):
    async with app.app_context():
        with pytest.raises(NoCurrentRouteError):
            current_route("fr")


@pytest.mark.asyncio
async def test_repeated_query_arguments_are_carried_to_the_other_locale(app, test_translations):
    Route.multilingual("test", in_french).register(app)

    response = await app.test_client().get("/test?tag=a&tag=b&page=2")

    assert await response.get_data(as_text=True) == "http://localhost/fr/teste?tag=a&tag=b&page=2"
