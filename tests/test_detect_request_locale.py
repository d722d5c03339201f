from __future__ import annotations

import pytest

from multilingual_routes import Route, register_routes
from multilingual_routes.core.localization import get_locale
from multilingual_routes.core.middlewares import DetectRequestLocaleMiddleware
from multilingual_routes.decorators import middleware


async def active_locale(**kwargs):
    return get_locale()


@pytest.mark.asyncio
async def test_the_request_locale_can_be_changed_by_the_middleware(app):
    seen = []

    async def next_handler():
        seen.append(get_locale())
        return "ok"

    async with app.test_request_context("/fr/teste"):
        assert await DetectRequestLocaleMiddleware().handle(next_handler) == "ok"
        assert get_locale() == "en"

    assert seen == ["fr"]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("/fr/page", "fr"),
        ("/en/page", "en"),
        ("/page", "en"),
        ("/de/page", "en"),
        ("/", "en"),
    ],
)
async def test_first_path_segment_selects_the_locale(app, path, expected):
    register_routes(app, [
        Route.get("/", active_locale, [DetectRequestLocaleMiddleware]),
        Route.get("/<a>/<b>", active_locale, [DetectRequestLocaleMiddleware]),
        Route.get("/<a>", active_locale, [DetectRequestLocaleMiddleware]),
    ])

    response = await app.test_client().get(path)

    assert response.status_code == 200
    assert await response.get_data(as_text=True) == expected


@pytest.mark.asyncio
async def test_multilingual_routes_detect_their_locale(app, test_translations):
    Route.multilingual("test", active_locale).register(app)
    client = app.test_client()

    assert await (await client.get("/fr/teste")).get_data(as_text=True) == "fr"
    assert await (await client.get("/test")).get_data(as_text=True) == "en"


@pytest.mark.asyncio
async def test_middleware_decorator_applies_detection(app):
    @middleware(DetectRequestLocaleMiddleware)
    async def decorated(**kwargs):
        return get_locale()

    app.add_url_rule("/<locale>/decorated", view_func=decorated)

    response = await app.test_client().get("/fr/decorated")
    assert await response.get_data(as_text=True) == "fr"
