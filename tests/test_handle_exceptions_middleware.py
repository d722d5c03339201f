import pytest

from multilingual_routes import Route, register_routes, localized_route
from multilingual_routes.exceptions import NotFoundException


@pytest.mark.asyncio
async def test_http_exceptions_become_json_responses(app, monkeypatch):
    monkeypatch.delenv("ENV", raising=False)

    async def missing():
        raise NotFoundException(message="Nothing here")

    register_routes(app, [Route.get("/missing", missing)])

    response = await app.test_client().get("/missing")

    assert response.status_code == 404
    assert await response.get_json() == {"error_type": "not_found", "message": "Nothing here", "data": None}


@pytest.mark.asyncio
async def test_unresolved_routes_become_server_errors(app, monkeypatch):
    monkeypatch.delenv("ENV", raising=False)

    async def broken(**kwargs):
        return localized_route("nowhere", {}, "fr")

    Route.multilingual("broken", broken).register(app)

    response = await app.test_client().get("/fr/broken")

    assert response.status_code == 500
    body = await response.get_json()
    assert body["error_type"] == "unresolved_route"
    assert body["data"] == {"name": "nowhere", "locale": "fr"}


@pytest.mark.asyncio
async def test_unexpected_errors_are_hidden(app, monkeypatch):
    monkeypatch.delenv("ENV", raising=False)

    async def crash():
        raise RuntimeError("boom")

    register_routes(app, [Route.get("/crash", crash)])

    response = await app.test_client().get("/crash")

    assert response.status_code == 500
    assert (await response.get_json())["error_type"] == "server_error"
