"""
Pytest configuration and shared fixtures for multilingual-routes tests.
"""

import pytest
from faker import Faker
from quart import Quart

from multilingual_routes.application import Application
from multilingual_routes.config import MultilingualConfig
from multilingual_routes.core import localization

fake = Faker()

_ENV_VARS = (
    "LOCALES_SUPPORTED",
    "LOCALE_DEFAULT",
    "MULTILINGUAL_PREFIX_DEFAULT",
    "MULTILINGUAL_PREFIX_DEFAULT_HOME",
    "MULTILINGUAL_NAME_PREFIX_BEFORE_LOCALE",
)


@pytest.fixture(autouse=True)
def multilingual_state(tmp_path, monkeypatch):
    """Every test starts with `en`/`fr` supported, `en` default and an empty catalog."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)

    previous_default = localization.get_default_locale()
    localization.set_default_locale("en")
    localization.set_locale_path(str(tmp_path / "lang"))
    localization.clear_cache()

    Application().reset()
    Application().configure(MultilingualConfig(supported_locales=["en", "fr"]))

    yield

    Application().reset()
    localization.clear_cache()
    localization.set_default_locale(previous_default)


@pytest.fixture
def configure():
    """Replace the locale configuration; `en`/`fr` unless given."""
    def _configure(**values) -> MultilingualConfig:
        values.setdefault("supported_locales", ["en", "fr"])
        return Application().configure(MultilingualConfig(**values))

    return _configure


@pytest.fixture
def test_translations():
    localization.add_lines({"routes.test": "test"}, "en")
    localization.add_lines({"routes.test": "teste"}, "fr")


@pytest.fixture
def app(tmp_path):
    return Quart(__name__, root_path=str(tmp_path))


@pytest.fixture
def sample_value():
    """A random query string value."""
    return fake.word()


# Configure pytest-asyncio
pytest_plugins = ['pytest_asyncio']
