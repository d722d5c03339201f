import json

import pytest

from multilingual_routes.core import localization
from multilingual_routes.core.localization import __, translation, add_lines, set_locale, reset_locale, get_locale


@pytest.fixture
def lang_dir(tmp_path):
    lang_dir = tmp_path / "lang"
    lang_dir.mkdir()
    localization.set_locale_path(str(lang_dir))
    return lang_dir


def test_localization(lang_dir):
    (lang_dir / "en.json").write_text(json.dumps({"greeting": "Hello {name}"}))

    assert __("greeting", {"name": "Bob"}) == "Hello Bob"
    token = set_locale("fr")
    assert __("greeting", {"name": "Ana"}) == "Hello Ana"
    assert __("missing", default="fallback") == "fallback"
    assert __("missing") == "missing"
    reset_locale(token)


def test_route_catalogs_support_nested_and_flat_keys(lang_dir):
    (lang_dir / "fr.json").write_text(json.dumps({"routes": {"search": "recherche"}, "routes.about": "a-propos"}))

    assert translation("routes.search", "fr") == "recherche"
    assert translation("routes.about", "fr") == "a-propos"


def test_translation_only_reads_the_requested_locale(lang_dir):
    (lang_dir / "en.json").write_text(json.dumps({"routes": {"search": "search"}}))

    assert translation("routes.search", "en") == "search"
    assert translation("routes.search", "fr") is None
    assert translation("routes.missing", "en") is None


def test_non_string_values_count_as_missing(lang_dir):
    (lang_dir / "en.json").write_text(json.dumps({"routes": {"search": {"nested": "x"}, "count": 3}}))

    assert translation("routes.search", "en") is None
    assert translation("routes.count", "en") is None


def test_in_memory_lines_shadow_the_catalog(lang_dir):
    (lang_dir / "fr.json").write_text(json.dumps({"routes": {"test": "essai"}}))
    assert translation("routes.test", "fr") == "essai"

    add_lines({"routes.test": "teste"}, "fr")
    assert translation("routes.test", "fr") == "teste"

    add_lines({"routes": {"about": "a-propos"}}, "fr")
    assert translation("routes.about", "fr") == "a-propos"


def test_a_broken_catalog_behaves_like_a_missing_one(lang_dir):
    (lang_dir / "fr.json").write_text("{not json")

    assert translation("routes.test", "fr") is None


def test_the_active_locale_is_restored_by_its_token():
    assert get_locale() == "en"
    assert not localization.has_active_locale()

    token = set_locale("fr")
    assert get_locale() == "fr"
    assert localization.has_active_locale()

    reset_locale(token)
    assert get_locale() == "en"


def test_clear_cache_forgets_lines():
    add_lines({"routes.test": "teste"}, "fr")
    localization.clear_cache()

    assert translation("routes.test", "fr") is None
