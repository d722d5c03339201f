"""Core utilities re-exported for convenient access."""

from .localization import (
    __,
    trans,
    translation,
    add_lines,
    set_locale,
    reset_locale,
    get_locale,
    set_default_locale,
    get_default_locale,
    set_locale_path,
    clear_cache,
)
from .locales import supported_locales, default_locale, is_supported, detect_locale
from .middlewares import *  # noqa: F401,F403
from .router import QuartRouter, RegexConverter, MatchedRoute
from .resolver import localized_route, current_route, resolve_locale
