"""
Translation catalog and active locale for multilingual routes.

Catalogs are JSON files named after their locale (``lang/en.json``,
``lang/fr.json``) holding nested or flat dot-notation keys. Route URI text
lives under the ``routes`` namespace:

    {"routes": {"search": "recherche/<filter?>"}}

The active locale is kept in a ``ContextVar`` so every request task sees its
own value.

Usage:
    from multilingual_routes.core.localization import __, set_locale, get_locale

    __('messages.welcome')                          # Basic translation
    __('messages.greeting', {'name': 'John'})       # With parameters
    translation('routes.search', 'fr')              # Exact lookup, None if missing
    token = set_locale('fr'); ...; reset_locale(token)
"""

import json
from contextvars import ContextVar, Token
from pathlib import Path
from typing import Dict, Any, Optional
import os

_translations: Dict[str, Dict[str, Any]] = {}
_lines: Dict[str, Dict[str, Any]] = {}
_LOCALE_DEFAULT = os.getenv('LOCALE_DEFAULT', 'en')
_LOCALE_FALLBACK = os.getenv('LOCALE_FALLBACK', 'en')
_LOCALE_PATH = os.getenv('LOCALE_PATH', os.path.join(os.getcwd(), 'lang'))
_current_locale: ContextVar[Optional[str]] = ContextVar('locale', default=None)


def _get_nested(data: Dict[str, Any], key: str) -> Optional[Any]:
    """Flat key first, then nested dict with dot notation."""
    if key in data:
        return data[key]
    current = data
    for part in key.split('.'):
        if isinstance(current, dict) and part in current:
            current = current[part]
        else:
            return None
    return current


def _load_locale(locale: str) -> Dict[str, Any]:
    """Load and cache translations for a locale. Idempotent."""
    if locale in _translations:
        return _translations[locale]

    locale_file = Path(_LOCALE_PATH) / f"{locale}.json"
    translations = {}

    if locale_file.exists():
        try:
            with locale_file.open(encoding='utf-8') as f:
                translations = json.load(f)
        except (json.JSONDecodeError, OSError):
            # A broken catalog behaves like a missing one
            pass

    _translations[locale] = translations
    return translations


def translation(key: str, locale: str) -> Optional[str]:
    """
    Look up ``key`` for exactly ``locale``.

    Lines added with :func:`add_lines` shadow the JSON catalog. No fallback
    locale is consulted and non-string values count as missing, so callers
    can apply their own fallback.
    """
    value = _get_nested(_lines.get(locale, {}), key)
    if value is None:
        value = _get_nested(_load_locale(locale), key)
    return value if isinstance(value, str) else None


def __(key: str, parameters: Optional[Dict[str, Any]] = None,
      default: Optional[str] = None, locale: Optional[str] = None) -> str:
    """
    Translate a key for the active (or given) locale.

    Falls back to the fallback locale, then to ``default``, then to the key.

    Examples:
        __('messages.welcome')
        __('greet', {'name': 'John'})
        __('missing', default='Not found')
        __('title', locale='fr')
    """
    current_locale = locale or get_locale()

    result = translation(key, current_locale)

    if result is None and current_locale != _LOCALE_FALLBACK:
        result = translation(key, _LOCALE_FALLBACK)

    if result is None:
        result = default or key

    if parameters:
        try:
            result = result.format(**parameters)
        except (KeyError, ValueError):
            pass  # Unformatted text beats a failed render

    return str(result)


def add_lines(lines: Dict[str, Any], locale: str) -> None:
    """Register in-memory translation lines (flat dot keys or nested dicts) for a locale."""
    _lines.setdefault(locale, {}).update(lines)


def set_locale(locale: str) -> Token:
    """Set the active locale for the current context. Returns a token for :func:`reset_locale`."""
    return _current_locale.set(locale)


def reset_locale(token: Token) -> None:
    """Restore the active locale that was current before ``set_locale``."""
    _current_locale.reset(token)


def get_locale() -> str:
    """Active locale, or the default locale when none has been set."""
    return _current_locale.get() or _LOCALE_DEFAULT


def has_active_locale() -> bool:
    return _current_locale.get() is not None


def set_default_locale(locale: str) -> None:
    global _LOCALE_DEFAULT
    _LOCALE_DEFAULT = locale


def get_default_locale() -> str:
    return _LOCALE_DEFAULT


def clear_cache() -> None:
    """Forget loaded catalogs and in-memory lines."""
    _translations.clear()
    _lines.clear()


def set_locale_path(path: str) -> None:
    global _LOCALE_PATH
    _LOCALE_PATH = path
    _translations.clear()


trans = __
