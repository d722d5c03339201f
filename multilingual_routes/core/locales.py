"""Supported-locale set accessors and request locale detection."""

from typing import Optional

from multilingual_routes.application import Application
from multilingual_routes.config import MultilingualConfig


def _config(config: Optional[MultilingualConfig]) -> MultilingualConfig:
    return config if config is not None else Application().get_config()


def supported_locales(config: Optional[MultilingualConfig] = None) -> list[str]:
    return list(_config(config).supported_locales)


def default_locale(config: Optional[MultilingualConfig] = None) -> str:
    return _config(config).default


def is_supported(locale: Optional[str], config: Optional[MultilingualConfig] = None) -> bool:
    return bool(locale) and locale in _config(config).supported_locales


def detect_locale(path: str, config: Optional[MultilingualConfig] = None) -> Optional[str]:
    """Return the first path segment when it names a supported locale, else ``None``."""
    segment = path.lstrip("/").split("/", 1)[0]
    return segment if is_supported(segment, config) else None
