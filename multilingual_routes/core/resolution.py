"""
Name and URI rules shared by registration and resolution.

Every function here is pure: given the same registration fields, locale,
configuration and catalog state it returns the same result, which is what
lets the resolver recompute a registered name without asking the router.
"""

from typing import Iterable, Mapping, Optional

from multilingual_routes.config import MultilingualConfig
from multilingual_routes.core.localization import translation

HOME_KEY = "/"


def normalize_key(key: str) -> str:
    """Trim leading slashes; the bare root stays ``/``."""
    return key.strip().lstrip("/") or HOME_KEY


def is_home(key: str) -> bool:
    return normalize_key(key) == HOME_KEY


def base_name(key: str, locale: str, group_name: Optional[str] = None,
              locale_names: Optional[Mapping[str, str]] = None) -> str:
    """Locale override, then group name, then key."""
    if locale_names and locale in locale_names:
        return locale_names[locale]
    return group_name or key


def route_name(base: str, locale: str, config: MultilingualConfig, name_prefix: str = "") -> str:
    """
    Compose the concrete route name.

    ``en.admin.users`` by default; ``admin.en.users`` when the config puts
    name prefixes before the locale.
    """
    if config.name_prefix_before_locale:
        return f"{name_prefix}{locale}.{base}"
    return f"{locale}.{name_prefix}{base}"


def uri_segment(key: str, locale: str) -> str:
    """Translated ``routes.<key>`` for the locale, else the key itself."""
    key = normalize_key(key)
    translated = translation(f"routes.{key}", locale)
    segment = translated if translated is not None else key
    return segment.lstrip("/")


def locale_prefix(key: str, locale: str, config: MultilingualConfig) -> Optional[str]:
    if locale != config.default:
        return locale
    if not config.prefix_default:
        return None
    if is_home(key) and not config.prefix_default_home:
        return None
    return locale


def join_path(*parts: Optional[str]) -> str:
    segments = [segment for part in parts if part for segment in part.split("/") if segment]
    return "/" + "/".join(segments)


def route_path(key: str, locale: str, config: MultilingualConfig, path_prefix: str = "") -> str:
    """Locale prefix outermost, then the group path prefix, then the URI segment."""
    return join_path(locale_prefix(key, locale, config), path_prefix, uri_segment(key, locale))


def eligible_locales(config: MultilingualConfig,
                     include: Optional[Iterable[str]] = None,
                     exclude: Optional[Iterable[str]] = None) -> list[str]:
    """Supported locales in configured order, filtered by ``include`` (wins) or ``exclude``."""
    if include is not None:
        allowed = set(include)
        return [locale for locale in config.supported_locales if locale in allowed]
    denied = set(exclude or ())
    return [locale for locale in config.supported_locales if locale not in denied]


def is_qualified(name: str, config: MultilingualConfig) -> bool:
    """Whether ``name`` already carries a supported locale component."""
    parts = name.split(".")
    if len(parts) < 2:
        return False
    if parts[0] in config.supported_locales:
        return True
    return config.name_prefix_before_locale and any(part in config.supported_locales for part in parts[1:-1])


def candidate_names(name: str, locale: str, config: MultilingualConfig) -> list[str]:
    """
    Concrete names that ``name`` may have been registered under for ``locale``.

    Without ``name_prefix_before_locale`` there is exactly one. With it, the
    name prefix is unknown here, so the locale is tried at every dot boundary,
    longest prefix first.
    """
    if is_qualified(name, config):
        return [name]
    if not config.name_prefix_before_locale:
        return [route_name(name, locale, config)]

    parts = name.split(".")
    candidates = []
    for index in range(len(parts) - 1, -1, -1):
        prefix = "".join(f"{part}." for part in parts[:index])
        candidates.append(route_name(".".join(parts[index:]), locale, config, prefix))
    return candidates


def strip_locale(name: str, config: MultilingualConfig) -> str:
    """Remove the locale component from a concrete route name."""
    parts = name.split(".")
    if len(parts) < 2:
        return name
    if parts[0] in config.supported_locales:
        return ".".join(parts[1:])
    if config.name_prefix_before_locale:
        for index, part in enumerate(parts[:-1]):
            if part in config.supported_locales:
                return ".".join(parts[:index] + parts[index + 1:])
    return name
