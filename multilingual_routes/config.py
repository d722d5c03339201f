import os
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from multilingual_routes.exceptions.common_exceptions import EnvInvalidException
from multilingual_routes.utils.serialisation import parse_bool

# Comma separated list of supported locale codes, in precedence order
LOCALES_SUPPORTED = "LOCALES_SUPPORTED"

# Default locale (must be one of the supported locales)
LOCALE_DEFAULT = "LOCALE_DEFAULT"

# Prefix the default locale's URIs with its code as well
MULTILINGUAL_PREFIX_DEFAULT = "MULTILINGUAL_PREFIX_DEFAULT"

# Prefix the default locale's home page when MULTILINGUAL_PREFIX_DEFAULT is on
MULTILINGUAL_PREFIX_DEFAULT_HOME = "MULTILINGUAL_PREFIX_DEFAULT_HOME"

# Place group name prefixes before the locale code (`admin.en.users`)
MULTILINGUAL_NAME_PREFIX_BEFORE_LOCALE = "MULTILINGUAL_NAME_PREFIX_BEFORE_LOCALE"


def _env_bool(env_name: str, default: bool) -> bool:
    raw = os.getenv(env_name)
    if raw is None:
        return default
    value = parse_bool(raw)
    if value is None:
        raise EnvInvalidException(env_name, raw, ["true", "false", "1", "0", "yes", "no", "on", "off"])
    return value


class MultilingualConfig(BaseModel):
    supported_locales: list[str] = Field(default_factory=list, description="Supported locale codes, in order")
    default_locale: Optional[str] = Field(default=None, description="Default locale; application default if unset")
    prefix_default: bool = Field(default=False, description="Include the default locale's code in its URIs")
    prefix_default_home: bool = Field(default=True, description="Prefix the default locale's home route when prefix_default is on")
    name_prefix_before_locale: bool = Field(default=False, description="Put group name prefixes before the locale code")

    model_config = ConfigDict(frozen=True)

    @field_validator("supported_locales", mode="before")
    @classmethod
    def _split_locales(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.split(",")
        if value is None:
            return []
        seen: list[str] = []
        for locale in value:
            locale = str(locale).strip()
            if locale and locale not in seen:
                seen.append(locale)
        return seen

    @model_validator(mode="after")
    def _check_default_locale(self) -> "MultilingualConfig":
        if self.default_locale and self.supported_locales and self.default_locale not in self.supported_locales:
            raise ValueError(
                f"Default locale `{self.default_locale}` is not one of the supported locales: {', '.join(self.supported_locales)}"
            )
        return self

    @property
    def default(self) -> str:
        """The configured default locale, or the application default when unset."""
        if self.default_locale:
            return self.default_locale

        from multilingual_routes.core.localization import get_default_locale
        return get_default_locale()

    @classmethod
    def from_env(cls, **overrides: Any) -> "MultilingualConfig":
        """Build the configuration from environment variables; keyword arguments win."""
        values: dict[str, Any] = {
            "supported_locales": os.getenv(LOCALES_SUPPORTED, ""),
            "default_locale": os.getenv(LOCALE_DEFAULT) or None,
            "prefix_default": _env_bool(MULTILINGUAL_PREFIX_DEFAULT, False),
            "prefix_default_home": _env_bool(MULTILINGUAL_PREFIX_DEFAULT_HOME, True),
            "name_prefix_before_locale": _env_bool(MULTILINGUAL_NAME_PREFIX_BEFORE_LOCALE, False),
        }
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)
