from typing import Any, Dict, Optional

from multilingual_routes.config import MultilingualConfig
from multilingual_routes.decorators.singleton_decorator import singleton


@singleton
class Application:
    """
    Singleton application container holding the multilingual configuration.
    Every registration and resolution reads its locale settings from here
    unless a context is passed explicitly.
    """

    def __init__(self):
        self._config: Optional[MultilingualConfig] = None
        self._boot_args: Dict[str, Any] = {}

    def configure(self, config: Optional[MultilingualConfig] = None, **values: Any) -> MultilingualConfig:
        """
        Install the configuration.

        Args:
            config: A ready configuration. When omitted, one is built from
                the environment with ``values`` as overrides.
        """
        return self._install(config if config is not None else MultilingualConfig.from_env(**values))

    def get_config(self) -> MultilingualConfig:
        """Current configuration, loaded from the environment on first use."""
        if self._config is None:
            return self._install(MultilingualConfig.from_env())
        return self._config

    def _install(self, config: MultilingualConfig) -> MultilingualConfig:
        # Keep the translation layer default in step with an explicit default locale
        if config.default_locale:
            from multilingual_routes.core.localization import set_default_locale
            set_default_locale(config.default_locale)
        self._config = config
        return config

    def reset(self) -> None:
        """Reset the application state (useful for testing)."""
        self._config = None
        self._boot_args.clear()

    def set_boot_args(self, **kwargs) -> None:
        self._boot_args = kwargs

    def get_boot_args(self) -> Dict[str, Any]:
        return self._boot_args

    def is_booted(self) -> bool:
        return len(self._boot_args.keys()) > 0
