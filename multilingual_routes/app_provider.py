from typing import Optional

from multilingual_routes.application import Application
from multilingual_routes.config import MultilingualConfig
from multilingual_routes.core import localization
from multilingual_routes.utils.env_utils import configure_env
from multilingual_routes.utils.logging import setup_logging


def boot(*,
    supported_locales: Optional[list[str]] = None,
    default_locale: Optional[str] = None,
    prefix_default: Optional[bool] = None,
    prefix_default_home: Optional[bool] = None,
    name_prefix_before_locale: Optional[bool] = None,
    locale_path: Optional[str] = None,
    env_file_name: Optional[str] = None,
    log_file_name: Optional[str] = None,
) -> MultilingualConfig:
    """
    Sets up the application.
    - Loads environment variables (.env.<ENV> or .env)
    - Sets up logging
    - Builds the locale configuration from the environment; keyword arguments win
      (an explicit default locale also becomes the translation default)
    - Points the translation catalog at `locale_path` when given

    Must run before routes are registered. Calling it again is a no-op.
    """
    app = Application()
    if app.is_booted():
        return app.get_config()

    app.set_boot_args(
        supported_locales=supported_locales,
        default_locale=default_locale,
        locale_path=locale_path,
        env_file_name=env_file_name,
    )

    configure_env(env_file_name)
    setup_logging(log_file_name)

    config = app.configure(
        supported_locales=supported_locales,
        default_locale=default_locale,
        prefix_default=prefix_default,
        prefix_default_home=prefix_default_home,
        name_prefix_before_locale=name_prefix_before_locale,
    )

    if locale_path is not None:
        localization.set_locale_path(locale_path)

    return config
