"""
multilingual-routes - One route definition, one concrete route per locale

This package provides:
- A chainable builder expanding a route into locale specific routes
  (locale specific URI text and route names)
- URL generation by route key and locale
- Switching the current request's route to another locale
- Locale detection from the request path
- Translation catalogs for route URIs

Routes are registered with Quart and resolved through its URL map.
"""

__version__ = "0.1.0"
__author__ = "Patrik Mojzis"
__email__ = "patrikm53@gmail.com"
__license__ = "MIT"
__url__ = "https://github.com/patrikmojzis/multilingual-routes"

# Contracts first: the builder pulls in the core modules it depends on
from .contracts import *  # noqa: F401,F403
from .core import *  # noqa: F401,F403
from .core.localization import __, set_locale, get_locale, trans
from .config import MultilingualConfig
from .application import Application
from .decorators import *  # noqa: F401,F403
from .exceptions import *  # noqa: F401,F403
from .utils.routing_utils import register_routes
