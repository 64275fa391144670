# -*- coding: utf-8 -*-
"""
Localize - Package

Seleção de idioma persistida e busca de textos traduzidos sobre arquivos
de locale YAML.

License: GPL-3.0
"""

from .utils.version import __version__, __license__
from .core.selector import (
    LanguageSelector,
    Subscription,
    CURRENT_LANGUAGE_KEY,
    DEFAULT_LANGUAGE,
    LANGUAGE_CHANGE_NOTIFICATION,
)
from .core.catalog import BASE_LOCALIZATION
from .core.bootstrap import create_selector, init_localization
from .core.strings import (
    Localizer,
    get_localizer,
    localized,
    localized_format,
    localized_plural,
)

__all__ = [
    "__version__",
    "LanguageSelector",
    "Subscription",
    "CURRENT_LANGUAGE_KEY",
    "DEFAULT_LANGUAGE",
    "LANGUAGE_CHANGE_NOTIFICATION",
    "BASE_LOCALIZATION",
    "create_selector",
    "init_localization",
    "Localizer",
    "get_localizer",
    "localized",
    "localized_format",
    "localized_plural",
]
