# -*- coding: utf-8 -*-
"""
Localize - Core Module

Módulo principal contendo o seletor de idioma e seus colaboradores.
Para evitar importações pesadas e possíveis ciclos, este pacote usa
carregamento preguiçoso (lazy) dos símbolos reexportados.

License: GPL-3.0
"""
from __future__ import annotations

from importlib import import_module
from typing import TYPE_CHECKING

__license__ = "GPL-3.0"

# Símbolos públicos reexportados
__all__ = [
    "ConfigManager",
    "LogManager",
    "setup_logging",
    "StaticCatalog",
    "DirectoryCatalog",
    "BASE_LOCALIZATION",
    "PreferencesStore",
    "MemoryPreferencesStore",
    "SystemLocaleNegotiator",
    "StaticLocaleNegotiator",
    "CatalogDisplayNames",
    "LanguageSelector",
    "Subscription",
    "CURRENT_LANGUAGE_KEY",
    "DEFAULT_LANGUAGE",
    "LANGUAGE_CHANGE_NOTIFICATION",
    "Localizer",
    "create_selector",
    "init_localization",
]

# Mapa de símbolos -> submódulos para lazy import
_NAME_TO_MODULE = {
    # config/logger
    "ConfigManager": "config",
    "LogManager": "logger",
    "setup_logging": "logger",
    # colaboradores
    "StaticCatalog": "catalog",
    "DirectoryCatalog": "catalog",
    "BASE_LOCALIZATION": "catalog",
    "PreferencesStore": "preferences",
    "MemoryPreferencesStore": "preferences",
    "SystemLocaleNegotiator": "negotiation",
    "StaticLocaleNegotiator": "negotiation",
    "CatalogDisplayNames": "display_names",
    # seletor
    "LanguageSelector": "selector",
    "Subscription": "selector",
    "CURRENT_LANGUAGE_KEY": "selector",
    "DEFAULT_LANGUAGE": "selector",
    "LANGUAGE_CHANGE_NOTIFICATION": "selector",
    # textos
    "Localizer": "strings",
    # inicialização
    "create_selector": "bootstrap",
    "init_localization": "bootstrap",
}

if TYPE_CHECKING:
    from .config import ConfigManager  # noqa: F401
    from .logger import LogManager, setup_logging  # noqa: F401
    from .catalog import StaticCatalog, DirectoryCatalog, BASE_LOCALIZATION  # noqa: F401
    from .preferences import PreferencesStore, MemoryPreferencesStore  # noqa: F401
    from .negotiation import SystemLocaleNegotiator, StaticLocaleNegotiator  # noqa: F401
    from .display_names import CatalogDisplayNames  # noqa: F401
    from .selector import (  # noqa: F401
        LanguageSelector,
        Subscription,
        CURRENT_LANGUAGE_KEY,
        DEFAULT_LANGUAGE,
        LANGUAGE_CHANGE_NOTIFICATION,
    )
    from .strings import Localizer  # noqa: F401
    from .bootstrap import create_selector, init_localization  # noqa: F401


def __getattr__(name: str):
    """Carrega o símbolo solicitado sob demanda a partir do submódulo correto."""
    module_name = _NAME_TO_MODULE.get(name)
    if module_name is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    module = import_module(f"{__name__}.{module_name}")
    return getattr(module, name)


def __dir__():
    return sorted(list(globals().keys()) + __all__)
