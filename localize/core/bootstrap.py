# -*- coding: utf-8 -*-
"""
Localize - Bootstrap

Monta o seletor de idioma e o localizador a partir das configurações.
Chamado uma vez na inicialização da aplicação; as instâncias criadas são
repassadas a quem precisar delas.

License: GPL-3.0
"""

from typing import Optional
from loguru import logger

from .config import ConfigManager
from .catalog import DirectoryCatalog
from .preferences import PreferencesStore
from .negotiation import SystemLocaleNegotiator
from .display_names import CatalogDisplayNames
from .selector import LanguageSelector
from .strings import Localizer, install


def create_selector(config: Optional[ConfigManager] = None,
                    negotiator=None) -> LanguageSelector:
    """Cria um LanguageSelector com os colaboradores padrão.

    Args:
        config: Configurações (padrão: ConfigManager())
        negotiator: Negociador de idiomas (padrão: SystemLocaleNegotiator)

    Returns:
        Seletor pronto para uso
    """
    config = config or ConfigManager()

    catalog = DirectoryCatalog(config.locales_dir)
    selector = LanguageSelector(
        catalog=catalog,
        store=PreferencesStore(config.preferences_path),
        negotiator=negotiator or SystemLocaleNegotiator(),
        display_names=CatalogDisplayNames(catalog),
        fallback_language=config.get('localization', 'fallback_language', 'en')
    )

    # Idioma forçado pela configuração
    language = config.get('localization', 'language', 'auto')
    if language != 'auto':
        selector.set_current_language(language)

    logger.debug(
        f"LanguageSelector inicializado: locales={catalog.locales_dir}, "
        f"idioma atual = {selector.current_language}"
    )
    return selector


def init_localization(config: Optional[ConfigManager] = None,
                      negotiator=None) -> Localizer:
    """Cria seletor e localizador e instala o localizador como padrão.

    Returns:
        Localizador instalado (o seletor fica em localizer.selector)
    """
    localizer = Localizer(create_selector(config, negotiator))
    install(localizer)
    return localizer
