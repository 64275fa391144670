# -*- coding: utf-8 -*-
"""
Localize - String Lookup

Busca de textos traduzidos no idioma atual, com formatação e pluralização.

Ordem de resolução: idioma atual -> Base -> chave literal.

License: GPL-3.0
"""

from typing import Any, Dict, Optional
from loguru import logger

from .catalog import BASE_LOCALIZATION, get_nested_value


class Localizer:
    """Busca de textos sobre um LanguageSelector e seu catálogo."""

    def __init__(self, selector, catalog=None):
        """Inicializa o localizador.

        Args:
            selector: Seletor de idioma
            catalog: Catálogo de recursos (padrão: o catálogo do seletor)
        """
        self.selector = selector
        self.catalog = catalog if catalog is not None else selector.catalog
        self._tables: Dict[str, Dict[str, Any]] = {}
        # Tabelas carregadas ficam inválidas quando o idioma muda
        self._subscription = selector.subscribe(self.reload)

    def _table(self, language: str) -> Dict[str, Any]:
        if language not in self._tables:
            self._tables[language] = self.catalog.load_table(language)
        return self._tables[language]

    def _lookup(self, key: str) -> Optional[str]:
        for language in (self.selector.current_language, BASE_LOCALIZATION):
            value = get_nested_value(self._table(language), key)
            if isinstance(value, str):
                return value
        return None

    def reload(self):
        """Descarta as tabelas carregadas; a próxima busca relê o catálogo."""
        self._tables.clear()
        logger.debug("Tabelas de tradução descartadas")

    def close(self):
        """Cancela a inscrição no seletor."""
        self._subscription.cancel()

    def localized(self, key: str) -> str:
        """Traduz uma chave.

        Args:
            key: Chave de tradução (caminho pontuado)

        Returns:
            Texto traduzido ou a própria chave
        """
        translation = self._lookup(key)
        if translation is None:
            logger.debug(f"Tradução não encontrada: {key}")
            return key
        return translation

    def localized_format(self, key: str, *args, **kwargs) -> str:
        """Traduz uma chave e aplica str.format com os argumentos.

        Returns:
            Texto formatado, ou sem formatação se os argumentos não casarem
        """
        translation = self.localized(key)
        if not args and not kwargs:
            return translation

        try:
            return translation.format(*args, **kwargs)
        except (KeyError, IndexError, ValueError, AttributeError, TypeError) as e:
            logger.warning(f"Erro na interpolação da tradução '{key}': {e}")
            return translation

    def localized_plural(self, key: str, count: int, **kwargs) -> str:
        """Traduz com suporte a pluralização.

        Usa '<key>.one' quando count == 1 e '<key>.other' nos demais casos;
        sem forma plural, cai para a própria chave. 'count' fica disponível
        para interpolação.

        Args:
            key: Chave de tradução
            count: Número que determina a forma
            **kwargs: Variáveis para interpolação

        Returns:
            Texto traduzido com pluralização
        """
        kwargs['count'] = count
        plural_key = f"{key}.one" if count == 1 else f"{key}.other"

        translation = self._lookup(plural_key)
        if translation is None:
            return self.localized_format(key, **kwargs)

        try:
            return translation.format(**kwargs)
        except (KeyError, IndexError, ValueError, AttributeError, TypeError) as e:
            logger.warning(f"Erro na interpolação da tradução plural '{plural_key}': {e}")
            return translation


# Localizador padrão usado pelas funções de conveniência
_localizer: Optional[Localizer] = None


def install(localizer: Optional[Localizer]) -> Optional[Localizer]:
    """Define o localizador padrão. Retorna o anterior."""
    global _localizer
    previous, _localizer = _localizer, localizer
    return previous


def get_localizer() -> Optional[Localizer]:
    return _localizer


def localized(key: str) -> str:
    """Função de conveniência para tradução."""
    if _localizer is None:
        logger.warning("Sistema de i18n não inicializado")
        return key
    return _localizer.localized(key)


def localized_format(key: str, *args, **kwargs) -> str:
    """Função de conveniência para tradução com formatação."""
    if _localizer is None:
        logger.warning("Sistema de i18n não inicializado")
        return key
    return _localizer.localized_format(key, *args, **kwargs)


def localized_plural(key: str, count: int, **kwargs) -> str:
    """Função de conveniência para tradução com pluralização."""
    if _localizer is None:
        logger.warning("Sistema de i18n não inicializado")
        return key
    return _localizer.localized_plural(key, count, **kwargs)
