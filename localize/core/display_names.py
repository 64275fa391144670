# -*- coding: utf-8 -*-
"""
Localize - Display Names

Nomes legíveis de idiomas, obtidos das tabelas 'languages' e 'regions' dos
próprios arquivos de tradução. Ex. (fr.yaml):

    languages:
      en: anglais
      pt: portugais
    regions:
      BR: Brésil

License: GPL-3.0
"""

from typing import Any, Dict, Optional
from loguru import logger

from ..utils.helpers import primary_subtag, region_subtag


class CatalogDisplayNames:
    """Serviço de nomes de idiomas baseado no catálogo de recursos."""

    def __init__(self, catalog):
        self.catalog = catalog

    def _context_tables(self, context: str):
        """Tabelas a consultar para o contexto: a tag completa e o idioma primário."""
        yield self.catalog.load_table(context)
        primary = primary_subtag(context)
        if primary != context:
            yield self.catalog.load_table(primary)

    @staticmethod
    def _lookup(table: Dict[str, Any], section: str, key: str) -> Optional[str]:
        entries = table.get(section)
        if not isinstance(entries, dict):
            return None
        value = entries.get(key)
        if isinstance(value, str) and value:
            return value
        return None

    def display_name(self, language: str, context: str) -> Optional[str]:
        """Obtém o nome de um idioma no contexto de outro.

        Args:
            language: Idioma cujo nome se quer
            context: Idioma em que o nome deve ser escrito

        Returns:
            Nome legível ou None se não puder ser resolvido
        """
        if not language or not context:
            return None

        for table in self._context_tables(context):
            name = self._lookup(table, 'languages', language)
            if name:
                return name

            # Compõe "idioma (região)" a partir das partes
            primary = primary_subtag(language)
            region = region_subtag(language)
            if primary != language and region:
                language_name = self._lookup(table, 'languages', primary)
                region_name = self._lookup(table, 'regions', region)
                if language_name and region_name:
                    return f"{language_name} ({region_name})"

        logger.debug(f"Nome de idioma não encontrado: {language} (contexto {context})")
        return None
