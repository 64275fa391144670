# -*- coding: utf-8 -*-
"""
Localize - Locale Negotiation

Obtém a lista ordenada de idiomas preferidos do usuário/sistema e a negocia
com as localizações disponíveis.

License: GPL-3.0
"""

import os
import locale
from typing import Iterable, List, Mapping, Optional, Sequence
from loguru import logger

from ..utils.helpers import normalize_language_tag, find_matching_tag, unique


# Ordem de precedência das variáveis de ambiente (mesma do gettext)
LOCALE_ENV_VARS = ('LANGUAGE', 'LC_ALL', 'LC_MESSAGES', 'LANG')


def negotiate(preferences: Iterable[str], available: Sequence[str]) -> List[str]:
    """Negocia preferências com as localizações disponíveis.

    Cada preferência é trocada pela localização correspondente (tag exata ou
    idioma primário), escrita como no catálogo. Preferências sem
    correspondência são mantidas como vieram.

    Args:
        preferences: Idiomas preferidos, em ordem
        available: Localizações disponíveis

    Returns:
        Lista negociada sem duplicados
    """
    negotiated = []
    for preference in preferences:
        match = find_matching_tag(preference, available)
        negotiated.append(match if match is not None else preference)
    return unique(negotiated)


class StaticLocaleNegotiator:
    """Negociador com lista fixa de preferências."""

    def __init__(self, preferences: Sequence[str] = ()):
        self.preferences = list(preferences)

    def preferred_localizations(self, available: Sequence[str]) -> List[str]:
        return negotiate(self.preferences, available)


class SystemLocaleNegotiator:
    """Negociador baseado nas configurações de locale do sistema operacional."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        """Inicializa o negociador.

        Args:
            environ: Ambiente a consultar (padrão: os.environ, lido a cada chamada)
        """
        self._environ = environ

    def system_preferences(self) -> List[str]:
        """Lê os idiomas preferidos do sistema.

        Returns:
            Tags normalizadas, em ordem de preferência
        """
        environ = os.environ if self._environ is None else self._environ
        raw_values: List[str] = []

        for env_var in LOCALE_ENV_VARS:
            env_value = environ.get(env_var)
            if not env_value:
                continue
            # LANGUAGE aceita uma lista separada por ':'
            if env_var == 'LANGUAGE':
                raw_values.extend(env_value.split(':'))
            else:
                raw_values.append(env_value)

        if self._environ is None:
            try:
                system_locale = locale.getlocale()[0]
            except ValueError as e:
                logger.debug(f"Erro ao detectar idioma do sistema: {e}")
                system_locale = None
            if system_locale:
                raw_values.append(system_locale)

        tags = [normalize_language_tag(value) for value in raw_values]
        return unique(tag for tag in tags if tag)

    def preferred_localizations(self, available: Sequence[str]) -> List[str]:
        preferences = self.system_preferences()
        negotiated = negotiate(preferences, available)
        logger.debug(f"Idiomas preferidos do sistema: {preferences} -> {negotiated}")
        return negotiated
