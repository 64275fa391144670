# -*- coding: utf-8 -*-
"""
Localize - Helper Utilities

Funções auxiliares para normalização e comparação de identificadores de idioma.

License: GPL-3.0
"""

import re
from typing import Iterable, List, Optional


# Valores de locale que não identificam idioma algum
_NEUTRAL_LOCALES = {'c', 'posix'}


def normalize_language_tag(raw: Optional[str]) -> Optional[str]:
    """Normaliza um valor de locale do sistema para o formato de tag.

    Converte formatos POSIX como 'pt_BR.UTF-8@euro' em 'pt-BR'.

    Args:
        raw: Valor bruto (variável de ambiente, locale.getlocale etc.)

    Returns:
        Tag normalizada ou None se o valor não representa um idioma
    """
    if not raw:
        return None

    # Remove codificação e modificadores
    value = str(raw).strip().split('.')[0].split('@')[0]
    if not value or value.lower() in _NEUTRAL_LOCALES:
        return None

    parts = [p for p in re.split(r'[-_]', value) if p]
    if not parts:
        return None

    language = parts[0].lower()
    subtags = []
    for part in parts[1:]:
        # Região (BR, US) em maiúsculas, script (Hans) capitalizado
        if len(part) == 2 or part.isdigit():
            subtags.append(part.upper())
        elif len(part) == 4:
            subtags.append(part.capitalize())
        else:
            subtags.append(part)

    return '-'.join([language] + subtags)


def primary_subtag(tag: str) -> str:
    """Retorna o subtag primário (idioma) de uma tag ('pt-BR' -> 'pt')."""
    return re.split(r'[-_]', tag, maxsplit=1)[0]


def region_subtag(tag: str) -> Optional[str]:
    """Retorna o subtag de região de uma tag, se houver ('pt-BR' -> 'BR')."""
    for part in re.split(r'[-_]', tag)[1:]:
        if len(part) == 2 and part.isalpha() or len(part) == 3 and part.isdigit():
            return part.upper()
    return None


def tags_equal(tag1: str, tag2: str) -> bool:
    """Compara duas tags ignorando maiúsculas e o separador ('-' ou '_')."""
    return tag1.replace('_', '-').lower() == tag2.replace('_', '-').lower()


def find_matching_tag(tag: str, options: Iterable[str]) -> Optional[str]:
    """Encontra a opção correspondente a uma tag.

    Tenta primeiro a tag exata e depois apenas o idioma primário.

    Args:
        tag: Tag procurada
        options: Tags disponíveis

    Returns:
        A opção como escrita em ``options`` ou None
    """
    options = list(options)

    for option in options:
        if tags_equal(option, tag):
            return option

    primary = primary_subtag(tag)
    for option in options:
        if tags_equal(option, primary):
            return option

    return None


def unique(values: Iterable[str]) -> List[str]:
    """Remove duplicados preservando a ordem."""
    seen = set()
    result = []
    for value in values:
        if value not in seen:
            seen.add(value)
            result.append(value)
    return result
