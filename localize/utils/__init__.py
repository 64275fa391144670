# -*- coding: utf-8 -*-
"""
Localize - Utilities Module

Módulo de utilitários com informações de versão e funções auxiliares
para identificadores de idioma.

License: GPL-3.0
"""

from .version import (
    __version__,
    __license__,
    __build_number__,
    get_version_string,
    check_python_version
)

from .helpers import (
    normalize_language_tag,
    primary_subtag,
    region_subtag,
    tags_equal,
    find_matching_tag,
    unique
)

__all__ = [
    # Version info
    '__version__',
    '__license__',
    'get_version_string',
    'check_python_version',

    # Helper functions
    'normalize_language_tag',
    'primary_subtag',
    'region_subtag',
    'tags_equal',
    'find_matching_tag',
    'unique'
]
