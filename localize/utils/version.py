# -*- coding: utf-8 -*-
"""
Localize - Version Information

Informações de versão da biblioteca.

License: GPL-3.0
"""

__version__ = "1.0.0"
__license__ = "GPL-3.0"
__description__ = "Language selection and string lookup on top of YAML locale files"

# Build information
__build_number__ = "1"

__min_python_version__ = "3.9"


def get_version_string():
    """Retorna string formatada da versão."""
    return f"Localize v{__version__} (Build {__build_number__})"


def check_python_version():
    """Verifica se a versão do Python é compatível."""
    import sys

    min_version = tuple(map(int, __min_python_version__.split('.')))
    current_version = sys.version_info[:2]

    if current_version < min_version:
        raise RuntimeError(
            f"Python {__min_python_version__} ou superior é necessário. "
            f"Versão atual: {sys.version}"
        )

    return True
