# -*- coding: utf-8 -*-
"""
Localize - Resource Catalog

Catálogo de recursos de idioma: enumera as localizações disponíveis e carrega
a tabela de textos de cada uma.

Cada localização é um arquivo YAML no diretório de locales, cujo nome (sem
extensão) é o identificador do idioma. O arquivo 'Base.yaml' representa os
recursos não localizados usados como fallback.

License: GPL-3.0
"""

import yaml
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union
from loguru import logger


# Identificador dos recursos base (não localizados)
BASE_LOCALIZATION = 'Base'

LOCALE_FILE_SUFFIX = '.yaml'


class StaticCatalog:
    """Catálogo em memória.

    Aceita uma sequência de identificadores (tabelas vazias) ou um
    mapeamento identificador -> tabela, preservando a ordem recebida.
    """

    def __init__(self, localizations: Union[Sequence[str], Mapping[str, Dict[str, Any]]] = ()):
        if isinstance(localizations, Mapping):
            self._tables = {str(k): dict(v or {}) for k, v in localizations.items()}
        else:
            self._tables = {str(k): {} for k in localizations}

    def localizations(self) -> List[str]:
        return list(self._tables)

    def load_table(self, language: str) -> Dict[str, Any]:
        return dict(self._tables.get(language, {}))


class DirectoryCatalog:
    """Catálogo baseado em arquivos YAML de um diretório."""

    def __init__(self, locales_dir):
        """Inicializa o catálogo.

        Args:
            locales_dir: Diretório dos arquivos de tradução
        """
        self.locales_dir = Path(locales_dir)

    def _language_file(self, language: str) -> Path:
        return self.locales_dir / f"{language}{LOCALE_FILE_SUFFIX}"

    def localizations(self) -> List[str]:
        """Lista as localizações disponíveis, ordenadas por identificador.

        Returns:
            Lista de identificadores (vazia se o diretório não existe)
        """
        if not self.locales_dir.is_dir():
            logger.debug(f"Diretório de locales não encontrado: {self.locales_dir}")
            return []

        languages = [
            path.stem for path in self.locales_dir.glob(f"*{LOCALE_FILE_SUFFIX}")
            if path.is_file()
        ]
        return sorted(languages)

    def load_table(self, language: str) -> Dict[str, Any]:
        """Carrega a tabela de textos de um idioma.

        Args:
            language: Identificador do idioma

        Returns:
            Tabela carregada ou vazia se o arquivo não existe ou é inválido
        """
        language_file = self._language_file(language)
        table = _read_yaml_mapping(language_file)
        if table is None:
            return {}

        logger.debug(f"Traduções carregadas: {language}")
        return table


def _read_yaml_mapping(path: Path) -> Optional[Dict[str, Any]]:
    if not path.is_file():
        logger.debug(f"Arquivo de tradução não encontrado: {path}")
        return None

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.error(f"Erro ao carregar traduções de {path}: {e}")
        return None

    if data is None:
        return {}
    if not isinstance(data, dict):
        logger.warning(f"Arquivo de tradução inválido (esperado mapeamento): {path}")
        return None

    return data


def get_nested_value(data: Dict[str, Any], key_path: str) -> Optional[Any]:
    """Obtém valor aninhado usando notação de ponto.

    Chaves literais contendo pontos têm precedência sobre o caminho aninhado.

    Args:
        data: Dicionário de dados
        key_path: Caminho da chave (ex: 'menu.file.open')

    Returns:
        Valor encontrado ou None
    """
    if not isinstance(data, dict):
        return None
    if key_path in data:
        return data[key_path]

    current: Any = data
    try:
        for key in key_path.split('.'):
            current = current[key]
        return current
    except (KeyError, TypeError, IndexError):
        return None
