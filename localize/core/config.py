# -*- coding: utf-8 -*-
"""
Localize - Configuration Manager

Gerenciador de configurações da biblioteca.
Carrega e gerencia configurações de arquivo YAML e variáveis de ambiente.

License: GPL-3.0
"""

import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional
from loguru import logger
from copy import deepcopy

from ..locales import LOCALES_DIR


class ConfigManager:
    """Gerenciador de configurações da biblioteca."""

    DEFAULT_CONFIG = {
        'localization': {
            # None: usa os arquivos empacotados em localize/locales
            'locales_dir': None,
            'fallback_language': 'en',
            # 'auto' mantém a seleção persistida; outro valor é aplicado na inicialização
            'language': 'auto'
        },
        'preferences': {
            # None: ~/.config/localize/preferences.yml
            'path': None
        },
        'logging': {
            'level': 'INFO',
            'console_enabled': True,
            'file_enabled': False,
            'log_dir': 'logs',
            'max_log_files': 10,
            'max_log_size_mb': 10
        }
    }

    def __init__(self, config_path: Optional[str] = None):
        """Inicializa o gerenciador de configurações.

        Args:
            config_path: Caminho para o arquivo de configuração personalizado.
        """
        self.config_path = Path(config_path) if config_path else self._get_default_config_path()
        self.config = deepcopy(self.DEFAULT_CONFIG)
        # Snapshot do estado carregado para detecção de mudanças
        self._loaded_snapshot: Dict[str, Any] = {}
        self.load_config()
        self._loaded_snapshot = deepcopy(self.config)

    def _get_default_config_path(self) -> Path:
        """Retorna o caminho padrão do arquivo de configuração."""
        return Path.cwd() / 'localize.yml'

    def load_config(self) -> bool:
        """Carrega as configurações do arquivo e ambiente.

        Returns:
            True se as configurações foram carregadas com sucesso.
        """
        try:
            self.config = deepcopy(self.DEFAULT_CONFIG)

            if self.config_path.exists():
                with open(self.config_path, 'r', encoding='utf-8') as f:
                    file_config = yaml.safe_load(f)
                    if isinstance(file_config, dict):
                        self._merge_config(self.config, file_config)
                        logger.info(f"Configuração carregada: {self.config_path}")
            else:
                logger.debug(f"Arquivo de configuração não encontrado em {self.config_path}. Usando valores padrão.")

            self._load_env_variables()
            self._validate_config()

            return True

        except Exception as e:
            logger.error(f"Erro ao carregar configurações: {e}")
            self.config = deepcopy(self.DEFAULT_CONFIG)
            return False

    def _merge_config(self, base: Dict[str, Any], override: Dict[str, Any]):
        """Mescla configurações recursivamente.

        Args:
            base: Configuração base
            override: Configuração para sobrescrever
        """
        for key, value in override.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._merge_config(base[key], value)
            else:
                base[key] = value

    def _load_env_variables(self):
        """Carrega configurações de variáveis de ambiente."""
        env_mappings = {
            'LOCALIZE_LOCALES_DIR': ('localization', 'locales_dir'),
            'LOCALIZE_LANGUAGE': ('localization', 'language'),
            'LOCALIZE_FALLBACK_LANGUAGE': ('localization', 'fallback_language'),
            'LOCALIZE_PREFERENCES': ('preferences', 'path'),
            'LOCALIZE_LOG_LEVEL': ('logging', 'level')
        }

        for env_var, (section, key) in env_mappings.items():
            value = os.getenv(env_var)
            if value:
                if section not in self.config or not isinstance(self.config[section], dict):
                    self.config[section] = {}
                self.config[section][key] = value
                logger.debug(f"Configuração carregada de variável de ambiente: {env_var}")

    def _validate_config(self):
        """Valida as configurações carregadas."""
        for section, defaults in self.DEFAULT_CONFIG.items():
            if not isinstance(self.config.get(section), dict):
                logger.warning(f"Seção inválida: {section}. Usando valores padrão")
                self.config[section] = deepcopy(defaults)

        localization = self.config['localization']

        # Idioma de fallback precisa ser um identificador não vazio
        fallback = localization.get('fallback_language')
        if not isinstance(fallback, str) or not fallback.strip():
            logger.warning(
                f"Idioma de fallback inválido: {fallback!r}. "
                f"Usando valor padrão: {self.DEFAULT_CONFIG['localization']['fallback_language']}"
            )
            localization['fallback_language'] = self.DEFAULT_CONFIG['localization']['fallback_language']
        else:
            localization['fallback_language'] = fallback.strip()

        language = localization.get('language')
        if not isinstance(language, str) or not language.strip():
            localization['language'] = 'auto'
        else:
            localization['language'] = language.strip()

        # Caminhos: aceita None ou string
        for section, key in (('localization', 'locales_dir'), ('preferences', 'path')):
            value = self.config[section].get(key)
            if value is not None and not isinstance(value, (str, Path)):
                logger.warning(f"Caminho inválido para {section}.{key}: {value!r}. Usando valor padrão")
                self.config[section][key] = None

        numeric_validations = [
            ('logging', 'max_log_files', 1, 100),
            ('logging', 'max_log_size_mb', 1, 1000),
        ]

        for section, key, min_val, max_val in numeric_validations:
            value = self.config[section].get(key)
            if isinstance(value, str) and value.isdigit():
                value = int(value)
            if not isinstance(value, int) or isinstance(value, bool) or not (min_val <= value <= max_val):
                logger.warning(
                    f"Valor inválido para {section}.{key}: {value}. "
                    f"Usando valor padrão: {self.DEFAULT_CONFIG[section][key]}"
                )
                value = self.DEFAULT_CONFIG[section][key]
            self.config[section][key] = value

        valid_log_levels = ['TRACE', 'DEBUG', 'INFO', 'SUCCESS', 'WARNING', 'ERROR', 'CRITICAL']
        log_level = str(self.config['logging'].get('level', 'INFO')).upper()
        if log_level not in valid_log_levels:
            logger.warning(f"Nível de log inválido: {log_level}. Usando 'INFO'")
            self.config['logging']['level'] = 'INFO'
        else:
            self.config['logging']['level'] = log_level

    @property
    def locales_dir(self) -> Path:
        """Diretório com os arquivos de idioma."""
        value = self.config['localization'].get('locales_dir')
        return Path(value).expanduser() if value else LOCALES_DIR

    @property
    def preferences_path(self) -> Path:
        """Arquivo onde a seleção de idioma é persistida."""
        value = self.config['preferences'].get('path')
        if value:
            return Path(value).expanduser()
        return Path.home() / '.config' / 'localize' / 'preferences.yml'

    def save_config(self) -> bool:
        """Salva as configurações em arquivo somente se houver mudanças desde o último carregamento.

        Returns:
            True se as configurações foram salvas com sucesso ou não havia mudanças.
        """
        try:
            if self._loaded_snapshot == self.config:
                logger.debug("Nenhuma alteração na configuração; não é necessário salvar.")
                return True

            self.config_path.parent.mkdir(parents=True, exist_ok=True)

            with open(self.config_path, 'w', encoding='utf-8') as f:
                yaml.safe_dump(self.config, f, default_flow_style=False,
                               allow_unicode=True, indent=2)

            logger.info(f"Configurações salvas: {self.config_path}")
            self._loaded_snapshot = deepcopy(self.config)
            return True

        except Exception as e:
            logger.error(f"Erro ao salvar configurações: {e}")
            return False

    def get(self, section: str, key: str = None, default: Any = None) -> Any:
        """Obtém um valor de configuração.

        Suporta dois formatos de chamada:
        - get('section') ou get('section', 'key', default)
        - get('section.key', default)

        Args:
            section: Seção da configuração ou caminho pontuado (ex.: 'logging.level')
            key: Chave específica (opcional quando "section" não é pontuado)
            default: Valor padrão se não encontrado

        Returns:
            Valor da configuração ou valor padrão.
        """
        # Caminho pontuado: o segundo argumento é o default
        if '.' in section:
            if key is not None:
                default = key
            current: Any = self.config
            for part in section.split('.'):
                if isinstance(current, dict) and part in current:
                    current = current[part]
                else:
                    return default
            return current

        # Caso: segundo argumento foi passado como default
        if key is not None and not isinstance(key, str):
            default = key
            key = None

        if key is None:
            return self.config.get(section, default)

        section_config = self.config.get(section)
        if not isinstance(section_config, dict):
            return default
        return section_config.get(key, default)

    def set(self, section: str, key: Any = None, value: Any = None) -> bool:
        """Define um valor de configuração.

        Suporta dois formatos de chamada:
        - set('section', 'key', value)
        - set('section.key', value)

        Args:
            section: Seção ou caminho pontuado (ex.: 'logging.level')
            key: Chave da configuração OU valor quando usar caminho pontuado
            value: Valor a ser definido

        Returns:
            True se o valor foi definido com sucesso.
        """
        if value is None and '.' in section and key is not None:
            value = key
            parts = section.split('.')
            current = self.config
            for part in parts[:-1]:
                if part not in current or not isinstance(current[part], dict):
                    current[part] = {}
                current = current[part]
            current[parts[-1]] = value
            return True

        if not isinstance(key, str):
            logger.error(f"Parâmetros inválidos para set: {section!r}, {key!r}")
            return False
        if section not in self.config or not isinstance(self.config[section], dict):
            self.config[section] = {}
        self.config[section][key] = value
        return True
