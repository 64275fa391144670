# -*- coding: utf-8 -*-
"""
Localize - Preferences Store

Armazenamento chave-valor persistente usado para guardar a seleção de idioma
entre execuções. O arquivo é um mapeamento YAML simples.

License: GPL-3.0
"""

import yaml
from pathlib import Path
from typing import Dict, Optional
from loguru import logger


class MemoryPreferencesStore:
    """Armazenamento em memória, sem persistência em disco.

    Útil para testes e para aplicações que não querem gravar preferências.
    """

    def __init__(self, values: Optional[Dict[str, str]] = None):
        self._values: Dict[str, str] = dict(values or {})
        self.sync_count = 0

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str):
        self._values[key] = value

    def synchronize(self) -> bool:
        self.sync_count += 1
        return True


class PreferencesStore:
    """Armazenamento chave-valor persistido em arquivo YAML.

    - get: relê o arquivo quando não há alterações pendentes, de modo que
      outros processos (ou reinícios) observem sempre o valor gravado.
    - set: altera apenas a memória até o próximo synchronize.
    - synchronize: grava o arquivo de forma atômica (arquivo temporário + replace).
      Se a gravação falha, é repetida na próxima leitura ou escrita.
    """

    def __init__(self, path):
        """Inicializa o armazenamento.

        Args:
            path: Caminho do arquivo YAML de preferências
        """
        self.path = Path(path)
        self._values: Dict[str, str] = {}
        self._dirty = False
        self._write_failed = False

    def _load(self) -> Dict[str, str]:
        """Lê o arquivo de preferências.

        Returns:
            Mapeamento lido ou vazio se o arquivo não existe ou é inválido
        """
        if not self.path.exists():
            return {}

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Falha ao ler preferências de {self.path}: {e}")
            return {}

        if data is None:
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Arquivo de preferências inválido (esperado mapeamento): {self.path}")
            return {}

        return {str(k): v for k, v in data.items()}

    def _refresh(self):
        # Regrava o que um synchronize anterior não conseguiu salvar
        if self._write_failed:
            self.synchronize()
        if not self._dirty:
            self._values = self._load()

    def get(self, key: str) -> Optional[str]:
        """Obtém o valor de uma chave.

        Args:
            key: Chave da preferência

        Returns:
            Valor como string ou None se ausente
        """
        self._refresh()
        value = self._values.get(key)
        if value is None:
            return None
        return str(value)

    def set(self, key: str, value: str):
        """Define o valor de uma chave (pendente até synchronize)."""
        self._refresh()
        self._values[key] = value
        self._dirty = True

    def synchronize(self) -> bool:
        """Grava as alterações pendentes em disco.

        Returns:
            True se gravado com sucesso ou se não havia alterações.
        """
        if not self._dirty:
            return True

        tmp = self.path.with_name(self.path.name + '.tmp')
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp, 'w', encoding='utf-8') as f:
                yaml.safe_dump(self._values, f, default_flow_style=False,
                               allow_unicode=True)
            tmp.replace(self.path)
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Erro ao salvar preferências em {self.path}: {e}")
            self._write_failed = True
            return False

        self._dirty = False
        self._write_failed = False
        logger.debug(f"Preferências salvas: {self.path}")
        return True
