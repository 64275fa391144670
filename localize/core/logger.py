# -*- coding: utf-8 -*-
"""
Localize - Logging System

Sistema de logging da biblioteca.
Configura logs para console e, opcionalmente, arquivo com rotação automática.

License: GPL-3.0
"""

import sys
from pathlib import Path
from datetime import datetime
from loguru import logger


FILE_FORMAT = ("{time:YYYY-MM-DD HH:mm:ss.SSS} | "
               "{level: <8} | "
               "{name}:{function}:{line} - "
               "{message}")

CONSOLE_FORMAT = ("<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
                  "<level>{level: <8}</level> | "
                  "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
                  "<level>{message}</level>")


class LogManager:
    """Gerenciador de logs da aplicação."""

    def __init__(self, log_dir: str = "logs"):
        """Inicializa o gerenciador de logs.

        Args:
            log_dir: Diretório para armazenar os logs
        """
        self.log_dir = Path(log_dir)

        # latest.log: sobrescrito a cada execução
        self.lastlog_path = self.log_dir / "latest.log"
        # log rotativo por sessão
        self.session_log_path = self._get_session_log_path()
        # error.log: persistente, apenas erros
        self.error_log_path = self.log_dir / "error.log"


    def _get_session_log_path(self) -> Path:
        """Gera o caminho do log da sessão atual."""
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        return self.log_dir / f"log-{timestamp}.log"

    def setup_logging(self,
                      level: str = "INFO",
                      console_enabled: bool = True,
                      file_enabled: bool = False,
                      max_log_files: int = 10,
                      max_log_size: str = "10 MB") -> bool:
        """Configura o sistema de logging.

        Remove os handlers padrão do loguru e adiciona os configurados.

        Args:
            level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            console_enabled: Habilita log no console
            file_enabled: Habilita log em arquivo
            max_log_files: Número máximo de arquivos de log
            max_log_size: Tamanho máximo de cada arquivo de log

        Returns:
            True se a configuração foi bem-sucedida.
        """
        try:
            logger.remove()

            if console_enabled:
                logger.add(
                    sys.stderr,
                    level=level,
                    format=CONSOLE_FORMAT,
                    colorize=True
                )

            if file_enabled:
                self.log_dir.mkdir(parents=True, exist_ok=True)

                # latest.log captura tudo e é sobrescrito
                logger.add(
                    str(self.lastlog_path),
                    level="DEBUG",
                    format=FILE_FORMAT,
                    mode="w",
                    encoding="utf-8"
                )

                logger.add(
                    str(self.session_log_path),
                    level=level,
                    format=FILE_FORMAT,
                    rotation=max_log_size,
                    retention=max_log_files,
                    compression="zip",
                    encoding="utf-8"
                )

                logger.add(
                    str(self.error_log_path),
                    level="ERROR",
                    format=FILE_FORMAT,
                    mode="a",
                    encoding="utf-8"
                )

            logger.debug(f"Sistema de logging configurado (nível {level}, console={console_enabled}, arquivo={file_enabled})")

            if file_enabled:
                logger.debug(f"Log da sessão: {self.session_log_path}")

            return True

        except Exception as e:
            print(f"Erro ao configurar logging: {e}", file=sys.stderr)
            return False


# Instância global do gerenciador de logs
_log_manager = None


def setup_logging(level: str = "INFO",
                  console_enabled: bool = True,
                  file_enabled: bool = False,
                  log_dir: str = "logs",
                  max_log_files: int = 10,
                  max_log_size: str = "10 MB") -> bool:
    """Configura o sistema de logging global.

    Args:
        level: Nível de log
        console_enabled: Habilita log no console
        file_enabled: Habilita log em arquivo
        log_dir: Diretório dos arquivos de log
        max_log_files: Número máximo de arquivos de log
        max_log_size: Tamanho máximo de cada arquivo de log

    Returns:
        True se a configuração foi bem-sucedida.
    """
    global _log_manager

    if _log_manager is None or _log_manager.log_dir != Path(log_dir):
        _log_manager = LogManager(log_dir)

    return _log_manager.setup_logging(
        level=level,
        console_enabled=console_enabled,
        file_enabled=file_enabled,
        max_log_files=max_log_files,
        max_log_size=max_log_size
    )


def setup_logging_from_config(config) -> bool:
    """Configura o logging a partir de um ConfigManager."""
    return setup_logging(
        level=config.get('logging', 'level', 'INFO'),
        console_enabled=bool(config.get('logging', 'console_enabled', True)),
        file_enabled=bool(config.get('logging', 'file_enabled', False)),
        log_dir=config.get('logging', 'log_dir', 'logs'),
        max_log_files=config.get('logging', 'max_log_files', 10),
        max_log_size=f"{config.get('logging', 'max_log_size_mb', 10)} MB"
    )
