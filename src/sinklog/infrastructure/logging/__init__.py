"""
Logger de processo do sinklog.

Este módulo expõe a instância global e o ciclo de vida explícito
``init``/``deinit``. A instância é um :class:`Logger` comum, então testes
e aplicações podem criar os seus próprios sem passar pelo singleton.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any, Iterable, Optional

from sinklog.config.models import LoggerConfig
from sinklog.core.levels import LogLevel
from .composer import ComposedRecord, compose, format_module_tag
from .handlers import ConsoleHandler, FileHandler, LogHandler
from .logger import Logger, ModuleLogger

# Singleton do logger principal
_logger_instance: Optional[Logger] = None
_instance_lock = threading.Lock()


def get_logger() -> Logger:
    """Retorna a instância singleton do logger."""
    global _logger_instance
    if _logger_instance is None:
        with _instance_lock:
            if _logger_instance is None:
                _logger_instance = Logger()
    return _logger_instance


def init(
    console_threshold: LogLevel | str = LogLevel.VERBOSE,
    file_threshold: LogLevel | str = LogLevel.VERBOSE,
    enable_file: bool = False,
    enable_colors: bool = True,
    include_timestamp: bool = True,
    use_icons_in_file: bool = False,
    log_dir: str | Path = ".",
) -> Logger:
    """
    Configura o logger global e o retorna para encadeamento.
    
    Pode ser chamado de novo a qualquer momento: cada chamada reconfigura
    por inteiro, fechando o arquivo anterior antes de abrir um novo.
    
    Args:
        console_threshold: Nível mínimo exibido no console
        file_threshold: Nível mínimo gravado no arquivo
        enable_file: Se deve criar o arquivo de log
        enable_colors: Se o rótulo do nível é colorido no console
        include_timestamp: Se cada linha começa com data/hora
        use_icons_in_file: Se o arquivo usa ícones no lugar dos rótulos
        log_dir: Diretório onde o arquivo é criado
        
    Returns:
        Logger: Instância global configurada
    """
    config = LoggerConfig(
        console_threshold=console_threshold,
        file_threshold=file_threshold,
        file_logging_enabled=enable_file,
        colors_enabled=enable_colors,
        include_timestamp=include_timestamp,
        use_icons_in_file=use_icons_in_file,
        log_dir=log_dir,
    )
    return get_logger().configure(config)


def deinit() -> None:
    """Fecha o arquivo de log e volta ao estado não inicializado (seguro sem ``init``)."""
    if _logger_instance is not None:
        _logger_instance.close()


def log(level: LogLevel | str, values: Iterable[Any], module_tag: Optional[str] = None) -> None:
    """Despacha um registro pelo logger global."""
    get_logger().log(level, values, module_tag)


def log_file_path() -> Optional[Path]:
    """Caminho do arquivo de log global, quando houver."""
    return get_logger().log_file_path


def module_logger(module_tag: str) -> ModuleLogger:
    """Logger global com a tag de módulo fixa (ex.: ``LOG = module_logger("net")``)."""
    return get_logger().for_module(module_tag)


__all__ = [
    "ComposedRecord",
    "ConsoleHandler",
    "FileHandler",
    "LogHandler",
    "Logger",
    "LoggerConfig",
    "ModuleLogger",
    "compose",
    "deinit",
    "format_module_tag",
    "get_logger",
    "init",
    "log",
    "log_file_path",
    "module_logger",
]
