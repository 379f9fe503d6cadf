"""
Modelos de dados de configuração.

Define a estrutura tipada das configurações usando Dataclasses.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from sinklog.config.constants import DEFAULTS
from sinklog.config.validators import validate_not_empty, validate_type
from sinklog.core.levels import LogLevel


@dataclass
class LoggerConfig:
    """
    Configuração do logger, aplicada por inteiro a cada ``init``.
    
    Attributes:
        console_threshold: Nível mínimo para o console
        file_threshold: Nível mínimo para o arquivo
        file_logging_enabled: Se deve criar o arquivo de log
        colors_enabled: Se o rótulo do nível é colorido no console
        include_timestamp: Se cada linha começa com data/hora
        use_icons_in_file: Se o arquivo usa ícones no lugar dos rótulos
        log_dir: Diretório onde o arquivo de log é criado
        file_prefix: Prefixo do nome do arquivo de log
        file_encoding: Encoding do arquivo
    """
    
    # Limiares
    console_threshold: LogLevel = LogLevel.VERBOSE
    file_threshold: LogLevel = LogLevel.VERBOSE
    
    # Destinos e formatação
    file_logging_enabled: bool = False
    colors_enabled: bool = True
    include_timestamp: bool = True
    use_icons_in_file: bool = False
    
    # Arquivo
    log_dir: Path = Path(DEFAULTS["log_dir"])
    file_prefix: str = DEFAULTS["file_prefix"]
    file_encoding: str = DEFAULTS["file_encoding"]
    
    def __post_init__(self):
        self.console_threshold = LogLevel.parse(self.console_threshold)
        self.file_threshold = LogLevel.parse(self.file_threshold)
        for name in ("file_logging_enabled", "colors_enabled", "include_timestamp", "use_icons_in_file"):
            validate_type(getattr(self, name), bool, name)
        validate_type(self.log_dir, (str, Path), "log_dir")
        self.log_dir = Path(self.log_dir)
        validate_type(self.file_prefix, str, "file_prefix")
        validate_not_empty(self.file_prefix, "file_prefix")
        validate_type(self.file_encoding, str, "file_encoding")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> LoggerConfig:
        clean_data = {k: v for k, v in data.items() if k in cls.__annotations__}
        return cls(**clean_data)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "console_threshold": self.console_threshold.value,
            "file_threshold": self.file_threshold.value,
            "file_logging_enabled": self.file_logging_enabled,
            "colors_enabled": self.colors_enabled,
            "include_timestamp": self.include_timestamp,
            "use_icons_in_file": self.use_icons_in_file,
            "log_dir": str(self.log_dir),
            "file_prefix": self.file_prefix,
            "file_encoding": self.file_encoding,
        }
