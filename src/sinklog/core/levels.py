"""
Registro de níveis de log.

Mapeia cada nível para rank, rótulo, cor de console e ícone de arquivo,
e concentra a decisão de limiar usada por todos os destinos (sinks).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict

from sinklog.config.constants import LEVEL_TABLE
from sinklog.core.exceptions import ValidationError


class LogLevel(Enum):
    """Níveis de severidade, do menos ao mais severo."""

    VERBOSE = "VERBOSE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    FATAL = "FATAL"
    FIXED = "FIXED"

    @property
    def rank(self) -> int:
        return _ATTRIBUTES[self].rank

    @classmethod
    def parse(cls, value: LogLevel | str) -> LogLevel:
        """
        Converte um nome de nível (sem diferenciar maiúsculas) em ``LogLevel``.
        
        Args:
            value: Instância de ``LogLevel`` ou nome do nível
            
        Returns:
            LogLevel: Nível correspondente
            
        Raises:
            ValidationError: Se o nome não corresponder a nenhum nível
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().upper()
            if key in cls.__members__:
                return cls[key]
        raise ValidationError(
            f"Nível inválido: {value!r}",
            details={"value": value, "valid_choices": list(cls.__members__)},
        )


@dataclass(frozen=True)
class LevelAttributes:
    """Atributos estáticos de um nível."""

    rank: int
    label: str
    color: str
    icon: str


_ATTRIBUTES: Dict[LogLevel, LevelAttributes] = {
    LogLevel(name): LevelAttributes(rank, label, color, icon)
    for name, (rank, label, color, icon) in LEVEL_TABLE.items()
}


def attributes_of(level: LogLevel) -> LevelAttributes:
    """Retorna os atributos estáticos do nível."""
    return _ATTRIBUTES[level]


def should_emit(level: LogLevel, threshold: LogLevel) -> bool:
    """
    Indica se ``level`` passa pelo limiar de um destino.

    FIXED sempre passa, independente do limiar configurado.
    """
    if level is LogLevel.FIXED:
        return True
    return _ATTRIBUTES[level].rank >= _ATTRIBUTES[threshold].rank


__all__ = ["LogLevel", "LevelAttributes", "attributes_of", "should_emit"]
