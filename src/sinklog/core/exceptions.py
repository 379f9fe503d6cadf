"""Sistema centralizado de exceções customizadas do sinklog."""

from __future__ import annotations
from typing import Any, Optional


class SinkLogException(Exception):
    """Exceção base para todas as exceções customizadas do sinklog."""
    
    def __init__(self, message: str, *, details: Optional[dict[str, Any]] = None, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.cause = cause
    
    def __str__(self) -> str:
        base = self.message
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            base = f"{base} ({details_str})"
        if self.cause:
            base = f"{base} | Causa: {self.cause}"
        return base
    
    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# ==================== Exceções de Configuração ====================

class ValidationError(SinkLogException):
    """Erro base para falhas de validação."""
    pass


class InvalidLogValueError(ValidationError, ValueError):
    """Valor incompatível com o construtor tipado usado."""
    pass


class ConfigurationError(SinkLogException):
    """Não foi possível criar/abrir o arquivo de log durante a inicialização."""
    pass


# ==================== Exceções de Execução ====================

class WriteFailureError(SinkLogException):
    """Falha ao anexar uma linha no arquivo de log."""
    pass


__all__ = [
    "SinkLogException",
    "ValidationError",
    "InvalidLogValueError",
    "ConfigurationError",
    "WriteFailureError",
]
