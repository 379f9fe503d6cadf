"""
Funções de validação reutilizáveis.

Este módulo contém funções puras para validar dados de configuração e valores
de log, garantindo integridade dos dados antes da utilização.
"""

from typing import Any, Optional, Type

from sinklog.core.exceptions import ValidationError


def validate_type(
    value: Any,
    expected_type: type | tuple[type, ...],
    field_name: str,
    error_cls: Type[ValidationError] = ValidationError,
) -> None:
    """
    Valida estritamente se o valor corresponde ao tipo esperado.
    Não aceita conversão implícita (ex: "true" para bool).
    
    Args:
        value: Valor a validar.
        expected_type: Tipo (ou tupla de tipos) esperado.
        field_name: Nome do campo.
        error_cls: Classe de exceção a levantar.
        
    Raises:
        ValidationError: Se o tipo estiver incorreto.
    """
    expected = expected_type if isinstance(expected_type, tuple) else (expected_type,)
    expected_names = "/".join(t.__name__ for t in expected)

    # Caso especial: bool é subclasse de int, mas queremos diferenciar
    if isinstance(value, bool) and bool not in expected:
        raise error_cls(
            f"{field_name} deve ser do tipo {expected_names}, não booleano.",
            details={"value": value, "expected": expected_names, "got": "bool"}
        )

    if not isinstance(value, expected):
        raise error_cls(
            f"{field_name} deve ser do tipo {expected_names}.",
            details={
                "value": value,
                "expected": expected_names,
                "got": type(value).__name__
            }
        )


def validate_int_range(
    value: int,
    min_value: int,
    max_value: int,
    field_name: str,
    error_cls: Type[ValidationError] = ValidationError,
) -> None:
    """
    Valida se um inteiro está dentro do intervalo fechado informado.
    
    Args:
        value: O valor a ser validado.
        min_value: Menor valor aceitável.
        max_value: Maior valor aceitável.
        field_name: Nome do campo para mensagem de erro.
    """
    if value < min_value or value > max_value:
        raise error_cls(
            f"{field_name} fora do intervalo [{min_value}, {max_value}]",
            details={"value": value, "min_value": min_value, "max_value": max_value}
        )


def validate_not_empty(value: Optional[str], field_name: str) -> None:
    """Valida se uma string não está vazia."""
    if not value:
        raise ValidationError(f"{field_name} não pode estar vazio")
