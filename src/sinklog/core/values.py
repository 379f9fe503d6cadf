"""
Valores tipados para registros de log.

Cada ``LogValue`` carrega o payload bruto e a etiqueta (``ValueKind``) que
seleciona sua regra de formatação. Os construtores ``log_*`` validam o tipo
e o intervalo do payload no momento da chamada.

Uso típico::

    from sinklog import LogLevel, log, log_str, log_hex32

    log(LogLevel.INFO, [log_str("registrador"), log_hex32(0xDEADBEEF)])
"""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from sinklog.config.constants import FLOAT_PRECISION, HEX_WIDTHS
from sinklog.config.validators import validate_int_range, validate_type
from sinklog.core.exceptions import InvalidLogValueError

Payload = Union[str, int, float, bool]

_POINTER_DIGITS = struct.calcsize("P") * 2
_F32_MAX = 3.4028234663852886e38


class ValueKind(Enum):
    """Etiqueta que seleciona a regra de formatação de um valor."""

    STRING = "str"
    INT8 = "i8"
    INT16 = "i16"
    INT32 = "i32"
    INT64 = "i64"
    UINT8 = "u8"
    UINT16 = "u16"
    UINT32 = "u32"
    UINT64 = "u64"
    FLOAT32 = "f32"
    FLOAT64 = "f64"
    BOOL = "bool"
    CHAR = "char"
    HEX8 = "hex8"
    HEX16 = "hex16"
    HEX32 = "hex32"
    HEX64 = "hex64"
    POINTER = "ptr"


_SIGNED_BITS = {
    ValueKind.INT8: 8,
    ValueKind.INT16: 16,
    ValueKind.INT32: 32,
    ValueKind.INT64: 64,
}
_UNSIGNED_BITS = {
    ValueKind.UINT8: 8,
    ValueKind.UINT16: 16,
    ValueKind.UINT32: 32,
    ValueKind.UINT64: 64,
}
_HEX_BITS = {
    ValueKind.HEX8: 8,
    ValueKind.HEX16: 16,
    ValueKind.HEX32: 32,
    ValueKind.HEX64: 64,
}


@dataclass(frozen=True)
class LogValue:
    """Valor etiquetado, construído imediatamente antes do despacho."""

    kind: ValueKind
    payload: Payload

    def __str__(self) -> str:
        return format_value(self)


# ---------------------------------------------------------------------------
# Formatação
# ---------------------------------------------------------------------------

def _format_float(value: float) -> str:
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return f"{value:.{FLOAT_PRECISION}f}"


def format_value(value: LogValue) -> str:
    """
    Converte um ``LogValue`` em sua representação textual canônica.

    Função pura e total: toda etiqueta possui uma regra definida.
    """
    kind = value.kind
    payload = value.payload

    if kind is ValueKind.STRING or kind is ValueKind.CHAR:
        return str(payload)
    if kind is ValueKind.BOOL:
        return "true" if payload else "false"
    if kind in _SIGNED_BITS or kind in _UNSIGNED_BITS:
        return str(int(payload))
    if kind is ValueKind.FLOAT32:
        # Reduz à precisão simples antes de formatar
        if math.isfinite(payload):
            payload = struct.unpack("<f", struct.pack("<f", payload))[0]
        return _format_float(payload)
    if kind is ValueKind.FLOAT64:
        return _format_float(float(payload))
    if kind in _HEX_BITS:
        width = HEX_WIDTHS[_HEX_BITS[kind]]
        return f"0x{int(payload):0{width}x}"
    if kind is ValueKind.POINTER:
        return f"0x{int(payload):0{_POINTER_DIGITS}x}"
    raise AssertionError(f"ValueKind sem regra de formatação: {kind!r}")


# ---------------------------------------------------------------------------
# Construtores tipados
# ---------------------------------------------------------------------------

def _signed(kind: ValueKind, value: int) -> LogValue:
    bits = _SIGNED_BITS[kind]
    validate_type(value, int, kind.value, InvalidLogValueError)
    validate_int_range(value, -(1 << (bits - 1)), (1 << (bits - 1)) - 1, kind.value, InvalidLogValueError)
    return LogValue(kind, value)


def _unsigned(kind: ValueKind, bits: int, value: int) -> LogValue:
    validate_type(value, int, kind.value, InvalidLogValueError)
    validate_int_range(value, 0, (1 << bits) - 1, kind.value, InvalidLogValueError)
    return LogValue(kind, value)


def log_str(value: str) -> LogValue:
    validate_type(value, str, "str", InvalidLogValueError)
    return LogValue(ValueKind.STRING, value)


def log_i8(value: int) -> LogValue:
    return _signed(ValueKind.INT8, value)


def log_i16(value: int) -> LogValue:
    return _signed(ValueKind.INT16, value)


def log_i32(value: int) -> LogValue:
    return _signed(ValueKind.INT32, value)


def log_i64(value: int) -> LogValue:
    return _signed(ValueKind.INT64, value)


def log_u8(value: int) -> LogValue:
    return _unsigned(ValueKind.UINT8, 8, value)


def log_u16(value: int) -> LogValue:
    return _unsigned(ValueKind.UINT16, 16, value)


def log_u32(value: int) -> LogValue:
    return _unsigned(ValueKind.UINT32, 32, value)


def log_u64(value: int) -> LogValue:
    return _unsigned(ValueKind.UINT64, 64, value)


def log_f32(value: float) -> LogValue:
    """Float de precisão simples; valores finitos fora do intervalo f32 são rejeitados."""
    validate_type(value, (float, int), "f32", InvalidLogValueError)
    value = float(value)
    if math.isfinite(value) and abs(value) > _F32_MAX:
        raise InvalidLogValueError(
            "f32 fora do intervalo de precisão simples",
            details={"value": value, "max_value": _F32_MAX},
        )
    return LogValue(ValueKind.FLOAT32, value)


def log_f64(value: float) -> LogValue:
    validate_type(value, (float, int), "f64", InvalidLogValueError)
    return LogValue(ValueKind.FLOAT64, float(value))


def log_bool(value: bool) -> LogValue:
    validate_type(value, bool, "bool", InvalidLogValueError)
    return LogValue(ValueKind.BOOL, value)


def log_char(value: str) -> LogValue:
    """Um único code point Unicode (ex.: ``"X"`` ou ``"✔"``)."""
    validate_type(value, str, "char", InvalidLogValueError)
    if len(value) != 1:
        raise InvalidLogValueError(
            "char deve conter exatamente um code point",
            details={"value": value, "length": len(value)},
        )
    return LogValue(ValueKind.CHAR, value)


def log_hex8(value: int) -> LogValue:
    return _unsigned(ValueKind.HEX8, 8, value)


def log_hex16(value: int) -> LogValue:
    return _unsigned(ValueKind.HEX16, 16, value)


def log_hex32(value: int) -> LogValue:
    return _unsigned(ValueKind.HEX32, 32, value)


def log_hex64(value: int) -> LogValue:
    return _unsigned(ValueKind.HEX64, 64, value)


def log_ptr(obj: Any) -> LogValue:
    """Endereço (identidade) do objeto referenciado."""
    return LogValue(ValueKind.POINTER, id(obj))


def as_log_value(obj: Any) -> LogValue:
    """
    Envolve um valor Python comum no ``LogValue`` mais natural.
    
    Args:
        obj: ``LogValue`` existente, bool, int, float, str ou qualquer objeto
        
    Returns:
        LogValue: Valor etiquetado
    """
    if isinstance(obj, LogValue):
        return obj
    if isinstance(obj, bool):
        return LogValue(ValueKind.BOOL, obj)
    if isinstance(obj, int):
        if -(1 << 63) <= obj < (1 << 63):
            return LogValue(ValueKind.INT64, obj)
        if 0 <= obj < (1 << 64):
            return LogValue(ValueKind.UINT64, obj)
    if isinstance(obj, float):
        return LogValue(ValueKind.FLOAT64, obj)
    if isinstance(obj, str):
        return LogValue(ValueKind.STRING, obj)
    return LogValue(ValueKind.STRING, str(obj))


__all__ = [
    "LogValue",
    "ValueKind",
    "format_value",
    "as_log_value",
    "log_str",
    "log_i8",
    "log_i16",
    "log_i32",
    "log_i64",
    "log_u8",
    "log_u16",
    "log_u32",
    "log_u64",
    "log_f32",
    "log_f64",
    "log_bool",
    "log_char",
    "log_hex8",
    "log_hex16",
    "log_hex32",
    "log_hex64",
    "log_ptr",
]
