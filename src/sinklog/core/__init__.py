"""Tipos de domínio do sinklog: níveis, valores e exceções."""

from .exceptions import (
    ConfigurationError,
    InvalidLogValueError,
    SinkLogException,
    ValidationError,
    WriteFailureError,
)
from .levels import LevelAttributes, LogLevel, attributes_of, should_emit
from .values import LogValue, ValueKind, as_log_value, format_value

__all__ = [
    "ConfigurationError",
    "InvalidLogValueError",
    "SinkLogException",
    "ValidationError",
    "WriteFailureError",
    "LevelAttributes",
    "LogLevel",
    "attributes_of",
    "should_emit",
    "LogValue",
    "ValueKind",
    "as_log_value",
    "format_value",
]
