"""
sinklog: logger de processo com níveis, console colorido e arquivo.

Uso típico::

    from sinklog import LogLevel, init, deinit, log, log_str, log_i32

    init(LogLevel.INFO, LogLevel.VERBOSE, enable_file=True)
    log(LogLevel.INFO, [log_str("Aplicacao iniciada"), log_i32(42)])

    LOG = module_logger("net")
    LOG.warning("timeout", 3.5)

    deinit()
"""

from sinklog.core import (
    ConfigurationError,
    InvalidLogValueError,
    LevelAttributes,
    LogLevel,
    LogValue,
    SinkLogException,
    ValidationError,
    ValueKind,
    WriteFailureError,
    as_log_value,
    attributes_of,
    format_value,
    should_emit,
)
from sinklog.core.values import (
    log_bool,
    log_char,
    log_f32,
    log_f64,
    log_hex8,
    log_hex16,
    log_hex32,
    log_hex64,
    log_i8,
    log_i16,
    log_i32,
    log_i64,
    log_ptr,
    log_str,
    log_u8,
    log_u16,
    log_u32,
    log_u64,
)
from sinklog.config.models import LoggerConfig
from sinklog.infrastructure.logging import (
    Logger,
    ModuleLogger,
    compose,
    deinit,
    get_logger,
    init,
    log,
    log_file_path,
    module_logger,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "InvalidLogValueError",
    "LevelAttributes",
    "LogLevel",
    "LogValue",
    "Logger",
    "LoggerConfig",
    "ModuleLogger",
    "SinkLogException",
    "ValidationError",
    "ValueKind",
    "WriteFailureError",
    "as_log_value",
    "attributes_of",
    "compose",
    "deinit",
    "format_value",
    "get_logger",
    "init",
    "log",
    "log_bool",
    "log_char",
    "log_f32",
    "log_f64",
    "log_file_path",
    "log_hex8",
    "log_hex16",
    "log_hex32",
    "log_hex64",
    "log_i8",
    "log_i16",
    "log_i32",
    "log_i64",
    "log_ptr",
    "log_str",
    "log_u8",
    "log_u16",
    "log_u32",
    "log_u64",
    "module_logger",
    "should_emit",
]
