"""Fixtures compartilhadas dos testes do sinklog."""

from __future__ import annotations

import io

import pytest

import sinklog.infrastructure.logging as logging_module
from sinklog import Logger, LoggerConfig, LogLevel


@pytest.fixture
def console_stream() -> io.StringIO:
    """Stream em memória usado como console."""
    return io.StringIO()


@pytest.fixture
def make_logger(console_stream, tmp_path):
    """
    Fábrica de loggers configurados com console em memória e arquivo em tmp_path.
    
    Todos os loggers criados são fechados ao final do teste.
    """
    created = []

    def factory(**overrides) -> Logger:
        options = {
            "console_threshold": LogLevel.VERBOSE,
            "file_threshold": LogLevel.VERBOSE,
            "file_logging_enabled": True,
            "colors_enabled": False,
            "include_timestamp": False,
            "use_icons_in_file": False,
            "log_dir": tmp_path,
        }
        options.update(overrides)
        logger = Logger(console_stream=console_stream).configure(LoggerConfig(**options))
        created.append(logger)
        return logger

    yield factory

    for logger in created:
        logger.close()


@pytest.fixture
def fresh_global_logger(monkeypatch):
    """Garante um singleton limpo e fechado para cada teste."""
    monkeypatch.setattr(logging_module, "_logger_instance", None)
    yield
    logging_module.deinit()
