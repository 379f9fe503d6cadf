"""Testes unitarios para o modelo de configuração."""

from __future__ import annotations

import unittest
from pathlib import Path

from sinklog import LoggerConfig, LogLevel, ValidationError


class TestLoggerConfig(unittest.TestCase):
    """Validação em ``__post_init__`` e construção a partir de dicionários."""

    def test_padroes(self) -> None:
        config = LoggerConfig()
        self.assertIs(config.console_threshold, LogLevel.VERBOSE)
        self.assertFalse(config.file_logging_enabled)
        self.assertTrue(config.colors_enabled)
        self.assertEqual(config.log_dir, Path("."))

    def test_limiares_por_nome(self) -> None:
        config = LoggerConfig(console_threshold="error", file_threshold="Debug")
        self.assertIs(config.console_threshold, LogLevel.ERROR)
        self.assertIs(config.file_threshold, LogLevel.DEBUG)

    def test_nivel_invalido(self) -> None:
        with self.assertRaises(ValidationError):
            LoggerConfig(console_threshold="trace")

    def test_flag_nao_booleana(self) -> None:
        with self.assertRaises(ValidationError) as ctx:
            LoggerConfig(colors_enabled="yes")
        self.assertEqual(ctx.exception.details["got"], "str")

    def test_prefixo_vazio(self) -> None:
        with self.assertRaises(ValidationError):
            LoggerConfig(file_prefix="")

    def test_from_dict_ignora_chaves_desconhecidas(self) -> None:
        config = LoggerConfig.from_dict({
            "console_threshold": "WARNING",
            "log_dir": "logs",
            "rotacao_arquivo": "100 MB",
        })
        self.assertIs(config.console_threshold, LogLevel.WARNING)
        self.assertEqual(config.log_dir, Path("logs"))

    def test_to_dict_ida_e_volta(self) -> None:
        config = LoggerConfig(console_threshold=LogLevel.INFO, use_icons_in_file=True)
        self.assertEqual(LoggerConfig.from_dict(config.to_dict()), config)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
