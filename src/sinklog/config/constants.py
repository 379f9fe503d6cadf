"""
Constantes globais do sinklog.

Este módulo centraliza todas as constantes 'hardcoded' do sistema,
facilitando a manutenção e a aplicação do princípio DRY.
"""

from typing import Dict, Tuple

# ============================================================================
# Níveis de Log
# ============================================================================

# nome -> (rank, rótulo alinhado, cor rich, ícone para arquivo)
# As cores correspondem aos códigos ANSI "bright" 90, 96, 92, 93, 91, 95, 97.
LEVEL_TABLE: Dict[str, Tuple[int, str, str, str]] = {
    "VERBOSE": (0, "VERBOSE", "bright_black", "💬"),
    "DEBUG": (1, "  DEBUG", "bright_cyan", "🐞"),
    "INFO": (2, "   INFO", "bright_green", "ℹ️"),
    "WARNING": (3, "WARNING", "bright_yellow", "⚠️"),
    "ERROR": (4, "  ERROR", "bright_red", "❌"),
    "FATAL": (5, "  FATAL", "bright_magenta", "💀"),
    "FIXED": (6, "  FIXED", "bright_white", "✅"),
}

# Níveis que sempre forçam flush imediato no console
FLUSH_LEVELS = frozenset({"ERROR", "FATAL", "FIXED"})

# ============================================================================
# Formatação de Registros
# ============================================================================

MODULE_TAG_WIDTH = 8
MODULE_TAG_DELIMITERS = ("[", "]")
FIELD_SEPARATOR = " "
LINE_TERMINATOR = "\n"

FLOAT_PRECISION = 6

# Largura em dígitos hex para cada tamanho de inteiro
HEX_WIDTHS: Dict[int, int] = {8: 2, 16: 4, 32: 8, 64: 16}

# ============================================================================
# Padrões
# ============================================================================

DEFAULTS = {
    "log_dir": ".",
    "file_prefix": "log",
    "file_encoding": "utf-8",
    "timestamp_format": "%Y-%m-%d %H:%M:%S",
    "file_timestamp_format": "%Y%m%d_%H%M%S",
    "file_suffix": ".txt",
}
