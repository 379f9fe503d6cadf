"""
Montagem das linhas de log.

Um único despacho gera duas variantes independentes: a linha de console
(``rich.text.Text``, com a cor aplicada somente ao rótulo do nível) e a
linha de arquivo (texto puro, com rótulo ou ícone).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Optional

from rich.text import Text

from sinklog.config.constants import (
    DEFAULTS,
    FIELD_SEPARATOR,
    MODULE_TAG_DELIMITERS,
    MODULE_TAG_WIDTH,
)
from sinklog.core.levels import LogLevel, attributes_of
from sinklog.core.values import LogValue, format_value


@dataclass(frozen=True)
class ComposedRecord:
    """Par de linhas (sem terminador) prontas para cada destino."""

    console: Text
    file: str

    @property
    def console_line(self) -> str:
        return self.console.plain


def format_module_tag(tag: str) -> str:
    """Trunca/preenche a tag em exatamente ``MODULE_TAG_WIDTH`` caracteres e a delimita."""
    opening, closing = MODULE_TAG_DELIMITERS
    return f"{opening}{str(tag)[:MODULE_TAG_WIDTH].rjust(MODULE_TAG_WIDTH)}{closing}"


def format_timestamp(instant: datetime) -> str:
    return instant.strftime(DEFAULTS["timestamp_format"])


def compose(
    level: LogLevel,
    values: Iterable[LogValue],
    module_tag: Optional[str] = None,
    timestamp: Optional[datetime] = None,
    *,
    use_colors: bool = True,
    use_icons_in_file: bool = False,
) -> ComposedRecord:
    """
    Monta as linhas de console e arquivo de um registro.
    
    Ordem fixa dos campos: ``[timestamp] [tag] <nível> <v1> ... <vN>``,
    separados por um espaço.
    
    Args:
        level: Nível do registro
        values: Valores já etiquetados
        module_tag: Tag opcional do módulo emissor
        timestamp: Instante do despacho (omitido quando None)
        use_colors: Se o rótulo do console recebe a cor do nível
        use_icons_in_file: Se o arquivo usa o ícone no lugar do rótulo
        
    Returns:
        ComposedRecord: Linhas de console e arquivo
    """
    attrs = attributes_of(level)

    prefix = []
    if timestamp is not None:
        prefix.append(format_timestamp(timestamp))
    if module_tag is not None:
        prefix.append(format_module_tag(module_tag))

    suffix = [format_value(value) for value in values]

    console = Text()
    for part in prefix:
        console.append(part)
        console.append(FIELD_SEPARATOR)
    console.append(attrs.label, style=attrs.color if use_colors else None)
    for part in suffix:
        console.append(FIELD_SEPARATOR)
        console.append(part)

    level_repr = attrs.icon if use_icons_in_file else attrs.label
    file_line = FIELD_SEPARATOR.join([*prefix, level_repr, *suffix])

    return ComposedRecord(console=console, file=file_line)


__all__ = ["ComposedRecord", "compose", "format_module_tag", "format_timestamp"]
