"""Ponto de entrada da Interface de Linha de Comando (CLI) do sinklog."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table
from typing_extensions import Annotated

from sinklog.core.levels import LogLevel, attributes_of
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
from sinklog.infrastructure.logging import deinit, init, log

# --- Configuração da Aplicação CLI ---
app = typer.Typer(
    name="sinklog",
    help="Demonstração do logger de processo sinklog.",
    add_completion=False,
    rich_markup_mode="rich",
)

# --- Instâncias Globais ---
console = Console()


@app.command(help="[bold green]Executa a demonstração com todos os tipos de valor.[/bold green]")
def demo(
    console_threshold: Annotated[
        str, typer.Option("--console-level", "-c", help="Nível mínimo no console.")
    ] = "VERBOSE",
    file_threshold: Annotated[
        str, typer.Option("--file-level", "-f", help="Nível mínimo no arquivo.")
    ] = "VERBOSE",
    no_file: Annotated[bool, typer.Option("--no-file", help="Não cria arquivo de log.")] = False,
    no_colors: Annotated[bool, typer.Option("--no-colors", help="Desativa cores no console.")] = False,
    no_icons: Annotated[bool, typer.Option("--no-icons", help="Usa rótulos no arquivo.")] = False,
    log_dir: Annotated[Path, typer.Option("--log-dir", help="Diretório do arquivo de log.")] = Path("."),
) -> None:
    logger = init(
        LogLevel.parse(console_threshold),
        LogLevel.parse(file_threshold),
        enable_file=not no_file,
        enable_colors=not no_colors,
        include_timestamp=True,
        use_icons_in_file=not no_icons,
        log_dir=log_dir,
    )
    if logger.last_error is not None:
        console.print(f"[yellow]{logger.last_error}[/yellow]")

    try:
        log(LogLevel.FIXED, [log_str("Starting application"), log_i32(123), log_bool(True)])

        value = 999
        log(LogLevel.DEBUG, [log_str("Value address:"), log_ptr(value)])

        log(LogLevel.VERBOSE, [
            log_hex8(0xAB), log_hex16(4444), log_hex32(0xDEADBEEF), log_hex64(0xCAFEBABEDEADC0DE),
        ])

        log(LogLevel.INFO, [
            log_str("Pi approximation:"), log_f32(3.1415),
            log_str("..and e approximation:"), log_f64(2.718281828),
        ])

        log(LogLevel.DEBUG, [
            log_i8(-8), log_i16(-16), log_i32(-32), log_i64(-64),
            log_u8(8), log_u16(16), log_u32(32), log_u64(64),
        ], module_tag="integers")

        log(LogLevel.INFO, [log_str("Char:"), log_char("X"), log_char("✔")])

        log(LogLevel.ERROR, [log_str("This is an error caused by the value"), log_f64(3.1415926535)])
        log(LogLevel.FATAL, [log_str("and this is a fatal one.."), log_f64(3.1415926535)])
        log(LogLevel.FIXED, [log_str("Ending application...")])

        path = logger.log_file_path
        if path is not None:
            console.print(f"Log file written to: [bold]{path}[/bold]")
    finally:
        deinit()

    console.print("Logger test complete.")


@app.command(help="Lista os níveis com rank, rótulo, cor e ícone.")
def levels() -> None:
    table = Table(title="Níveis de log")
    table.add_column("Nível")
    table.add_column("Rank", justify="right")
    table.add_column("Rótulo")
    table.add_column("Cor")
    table.add_column("Ícone")

    for level in LogLevel:
        attrs = attributes_of(level)
        table.add_row(level.value, str(attrs.rank), f"[{attrs.color}]{attrs.label}[/]", attrs.color, attrs.icon)

    console.print(table)


if __name__ == "__main__":
    app()
