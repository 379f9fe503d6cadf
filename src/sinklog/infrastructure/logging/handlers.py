"""
Handlers para processamento e destino de logs.

Define os destinos (sinks) suportados: console via ``rich`` e arquivo de
texto com flush a cada linha. A sincronização fica a cargo do ``Logger``,
que chama os handlers sempre dentro do seu lock.
"""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import IO, Optional, TextIO

from rich.console import Console

from sinklog.config.constants import DEFAULTS, FLUSH_LEVELS, LINE_TERMINATOR
from sinklog.core.levels import LogLevel, should_emit
from .composer import ComposedRecord


class LogHandler(ABC):
    """
    Interface base para handlers de log.
    
    Define o contrato para envio de registros já compostos
    para diferentes destinos, cada um com seu próprio limiar.
    """
    
    def __init__(self, threshold: LogLevel = LogLevel.VERBOSE):
        """
        Inicializa o handler.
        
        Args:
            threshold: Nível mínimo para processar
        """
        self.threshold = threshold
    
    def should_handle(self, level: LogLevel) -> bool:
        """
        Verifica se deve processar o nível.
        
        Args:
            level: Nível do log
            
        Returns:
            bool: True se deve processar
        """
        return should_emit(level, self.threshold)
    
    @abstractmethod
    def emit(self, level: LogLevel, record: ComposedRecord) -> None:
        """
        Emite o registro de log.
        
        Args:
            level: Nível do registro
            record: Registro a ser emitido
        """
        pass
    
    def flush(self) -> None:
        """Força escrita de buffers pendentes."""
        pass
    
    def close(self) -> None:
        """Fecha o handler e libera recursos."""
        self.flush()


class ConsoleHandler(LogHandler):
    """
    Handler para saída no console.
    
    Envia a variante de console do registro para stdout usando ``rich``.
    """
    
    def __init__(self, stream: Optional[TextIO] = None, threshold: LogLevel = LogLevel.VERBOSE,
                 use_colors: bool = True):
        """
        Inicializa o handler.
        
        Args:
            stream: Stream customizado (padrão: sys.stdout no momento da escrita)
            threshold: Nível mínimo
            use_colors: Se deve colorir o rótulo do nível. As cores saem sempre
                como ANSI padrão de 16 cores, sem depender de TTY ou de
                variáveis como NO_COLOR, FORCE_COLOR e TERM
        """
        super().__init__(threshold)
        self.stream = stream
        self.use_colors = use_colors
        self.console = Console(
            file=stream,
            highlight=False,
            soft_wrap=True,
            emoji=False,
            markup=False,
            no_color=not use_colors,
            force_terminal=use_colors,
            color_system="standard" if use_colors else None,
            legacy_windows=False,
        )
    
    def emit(self, level: LogLevel, record: ComposedRecord) -> None:
        """Emite registro para console."""
        self.console.print(record.console)
        if level.value in FLUSH_LEVELS:
            self.flush()
    
    def flush(self) -> None:
        """Força flush do stream."""
        stream = self.console.file
        if hasattr(stream, 'flush'):
            stream.flush()


def open_unique_log_file(log_dir: Path, prefix: str, instant: datetime,
                         encoding: str = DEFAULTS["file_encoding"]) -> tuple[Path, IO[str]]:
    """
    Cria um arquivo de log novo cujo nome embute o instante da criação.
    
    Usa criação exclusiva; em caso de colisão acrescenta ``_1``, ``_2``...
    
    Args:
        log_dir: Diretório de destino (criado se necessário)
        prefix: Prefixo do nome do arquivo
        instant: Instante da inicialização
        encoding: Encoding do arquivo
        
    Returns:
        tuple: Caminho criado e arquivo aberto para escrita
    """
    log_dir.mkdir(parents=True, exist_ok=True)
    stem = f"{prefix}_{instant.strftime(DEFAULTS['file_timestamp_format'])}"
    suffix = DEFAULTS["file_suffix"]

    attempt = 0
    while True:
        name = f"{stem}{suffix}" if attempt == 0 else f"{stem}_{attempt}{suffix}"
        path = log_dir / name
        try:
            return path, open(path, "x", encoding=encoding, errors="backslashreplace")
        except FileExistsError:
            attempt += 1


class FileHandler(LogHandler):
    """
    Handler para saída em arquivo.
    
    Anexa a variante de arquivo do registro e faz flush após cada linha.
    """
    
    def __init__(self, log_dir: str | Path, threshold: LogLevel = LogLevel.VERBOSE,
                 prefix: str = DEFAULTS["file_prefix"], encoding: str = DEFAULTS["file_encoding"],
                 instant: Optional[datetime] = None):
        """
        Inicializa o handler e cria o arquivo.
        
        Args:
            log_dir: Diretório do arquivo
            threshold: Nível mínimo
            prefix: Prefixo do nome do arquivo
            encoding: Encoding do arquivo
            instant: Instante usado no nome (padrão: agora)
            
        Raises:
            OSError: Se o arquivo não puder ser criado
        """
        super().__init__(threshold)
        self.path, self._file = open_unique_log_file(
            Path(log_dir), prefix, instant or datetime.now(), encoding
        )
    
    @property
    def closed(self) -> bool:
        return self._file is None
    
    def emit(self, level: LogLevel, record: ComposedRecord) -> None:
        """Emite registro para arquivo."""
        if self._file is None:
            raise ValueError(f"Arquivo de log já fechado: {self.path}")
        self._file.write(record.file + LINE_TERMINATOR)
        self._file.flush()
    
    def flush(self) -> None:
        """Força flush do arquivo."""
        if self._file:
            self._file.flush()
    
    def close(self) -> None:
        """Fecha o arquivo."""
        if self._file:
            try:
                self._file.flush()
            finally:
                self._file.close()
                self._file = None


def report_error(message: str, error: BaseException) -> None:
    """Canal lateral para falhas do próprio logger."""
    try:
        print(f"[sinklog] {message}: {error}", file=sys.stderr)
    except Exception:
        pass


__all__ = ["LogHandler", "ConsoleHandler", "FileHandler", "open_unique_log_file", "report_error"]
