"""
Logger principal do sinklog.

Guarda a configuração, os handlers (console e arquivo) e um único lock que
cobre inicialização, encerramento e toda a sequência
decidir-formatar-escrever de cada despacho.
"""

from __future__ import annotations

import atexit
import dataclasses
import threading
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Any, Iterable, Iterator, Optional, TextIO

from sinklog.config.models import LoggerConfig
from sinklog.core.exceptions import ConfigurationError, SinkLogException, WriteFailureError
from sinklog.core.levels import LogLevel
from sinklog.core.values import as_log_value
from .composer import compose
from .handlers import ConsoleHandler, FileHandler, report_error


class Logger:
    """
    Implementação principal do sistema de logging.
    
    Estados: não inicializado (descarta registros) e inicializado.
    ``configure`` leva ao estado inicializado, ``close`` volta ao inicial.
    """
    
    def __init__(self, console_stream: Optional[TextIO] = None):
        """
        Inicializa o logger (ainda sem configuração).
        
        Args:
            console_stream: Stream do console (padrão: sys.stdout)
        """
        self._console_stream = console_stream
        self._lock = threading.RLock()
        self._config: Optional[LoggerConfig] = None
        self._console: Optional[ConsoleHandler] = None
        self._file: Optional[FileHandler] = None
        self._atexit_registered = False
        self.last_error: Optional[SinkLogException] = None
    
    # ------------------------------------------------------------------
    # Estado
    # ------------------------------------------------------------------
    
    @property
    def is_initialized(self) -> bool:
        return self._config is not None
    
    @property
    def config(self) -> Optional[LoggerConfig]:
        """Configuração efetiva (None quando não inicializado)."""
        return self._config
    
    @property
    def log_file_path(self) -> Optional[Path]:
        """Caminho do arquivo de log atual, quando houver."""
        with self._lock:
            return self._file.path if self._file else None
    
    def should_emit_console(self, level: LogLevel) -> bool:
        with self._lock:
            return self._console is not None and self._console.should_handle(level)
    
    def should_emit_file(self, level: LogLevel) -> bool:
        with self._lock:
            return self._file is not None and self._file.should_handle(level)
    
    # ------------------------------------------------------------------
    # Ciclo de vida
    # ------------------------------------------------------------------
    
    def configure(self, config: LoggerConfig) -> Logger:
        """
        Aplica uma nova configuração, substituindo a anterior por inteiro.
        
        Um arquivo aberto por uma configuração anterior é fechado antes de
        abrir o novo. Se o arquivo não puder ser criado, o logger segue
        apenas com console e o erro fica em ``last_error``.
        
        Args:
            config: Instância pronta de :class:`LoggerConfig`
            
        Returns:
            Logger: A própria instância, para encadeamento
        """
        with self._lock:
            self._close_file()
            self.last_error = None
            
            file_handler = None
            if config.file_logging_enabled:
                try:
                    file_handler = FileHandler(
                        config.log_dir,
                        threshold=config.file_threshold,
                        prefix=config.file_prefix,
                        encoding=config.file_encoding,
                    )
                except (OSError, LookupError) as exc:
                    error = ConfigurationError(
                        "Não foi possível criar o arquivo de log; usando apenas console",
                        details={"log_dir": str(config.log_dir)},
                        cause=exc,
                    )
                    self.last_error = error
                    report_error("Falha na inicialização", error)
                    config = dataclasses.replace(config, file_logging_enabled=False)
            
            self._file = file_handler
            self._console = ConsoleHandler(
                stream=self._console_stream,
                threshold=config.console_threshold,
                use_colors=config.colors_enabled,
            )
            self._config = config
            
            if not self._atexit_registered:
                atexit.register(self.close)
                self._atexit_registered = True
        return self
    
    def close(self) -> None:
        """Fecha o arquivo de log (quando houver) e volta ao estado não inicializado."""
        with self._lock:
            if self._atexit_registered:
                atexit.unregister(self.close)
                self._atexit_registered = False
            self._close_file()
            console, self._console = self._console, None
            self._config = None
            if console is not None:
                try:
                    console.flush()
                except Exception as exc:
                    report_error("Falha ao descarregar o console", exc)
    
    def _close_file(self) -> None:
        if self._file is None:
            return
        handler, self._file = self._file, None
        try:
            handler.close()
        except Exception as exc:
            report_error("Falha ao fechar arquivo de log", exc)
    
    def __enter__(self) -> Logger:
        return self
    
    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
    
    # ------------------------------------------------------------------
    # Despacho
    # ------------------------------------------------------------------
    
    def log(self, level: LogLevel | str, values: Iterable[Any], module_tag: Optional[str] = None) -> None:
        """
        Compõe e emite um registro para cada destino habilitado.
        
        Nunca levanta exceções por falha de logging; antes de ``configure``
        (ou depois de ``close``) o registro é descartado silenciosamente.
        Nível desconhecido ou valor que não pode ser formatado descartam
        apenas o registro atual, com aviso em stderr.
        
        Args:
            level: Nível do registro (``LogLevel`` ou nome, ex: ``"INFO"``)
            values: Sequência de ``LogValue`` (valores comuns são convertidos)
            module_tag: Tag opcional do módulo emissor
        """
        if self._config is None:
            return
        
        try:
            level = LogLevel.parse(level)
            wrapped = [as_log_value(value) for value in values]
        except Exception as exc:
            report_error("Registro descartado", exc)
            return
        
        with self._lock:
            config = self._config
            if config is None:
                return
            
            console = self._console if self._console and self._console.should_handle(level) else None
            file = self._file if self._file and self._file.should_handle(level) else None
            if console is None and file is None:
                return
            
            try:
                record = compose(
                    level,
                    wrapped,
                    module_tag,
                    datetime.now() if config.include_timestamp else None,
                    use_colors=config.colors_enabled,
                    use_icons_in_file=config.use_icons_in_file,
                )
            except Exception as exc:
                report_error("Registro descartado", exc)
                return
            
            if console is not None:
                try:
                    console.emit(level, record)
                except Exception as exc:
                    report_error("Falha ao escrever no console", exc)
            
            if file is not None:
                try:
                    file.emit(level, record)
                except Exception as exc:
                    self._disable_file(exc)
    
    def _disable_file(self, exc: Exception) -> None:
        error = WriteFailureError(
            "Falha ao escrever no arquivo de log; destino de arquivo desativado",
            details={"path": str(self._file.path) if self._file else None},
            cause=exc,
        )
        self.last_error = error
        report_error("Falha de escrita", error)
        self._close_file()
        if self._config is not None:
            self._config = dataclasses.replace(self._config, file_logging_enabled=False)
    
    def verbose(self, *values: Any, module_tag: Optional[str] = None) -> None:
        """Emite log nível VERBOSE."""
        self.log(LogLevel.VERBOSE, values, module_tag)
    
    def debug(self, *values: Any, module_tag: Optional[str] = None) -> None:
        """Emite log nível DEBUG."""
        self.log(LogLevel.DEBUG, values, module_tag)
    
    def info(self, *values: Any, module_tag: Optional[str] = None) -> None:
        """Emite log nível INFO."""
        self.log(LogLevel.INFO, values, module_tag)
    
    def warning(self, *values: Any, module_tag: Optional[str] = None) -> None:
        """Emite log nível WARNING."""
        self.log(LogLevel.WARNING, values, module_tag)
    
    def error(self, *values: Any, module_tag: Optional[str] = None) -> None:
        """Emite log nível ERROR."""
        self.log(LogLevel.ERROR, values, module_tag)
    
    def fatal(self, *values: Any, module_tag: Optional[str] = None) -> None:
        """Emite log nível FATAL."""
        self.log(LogLevel.FATAL, values, module_tag)
    
    def fixed(self, *values: Any, module_tag: Optional[str] = None) -> None:
        """Emite log nível FIXED (sempre exibido)."""
        self.log(LogLevel.FIXED, values, module_tag)
    
    def for_module(self, module_tag: str) -> ModuleLogger:
        """
        Retorna um logger derivado com a tag de módulo fixa.
        
        Args:
            module_tag: Tag do módulo (truncada a 8 caracteres na saída)
            
        Returns:
            ModuleLogger: Logger com a tag aplicada em todas as mensagens
        """
        return ModuleLogger(self, module_tag)


class ModuleLogger:
    """Wrapper leve que anexa uma tag de módulo fixa a cada registro."""
    
    def __init__(self, base: Logger, module_tag: str) -> None:
        self._base = base
        self.module_tag = module_tag
    
    def log(self, level: LogLevel | str, values: Iterable[Any]) -> None:
        self._base.log(level, values, self.module_tag)
    
    def verbose(self, *values: Any) -> None:
        self._base.log(LogLevel.VERBOSE, values, self.module_tag)
    
    def debug(self, *values: Any) -> None:
        self._base.log(LogLevel.DEBUG, values, self.module_tag)
    
    def info(self, *values: Any) -> None:
        self._base.log(LogLevel.INFO, values, self.module_tag)
    
    def warning(self, *values: Any) -> None:
        self._base.log(LogLevel.WARNING, values, self.module_tag)
    
    def error(self, *values: Any) -> None:
        self._base.log(LogLevel.ERROR, values, self.module_tag)
    
    def fatal(self, *values: Any) -> None:
        self._base.log(LogLevel.FATAL, values, self.module_tag)
    
    def fixed(self, *values: Any) -> None:
        self._base.log(LogLevel.FIXED, values, self.module_tag)
    
    @contextmanager
    def step(self, title: str) -> Iterator[None]:
        """Registra início, conclusão e falha de um bloco."""
        self.info("Iniciando:", title)
        try:
            yield
        except Exception:
            self.error("Falha:", title)
            raise
        else:
            self.info("Concluído:", title)


__all__ = ["Logger", "ModuleLogger"]
