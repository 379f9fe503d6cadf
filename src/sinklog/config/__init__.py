"""
Módulo de Configuração do sinklog.

Este pacote centraliza constantes, validadores e o modelo ``LoggerConfig``.
Importe o modelo de ``sinklog.config.models`` (ou direto de ``sinklog``).
"""
