"""Infraestrutura do sinklog (destinos e logger)."""
