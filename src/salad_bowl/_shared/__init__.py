# Area: Shared
"""Shared infrastructure: logging configuration."""

from .logging_config import setup_logging, log_game_error, JSONFormatter, TerminalFormatter

__all__ = [
    "setup_logging",
    "log_game_error",
    "JSONFormatter",
    "TerminalFormatter",
]
