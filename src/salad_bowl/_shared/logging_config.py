# Area: Shared
"""
salad_bowl._shared.logging_config — Structured logging setup
============================================================

Configures dual logging: terminal (colored) + file (JSON lines).
Provides a helper for logging surfaced game errors.
"""

from __future__ import annotations
import logging
import json
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..errors import SaladBowlError

# Package logger
logger = logging.getLogger("salad_bowl")


class TerminalFormatter(logging.Formatter):
    """Colored formatter for terminal output."""

    COLORS = {
        "DEBUG": "\033[36m",     # Cyan
        "INFO": "\033[32m",      # Green
        "WARNING": "\033[33m",   # Yellow
        "ERROR": "\033[31m",     # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.RESET)
        levelname = record.levelname
        record.levelname = f"{color}{levelname}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


class JSONFormatter(logging.Formatter):
    """JSON formatter for file output."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


def setup_logging(
    log_file_path: str = "salad_bowl.log",
    level: int = logging.INFO,
    terminal: bool = True,
) -> None:
    """
    Configure logging for the package.

    Parameters
    ----------
    log_file_path : str
        Path to the log file. Defaults to 'salad_bowl.log' in current dir.
    level : int
        Logging level. Defaults to INFO.
    terminal : bool
        Whether to also log to stderr. The terminal game turns this off
        so log lines don't interleave with prompts.
    """
    pkg_logger = logging.getLogger("salad_bowl")
    pkg_logger.setLevel(level)

    pkg_logger.handlers.clear()

    if terminal:
        terminal_handler = logging.StreamHandler(sys.stderr)
        terminal_handler.setLevel(level)
        terminal_handler.setFormatter(TerminalFormatter(
            fmt="%(asctime)s │ %(levelname)s │ %(name)s │ %(message)s",
            datefmt="%H:%M:%S",
        ))
        pkg_logger.addHandler(terminal_handler)

    try:
        log_path = Path(log_file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(JSONFormatter())
        pkg_logger.addHandler(file_handler)
    except OSError as e:
        pkg_logger.warning(f"Could not create log file: {e}")

    # Prevent propagation to root logger
    pkg_logger.propagate = False


def log_game_error(error: "SaladBowlError") -> None:
    """
    Log a surfaced game error in the structured format.

    Parameters
    ----------
    error : SaladBowlError
        The error carried by a failed Outcome.
    """
    logger.warning(
        "Game error: %s (%s)%s",
        error.__class__.__name__,
        error.code,
        error.format_error_log(),
        extra={"error_code": error.code, "error_type": error.__class__.__name__},
    )
