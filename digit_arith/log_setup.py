"""
Logging setup shared by the self-test harness and any embedding emulator.

Library modules only call logging.getLogger(__name__); handlers are
attached here, once, by whoever owns the process.
"""

from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

from .config import LOG_LEVEL_ENV, LOG_FILE_ENV, DEFAULT_CONSOLE_LEVEL

__all__ = ['setup_logging', 'level_from_env']


def level_from_env(default: str = DEFAULT_CONSOLE_LEVEL) -> int:
    """Console level from $DIGIT_ARITH_LOG_LEVEL (name or number)."""
    raw = os.environ.get(LOG_LEVEL_ENV, default).strip()
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    if isinstance(level, int):
        return level
    return logging.getLevelName(default)


def setup_logging(
    name: str = "digit_arith",
    console_level: Union[int, str, None] = None,
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """
    Configure and return a logger.

    Console output goes through rich to stderr so it never mixes with the
    harness table on stdout. If `log_file` (or $DIGIT_ARITH_LOG_FILE) is
    set, everything from DEBUG up is also written there.

    Calling it again for the same name returns the existing logger
    without adding handlers.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    logger.setLevel(logging.DEBUG)

    if console_level is None:
        console_level = level_from_env()
    elif isinstance(console_level, str):
        console_level = logging.getLevelName(console_level.upper())

    # ── Console handler: WARNING+ unless overridden ──
    ch = RichHandler(
        console=Console(stderr=True),
        level=console_level,
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    ch.setLevel(console_level)
    logger.addHandler(ch)

    # ── File handler: captures everything ──
    if log_file is None and os.environ.get(LOG_FILE_ENV):
        log_file = Path(os.environ[LOG_FILE_ENV])
    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_path), encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(logging.Formatter(
            "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        logger.addHandler(fh)
        logger.debug("Log file: %s", log_path)

    return logger
