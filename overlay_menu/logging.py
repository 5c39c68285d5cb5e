from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from loguru import Logger

from loguru import logger

# Note: TRACE level already exists in loguru at level 5 (below DEBUG which is 10)


def _should_log_key(record) -> bool:
    """Filter key press logs - only show in TRACE mode."""
    message = record["message"].lower()
    tags = record["extra"].get("tags", [])

    if "key" in tags or "input" in tags:
        if "key" in message or "press" in message:
            return record["level"].no <= logger.level("TRACE").no

    return True


def _combined_filter(record) -> bool:
    """Combined filter for all log suppression rules."""
    return _should_log_key(record)


def setup_logging(
    *,
    debug: bool = False,
    trace: bool = False,
    log_dir: Path | None = None,
) -> Logger:
    """
    Setup logging for a host application embedding the menu.

    Logging Tiers:
    - ERROR/WARNING: Invalid construction or broken menu invariants
    - INFO: Menu shown/hidden
    - DEBUG: Level changes, value changes
    - TRACE: Every key press dispatched to the menu

    Log Files (only when log_dir is given):
    - menu.log: INFO+ events
    - debug.log: DEBUG+ events when --debug is enabled

    Args:
        debug: Enable DEBUG level logging
        trace: Enable TRACE level logging (very verbose)
        log_dir: Directory for file sinks; console only when omitted
    """
    logger.remove()
    logger.configure(extra={"tags": [], "source": "APP"})

    if trace:
        console_level = "TRACE"
    elif debug:
        console_level = "DEBUG"
    else:
        console_level = "INFO"

    # SINK 1: Console (stderr) - filtered
    logger.add(
        sys.stderr,
        level=console_level,
        backtrace=False,
        diagnose=False,
        filter=_combined_filter,
        colorize=True,
        format=(
            "<green>{time:HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{extra[source]: <10}</cyan> | "
            "{message}"
        ),
    )

    if log_dir is None:
        return logger

    log_dir.mkdir(parents=True, exist_ok=True)

    # SINK 2: Menu Log - Important events only (INFO+)
    logger.add(
        log_dir / "menu.log",
        level="INFO",
        rotation="5 MB",
        retention="7 days",
        backtrace=False,
        diagnose=False,
        format=(
            "{time:YYYY-MM-DD HH:mm:ss.SSS} | "
            "{level: <8} | "
            "{extra[source]: <10} | "
            "{message}"
        ),
    )

    # SINK 3: Debug Log - Detailed diagnostics (DEBUG+ when debug=True)
    if debug or trace:
        logger.add(
            log_dir / "debug.log",
            level="DEBUG",
            rotation="10 MB",
            retention="3 days",
            backtrace=True,
            diagnose=True,
            format=(
                "{time:YYYY-MM-DD HH:mm:ss.SSS} | "
                "{level: <8} | "
                "{extra[source]: <10} | "
                "{extra[tags]} | "
                "{message}"
            ),
        )

    return logger


def get_logger(
    *,
    tags: Iterable[str] | None = None,
    source: str | None = None,
) -> Logger:
    """
    Get a logger with bound context.

    Args:
        tags: Tags for filtering (e.g., ["menu", "ui"])
        source: Source component (e.g., "menu", "input")

    Returns:
        Logger with bound context
    """
    extras: dict[str, object] = {}
    if tags is not None:
        extras["tags"] = list(tags)
    if source is not None:
        extras["source"] = source
    return logger.bind(**extras)


class LoggerFactory:
    """
    Factory for creating domain-specific loggers with automatic context.
    """

    @staticmethod
    def for_menu() -> Logger:
        """Logger for menu navigation and item changes."""
        return logger.bind(source="menu", tags=["ui", "menu"])

    @staticmethod
    def for_input() -> Logger:
        """Logger for raw key input and key bindings."""
        return logger.bind(source="input", tags=["input", "key"])
