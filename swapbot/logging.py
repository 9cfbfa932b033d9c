"""
Logging configuration for the swap bot.
"""
from __future__ import annotations

import logging
import os
import sys
import tempfile
from pathlib import Path
from typing import Any, Callable

from loguru import logger

# Lazy import settings to avoid circular dependency
_settings = None

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"
SWAP_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {message} | {extra}"


def _get_settings():
    """Get settings with lazy loading."""
    global _settings
    if _settings is None:
        from swapbot.settings.config import settings as app_settings
        _settings = app_settings
    return _settings


def _resolve_log_path(default_path: Path) -> Path:
    try:
        default_path.parent.mkdir(parents=True, exist_ok=True)
        return default_path
    except OSError:
        fallback_dir = Path.cwd() / "logs"
        fallback_dir.mkdir(parents=True, exist_ok=True)
        return fallback_dir / default_path.name


def _add_file_sink(path: Path, level: str, fmt: str, filter_fn: Callable[[Any], bool] | None = None, **kwargs) -> Path:
    """Add a file sink, falling back to the temp directory when the path is not writable."""
    try:
        logger.add(str(path), format=fmt, level=level, filter=filter_fn, **kwargs)
        return path
    except PermissionError:
        tmp_dir = Path(tempfile.gettempdir()) / "swapbot_logs"
        tmp_dir.mkdir(parents=True, exist_ok=True)
        fallback = tmp_dir / path.name
        logger.add(str(fallback), format=fmt, level=level, filter=filter_fn, **kwargs)
        return fallback


def setup_logging():
    """Configure loguru logger with appropriate settings."""
    settings = _get_settings()

    logger.remove()
    logger.configure(extra={"environment": settings.environment, "chain": settings.chain})

    log_level = (settings.log_level or "INFO").upper()
    # Allow LOG_LEVEL env override (e.g. debug/trace) used in tests
    env_level = os.getenv("LOG_LEVEL", "").upper()
    if env_level:
        log_level = env_level

    logger.add(
        sys.stdout,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=log_level,
        colorize=True,
    )

    log_path = _resolve_log_path(Path(settings.log_file))
    log_path = _add_file_sink(log_path, "DEBUG", FILE_FORMAT, rotation="100 MB", retention="30 days", compression="zip")

    _add_file_sink(
        _resolve_log_path(log_path.parent / "errors.log"),
        "ERROR",
        FILE_FORMAT,
        rotation="50 MB",
        retention="90 days",
        compression="zip",
    )

    # One line per swap state transition / broadcast
    _add_file_sink(
        _resolve_log_path(log_path.parent / "swaps.log"),
        "INFO",
        SWAP_FORMAT,
        filter_fn=lambda record: record["extra"].get("SWAP_EVENT"),
        rotation="50 MB",
        retention="365 days",
        compression="zip",
    )

    logger.info(f"Logging initialized - Level: {log_level}, File: {log_path}")

    class LoguruHandler(logging.Handler):
        def emit(self, record: logging.LogRecord) -> None:
            try:
                level = logger.level(record.levelname).name
            except ValueError:
                level = record.levelno
            logger.opt(depth=6, exception=record.exc_info).log(level, record.getMessage())

    root_logger = logging.getLogger()
    root_logger.handlers = []
    root_logger.setLevel(logging.INFO)
    root_logger.addHandler(LoguruHandler())

    return logger


_log = None


def _get_log():
    """Get or initialize the logger."""
    global _log
    if _log is None:
        try:
            _log = setup_logging()
        except OSError:
            # File sinks unavailable: keep loguru's default stderr sink
            _log = logger
    return _log


log = _get_log()


def swap_event(event: str, **fields: Any) -> None:
    """Record a swap lifecycle event on the dedicated swaps.log sink."""
    log.bind(SWAP_EVENT=True, **fields).info(event)
