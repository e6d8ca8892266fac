"""Structured logging setup for Vault Index.

Events are written as JSON lines to ~/.cache/vaultindex/logs/vaultindex.log.
Each generation run logs one event per root folder (index_note_created,
index_written, root_folder_not_found, index_write_failed) between
index_generation_started and index_generation_completed, so a run can be
followed with:

    tail -f ~/.cache/vaultindex/logs/vaultindex.log | jq .
"""

import os
from pathlib import Path
from typing import IO, Any, Optional

import structlog

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
DEFAULT_LEVEL = "INFO"

_log_handle: Optional[IO[str]] = None


def log_file_path() -> Path:
    """Location of the JSON log file."""
    return Path.home() / ".cache" / "vaultindex" / "logs" / "vaultindex.log"


def resolve_level(level: Optional[str] = None) -> str:
    """
    Pick the effective log level.

    An explicit level (from --verbose) wins over VAULTINDEX_LOG_LEVEL.
    Unknown names fall back to INFO.

    Args:
        level: Level name requested by the caller, if any

    Returns:
        One of DEBUG, INFO, WARNING, ERROR
    """
    requested = level or os.environ.get("VAULTINDEX_LOG_LEVEL", DEFAULT_LEVEL)
    requested = requested.upper()
    return requested if requested in LEVELS else DEFAULT_LEVEL


def _open_log_file(path: Path) -> IO[str]:
    global _log_handle

    # Reuse the open handle across configure calls for the same file
    if _log_handle is not None and not _log_handle.closed:
        if Path(_log_handle.name) == path:
            return _log_handle
        _log_handle.close()

    path.parent.mkdir(parents=True, exist_ok=True)
    _log_handle = open(path, "a", encoding="utf-8")
    return _log_handle


def configure_logging(level: Optional[str] = None) -> str:
    """
    Configure structlog to write JSON events to the log file.

    Args:
        level: Minimum level to record; None uses VAULTINDEX_LOG_LEVEL or INFO

    Returns:
        The level that was applied
    """
    applied = resolve_level(level)
    log_file = _open_log_file(log_file_path())

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(sort_keys=True),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(applied),
        context_class=dict,
        logger_factory=structlog.WriteLoggerFactory(file=log_file),
        cache_logger_on_first_use=False,
    )
    return applied


def get_logger(name: str) -> Any:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (typically __name__ of calling module)

    Returns:
        Structured logger instance

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("index_written", root="Resources", path="Resources Index.md")
    """
    return structlog.get_logger(name)
