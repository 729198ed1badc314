"""Structured logging for graphwalk.

Importing graphwalk never touches the root logger or the global structlog
configuration. Each module logger is a structlog ``BoundLogger`` wrapped
around ``logging.getLogger(name)``, and every call is checked against that
stdlib logger's effective level. Whatever level the host application sets on
``graphwalk`` (or on root) therefore applies at once, also to loggers that
have already been used.

Events are handed to stdlib logging as structlog event dicts. Handlers that
should render them need a ``structlog.stdlib.ProcessorFormatter``; the
handlers installed by ``configure_logging`` carry one.

``configure_logging`` is opt-in, for scripts and test sessions, and only
touches the ``graphwalk`` logger:
- Console: rich handler on stderr, level from ``verbosity``
- File: optional JSONL file receiving every event at DEBUG
"""

from __future__ import annotations

import logging
from pathlib import Path  # noqa: TC003 - Used at runtime for path operations
from typing import TYPE_CHECKING, Any

import structlog
from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from collections.abc import MutableMapping

    from structlog.typing import Processor

PACKAGE_LOGGER = "graphwalk"

# Runs on every call; filter_by_level first so disabled events cost nothing.
_PROCESSORS: list[Processor] = [
    structlog.stdlib.filter_by_level,
    structlog.contextvars.merge_contextvars,
    structlog.processors.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
]

# Applied to records from plain stdlib loggers under ``graphwalk``.
_FOREIGN_PRE_CHAIN: list[Processor] = [
    structlog.processors.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
]

# Handlers added by configure_logging, removed again on reconfigure
_handlers: list[logging.Handler] = []
_file_handler: logging.FileHandler | None = None
_log_file: Path | None = None


def _drop_console_fields(
    _logger: Any, _method: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    # Rich already shows level and time in its own columns.
    event_dict.pop("level", None)
    event_dict.pop("timestamp", None)
    return event_dict


def _console_formatter() -> structlog.stdlib.ProcessorFormatter:
    return structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _drop_console_fields,
            structlog.processors.KeyValueRenderer(key_order=["event"], drop_missing=True),
        ],
        foreign_pre_chain=_FOREIGN_PRE_CHAIN,
    )


def _jsonl_formatter() -> structlog.stdlib.ProcessorFormatter:
    return structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.add_logger_name,
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.JSONRenderer(sort_keys=True),
        ],
        foreign_pre_chain=_FOREIGN_PRE_CHAIN,
    )


def _remove_handlers() -> None:
    global _file_handler, _log_file

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in _handlers:
        package_logger.removeHandler(handler)
        handler.close()
    _handlers.clear()
    _file_handler = None
    _log_file = None


def configure_logging(
    verbosity: int = 0,
    log_file: Path | None = None,
) -> None:
    """Send graphwalk events to the console and optionally a JSONL file.

    Only the ``graphwalk`` logger is changed: it gets its own handlers and
    stops propagating, so calling this twice never duplicates output. The
    root logger and the structlog defaults are left alone.

    Args:
        verbosity: 0=WARNING (default), 1=INFO, 2+=DEBUG
        log_file: If given, every event is also appended to this file as JSONL.
    """
    global _file_handler, _log_file

    _remove_handlers()

    levels = {0: logging.WARNING, 1: logging.INFO}
    console_level = levels.get(verbosity, logging.DEBUG)

    console_handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        tracebacks_show_locals=verbosity >= 2,
        show_time=verbosity >= 1,
        show_path=verbosity >= 2,
        markup=False,
        level=console_level,
    )
    console_handler.setFormatter(_console_formatter())
    _handlers.append(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        _file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        _file_handler.setLevel(logging.DEBUG)
        _file_handler.setFormatter(_jsonl_formatter())
        _handlers.append(_file_handler)
        _log_file = log_file

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in _handlers:
        package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if log_file is not None else console_level)
    package_logger.propagate = False


def reset_logging() -> None:
    """Undo ``configure_logging``.

    Removes and closes its handlers and hands the ``graphwalk`` logger back
    to the host's configuration (level NOTSET, propagating to root).
    """
    _remove_handlers()
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger for a graphwalk module.

    Configures nothing; the logger is bound to its own processor chain and
    defers level decisions to stdlib logging on every call.

    Args:
        name: Logger name (typically __name__). Defaults to ``graphwalk``.

    Returns:
        Bound logger instance.
    """
    logger: structlog.stdlib.BoundLogger = structlog.wrap_logger(
        logging.getLogger(name or PACKAGE_LOGGER),
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
    return logger


def get_log_file() -> Path | None:
    """Return the JSONL log file path if file logging is enabled."""
    return _log_file


def close_file_logging() -> None:
    """Stop writing to the JSONL file, keeping console logging."""
    global _file_handler, _log_file
    if _file_handler is not None:
        logging.getLogger(PACKAGE_LOGGER).removeHandler(_file_handler)
        _handlers.remove(_file_handler)
        _file_handler.close()
        _file_handler = None
        _log_file = None
