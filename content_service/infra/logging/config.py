"""Logging configuration setup.

Provides logging configuration using:
- dictConfig for the root logger level and handler reset
- QueueHandler + QueueListener for non-blocking I/O
- ContextInjectingFilter for automatic context propagation
- JSONL format for machine parsing, or plain text for local development
"""

from __future__ import annotations

import atexit
import logging
import logging.config
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path
from queue import Queue
from typing import TYPE_CHECKING, Any

from content_service.infra.logging.context import ContextInjectingFilter
from content_service.infra.logging.formatters import JSONFormatter

if TYPE_CHECKING:
    from content_service.core.settings.logs import LoggingSettings

logger = logging.getLogger(__name__)

_log_queue: Queue[logging.LogRecord] | None = None
_listener: QueueListener | None = None
_LOGGING_INITIALIZED = False

TEXT_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def shutdown() -> None:
    """Stop the QueueListener, flushing pending records.

    Registered with atexit; safe to call more than once.
    """
    global _log_queue, _listener

    if _listener is not None:
        _listener.stop()
        _listener = None
    _log_queue = None


def setup_logging(
    log_settings: LoggingSettings | None = None,
    *,
    force: bool = False,
    **configure_kwargs: Any,
) -> None:
    """Ensure logging is configured once across entrypoints.

    Args:
        log_settings: Optional logging settings instance. If omitted, settings
            are loaded via get_logging_settings().
        force: Reconfigure logging even if it was already initialized.
        **configure_kwargs: Explicit overrides for configure_logging().
    """
    global _LOGGING_INITIALIZED

    if _LOGGING_INITIALIZED and not force:
        return

    settings_obj = log_settings
    if settings_obj is None:
        from content_service.core.settings import get_logging_settings

        settings_obj = get_logging_settings()

    log_config = {**settings_obj.to_logging_kwargs(), **configure_kwargs}
    configure_logging(**log_config)
    _LOGGING_INITIALIZED = True


def configure_logging(
    log_level: str = "INFO",
    file_path: str | Path | None = None,
    json_logs: bool = True,
    console_enabled: bool = True,
    include_context: bool = True,
    file_max_bytes: int = 10 * 1024 * 1024,
    file_backup_count: int = 5,
    service_name: str = "content-service",
) -> None:
    """Configure the root logger with dictConfig and the QueueHandler pattern.

    Args:
        log_level: Root logger level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        file_path: Path to a rotating log file. None disables file logging.
        json_logs: Emit JSONL instead of plain text.
        console_enabled: Log to stderr.
        include_context: Attach ContextInjectingFilter to the root logger.
        file_max_bytes: Maximum log file size before rotation.
        file_backup_count: Number of rotated log files to keep.
        service_name: Static ``service`` field added to JSON records.
    """
    global _log_queue, _listener

    shutdown()

    formatter_name = "json" if json_logs else "text"

    # Root level only; handlers live on the QueueListener below.
    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "root": {
            "level": log_level.upper(),
            "handlers": [],
        },
    })

    fmt: logging.Formatter = (
        JSONFormatter(static={"service": service_name})
        if json_logs
        else logging.Formatter(TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    )

    handlers: list[logging.Handler] = []
    if console_enabled:
        console = logging.StreamHandler()
        console.setFormatter(fmt)
        handlers.append(console)
    if file_path:
        path = Path(file_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            path,
            maxBytes=file_max_bytes,
            backupCount=file_backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(fmt)
        handlers.append(file_handler)

    root = logging.getLogger()
    if handlers:
        _log_queue = Queue(-1)
        queue_handler = QueueHandler(_log_queue)
        if include_context:
            # Inject context before the record crosses to the listener thread.
            queue_handler.addFilter(ContextInjectingFilter())
        root.addHandler(queue_handler)
        _listener = QueueListener(_log_queue, *handlers, respect_handler_level=True)
        _listener.start()

    logger.debug(
        "Logging configured",
        extra={"format": formatter_name, "level": log_level.upper()},
    )


atexit.register(shutdown)


__all__ = ["configure_logging", "setup_logging", "shutdown"]
