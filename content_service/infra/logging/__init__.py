"""Logging infrastructure.

Basic usage:
    from content_service.infra.logging import set_log_context, setup_logging
    import logging

    setup_logging()
    logger = logging.getLogger(__name__)

    set_log_context(correlation_id="abc-123")
    logger.info("Resolving node")  # record includes correlation_id
"""

from content_service.infra.logging.config import (
    configure_logging,
    setup_logging,
    shutdown,
)
from content_service.infra.logging.context import (
    ContextInjectingFilter,
    clear_log_context,
    get_log_context,
    set_log_context,
)
from content_service.infra.logging.formatters import JSONFormatter

__all__ = [
    "ContextInjectingFilter",
    "JSONFormatter",
    "clear_log_context",
    "configure_logging",
    "get_log_context",
    "set_log_context",
    "setup_logging",
    "shutdown",
]
