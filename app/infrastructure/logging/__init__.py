"""Structured logging infrastructure.

This package provides centralized logging configuration and utilities
for the user migration trigger using structlog.

Public API:
    - configure_logging(): Initialize logging for the process
    - get_module_logger(): Get a logger for the calling module
    - bind_request_context(): Context manager for invocation-scoped logging
    - get_correlation_id(): Get current correlation ID from context
    - clear_request_context(): Clear all invocation context

Formatters:
    - add_app_info(): Processor to add app name/version
    - mask_sensitive_data(): Processor to redact sensitive fields
    - truncate_large_values(): Processor to limit string lengths

Example:
    from infrastructure.logging import get_module_logger, bind_request_context

    logger = get_module_logger()

    with bind_request_context(correlation_id="req-123"):
        logger.info("processing_trigger")
"""

from infrastructure.logging.setup import (
    configure_logging,
    get_module_logger,
)

from infrastructure.logging.context import (
    bind_request_context,
    get_correlation_id,
    clear_request_context,
)

from infrastructure.logging.formatters import (
    add_app_info,
    mask_sensitive_data,
    truncate_large_values,
    SENSITIVE_PATTERNS,
)

__all__ = [
    # Setup
    "configure_logging",
    "get_module_logger",
    # Context
    "bind_request_context",
    "get_correlation_id",
    "clear_request_context",
    # Formatters
    "add_app_info",
    "mask_sensitive_data",
    "truncate_large_values",
    "SENSITIVE_PATTERNS",
]
