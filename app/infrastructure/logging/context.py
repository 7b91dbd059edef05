"""Invocation context binding for structured logging.

Binds invocation-scoped context (correlation ID, trigger source, user
pool) to every log entry emitted while a trigger event is processed.

Usage:
    from infrastructure.logging import bind_request_context

    with bind_request_context(correlation_id=context.aws_request_id):
        logger.info("processing_trigger")

Dependencies:
    - structlog.contextvars
"""

import uuid
from contextlib import contextmanager
from typing import Optional, Any, Generator
import structlog


@contextmanager
def bind_request_context(
    correlation_id: Optional[str] = None,
    trigger_source: Optional[str] = None,
    user_pool_id: Optional[str] = None,
    **extra_context: Any,
) -> Generator[None, None, None]:
    """Bind invocation-scoped context to all logs within the block.

    Args:
        correlation_id: Unique invocation identifier (the Lambda request ID).
            Auto-generated if not provided.
        trigger_source: Cognito trigger source of the event.
        user_pool_id: ID of the user pool that invoked the trigger.
        **extra_context: Additional key-value pairs to include in logs.

    Yields:
        None - context is bound to structlog's context vars.

    Example:
        def handler(event, context):
            with bind_request_context(
                correlation_id=context.aws_request_id,
                trigger_source=event.get("triggerSource"),
            ):
                return dispatch(event)
    """
    bound: dict[str, Any] = {}

    bound["correlation_id"] = correlation_id or str(uuid.uuid4())

    if trigger_source is not None:
        bound["trigger_source"] = trigger_source

    if user_pool_id is not None:
        bound["user_pool_id"] = user_pool_id

    bound.update(extra_context)

    structlog.contextvars.bind_contextvars(**bound)
    try:
        yield
    finally:
        structlog.contextvars.unbind_contextvars(*bound.keys())


def get_correlation_id() -> Optional[str]:
    """Get the current correlation ID from the logging context.

    Returns:
        The correlation ID if set, None otherwise.
    """
    ctx = structlog.contextvars.get_contextvars()
    return ctx.get("correlation_id")


def clear_request_context() -> None:
    """Clear all invocation-scoped context from the logging context.

    Lambda reuses the process between invocations, so context left behind
    would leak into the next invocation's logs.
    """
    structlog.contextvars.clear_contextvars()
