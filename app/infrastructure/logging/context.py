"""Event-scoped context binding for structured logging.

Every inbound chat message and every API request is handled inside
``bind_request_context`` so that all log lines emitted while handling it
share a correlation id.

Usage:
    from infrastructure.logging import bind_request_context

    with bind_request_context(correlation_id=event.message_id, user_id=event.user_id):
        logger.info("message_received")
"""

import uuid
from contextlib import contextmanager
from typing import Optional, Any, Generator
import structlog


@contextmanager
def bind_request_context(
    correlation_id: Optional[str] = None,
    user_id: Optional[str] = None,
    channel_id: Optional[str] = None,
    **extra_context: Any,
) -> Generator[None, None, None]:
    """Bind context to all logs emitted within the block.

    Args:
        correlation_id: Unique identifier of the event. Auto-generated if not provided.
        user_id: Platform user the event belongs to.
        channel_id: Conversation the event was posted in.
        **extra_context: Additional key-value pairs to include in logs.
    """
    context: dict[str, Any] = {"correlation_id": correlation_id or str(uuid.uuid4())}

    if user_id is not None:
        context["user_id"] = user_id

    if channel_id is not None:
        context["channel_id"] = channel_id

    context.update(extra_context)

    structlog.contextvars.bind_contextvars(**context)
    try:
        yield
    finally:
        structlog.contextvars.unbind_contextvars(*context.keys())


def get_correlation_id() -> Optional[str]:
    """Get the current correlation ID from the logging context."""
    ctx = structlog.contextvars.get_contextvars()
    return ctx.get("correlation_id")
