"""Structlog processors applied to every log entry.

Usage:
    from infrastructure.logging.formatters import mask_sensitive_data
"""

from typing import Any

# Key fragments whose values must never reach the logs. Provider configs
# carry API keys and AWS secrets, and Slack payloads carry tokens.
SENSITIVE_PATTERNS = frozenset(
    {
        "password",
        "secret",
        "token",
        "api_key",
        "apikey",
        "authorization",
        "credential",
        "access_key",
        "bearer",
    }
)


def mask_sensitive_data(
    mask_value: str = "***REDACTED***",
    additional_patterns: frozenset[str] | None = None,
):
    """Create a processor that masks values of sensitive keys.

    Matching is a case-insensitive substring test on the key name.

    Args:
        mask_value: The string to replace sensitive values with.
        additional_patterns: Extra key fragments to treat as sensitive.

    Returns:
        A structlog processor function.
    """
    patterns = SENSITIVE_PATTERNS
    if additional_patterns:
        patterns = patterns | additional_patterns

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        for key, value in event_dict.items():
            if value is None:
                continue
            key_lower = key.lower()
            if any(pattern in key_lower for pattern in patterns):
                event_dict[key] = mask_value
        return event_dict

    return processor


def truncate_large_values(max_length: int = 500):
    """Create a processor that truncates long string values.

    Chat messages and backend error bodies can be arbitrarily long.

    Args:
        max_length: Maximum string length before truncation.

    Returns:
        A structlog processor function.
    """

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        for key, value in event_dict.items():
            if isinstance(value, str) and len(value) > max_length:
                event_dict[key] = (
                    value[:max_length] + f"...[truncated, {len(value)} chars total]"
                )
        return event_dict

    return processor
