"""structlog processors used by the migration trigger pipeline."""

from typing import Any


def add_app_info(app_name: str, app_version: str = "unknown"):
    """Stamp every event with the function name and deployed git SHA."""

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        event_dict["app_name"] = app_name
        event_dict["app_version"] = app_version
        return event_dict

    return processor


# Matched case-insensitively as substrings of event keys
SENSITIVE_PATTERNS = frozenset(
    {
        "password",
        "secret",
        "token",
        "session",
        "authorization",
        "credential",
        "private_key",
        "cookie",
        "jwt",
        "bearer",
    }
)


def mask_sensitive_data(
    mask_value: str = "***REDACTED***",
    additional_patterns: frozenset[str] | None = None,
):
    """Redact credential values, including inside nested dicts.

    A raw trigger event logged as-is keeps `request.password` and any
    `ClientMetadata` token out of CloudWatch. `None` values are left alone
    so a missing password stays visible as missing.
    """
    patterns = SENSITIVE_PATTERNS
    if additional_patterns:
        patterns = patterns | additional_patterns

    def _mask(data: dict[str, Any]) -> dict[str, Any]:
        masked = {}
        for key, value in data.items():
            key_lower = str(key).lower()
            if any(pattern in key_lower for pattern in patterns) and value is not None:
                masked[key] = mask_value
            elif isinstance(value, dict):
                masked[key] = _mask(value)
            else:
                masked[key] = value
        return masked

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        return _mask(event_dict)

    return processor


def truncate_large_values(max_length: int = 500):
    """Cut long strings, such as botocore error bodies, to `max_length`."""

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
