"""Operation status enumeration.

Status codes for operation results, used to classify outcomes of legacy
user pool calls before they are turned into migration outcomes.
"""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation results.

    Attributes:
        SUCCESS: Operation completed successfully
        TRANSIENT_ERROR: Outage-like error (network, throttling, unknown codes)
        PERMANENT_ERROR: Non-retryable error unrelated to the caller's credentials
        UNAUTHORIZED: Credentials were rejected by the user pool
        NOT_FOUND: User does not exist in the user pool
        UNSUPPORTED: The requested mechanism is disabled or not permitted
            for the configured app client
    """

    SUCCESS = "success"
    TRANSIENT_ERROR = "transient_error"
    PERMANENT_ERROR = "permanent_error"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    UNSUPPORTED = "unsupported"
