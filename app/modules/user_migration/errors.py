"""Errors for the user migration module.

Every error raised here reaches Cognito unchanged; Cognito treats any
raised error as "migration failed" and denies the sign-in or reset.
"""

from typing import Any, Optional


class MigrationError(Exception):
    """Base exception for all user migration errors."""


class MigrationConfigurationError(MigrationError):
    """Raised when required configuration is missing or unusable.

    Fatal: no invocation can succeed until the configuration is fixed.
    """


class MigrationValidationError(MigrationError):
    """Raised when the inbound trigger event is malformed."""


class UnsupportedFlowError(MigrationValidationError):
    """Raised when the trigger event names a flow this bridge does not serve."""

    def __init__(self, flow: Any):
        super().__init__(f"Unsupported migration flow: {flow!r}")
        self.flow = flow


class MissingIdentifierError(MigrationValidationError):
    """Raised when the trigger event carries no login identifier."""

    def __init__(self):
        super().__init__("Login identifier is required")


class MissingPasswordError(MigrationValidationError):
    """Raised when an authentication event carries no password."""

    def __init__(self):
        super().__init__("Password is required for the authentication flow")


class NotAuthenticatedError(MigrationError):
    """Raised when the user cannot be migrated with the given credentials.

    Covers both "no such legacy user" and "wrong password" with one message
    so callers cannot enumerate legacy accounts.
    """

    def __init__(self):
        super().__init__("User not found or incorrect credentials")


class IncompleteLegacyProfileError(MigrationError):
    """Raised when the legacy user lacks attributes the flow requires."""


class MissingRequiredAttributeError(IncompleteLegacyProfileError):
    """Raised when a mandatory attribute is absent from the legacy profile."""

    def __init__(self, attribute: str):
        super().__init__(f"Legacy profile is missing required attribute '{attribute}'")
        self.attribute = attribute


class MissingContactAttributeError(IncompleteLegacyProfileError):
    """Raised when the legacy profile has neither email nor phone_number."""

    def __init__(self):
        super().__init__(
            "Legacy profile has no contact channel (email or phone_number)"
        )


class LegacyStoreUnavailableError(MigrationError):
    """Raised when the legacy user pool is unreachable or failed unexpectedly.

    Attributes:
        cause: the classified result or exception reported by the client
    """

    def __init__(self, message: str, cause: Optional[Any] = None):
        super().__init__(message)
        self.cause = cause
