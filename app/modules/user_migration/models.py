"""Internal data models for the user migration module.

Lightweight dataclasses (not Pydantic) used between the components of the
migration pipeline. Wire-level parsing and serialization of the Cognito
trigger event lives in schemas.py.

Key purpose:
  - TriggerEvent: one inbound invocation, consumed once
  - LegacyUserRecord: a user as the legacy pool reports it
  - MigrationOutcome: closed result of an authentication/lookup attempt
  - MigrationResponse: what the new pool needs to create the user
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple


class MigrationFlow(str, Enum):
    """Flows for which the new pool invokes the migration trigger."""

    AUTHENTICATION = "Authentication"
    FORGOT_PASSWORD = "ForgotPassword"


class ResolutionMode(Enum):
    """How the resolution chain locates the legacy user."""

    AUTHENTICATE = "authenticate"
    LOOKUP_ONLY = "lookup_only"


class OutcomeKind(Enum):
    """Kinds of MigrationOutcome.

    Attributes:
        FOUND: the user was authenticated (or located) and fetched
        NOT_FOUND: no legacy user with that username
        INVALID_CREDENTIALS: the legacy pool rejected the credentials
        TRANSIENT_ERROR: the legacy pool failed in an unclassified way
        UNAVAILABLE: the auth mechanism is disabled for the legacy client;
            only authentication strategies produce it and the strategy
            resolver never returns it
    """

    FOUND = "found"
    NOT_FOUND = "not_found"
    INVALID_CREDENTIALS = "invalid_credentials"
    TRANSIENT_ERROR = "transient_error"
    UNAVAILABLE = "unavailable"


class FinalUserStatus(str, Enum):
    """Status the new pool assigns to the migrated user."""

    CONFIRMED = "CONFIRMED"
    RESET_REQUIRED = "RESET_REQUIRED"


LEGACY_CONFIRMED_STATUS = "CONFIRMED"


@dataclass(frozen=True)
class LegacyUserRecord:
    """A user as returned by the legacy user pool.

    Attributes:
        username: canonical legacy username
        attributes: (name, value) pairs in the order the pool returned them,
            including provider-internal attributes such as `sub`
        status: legacy UserStatus (e.g. CONFIRMED, FORCE_CHANGE_PASSWORD)
        enabled: whether the legacy account is enabled
    """

    username: str
    attributes: Tuple[Tuple[str, str], ...] = ()
    status: Optional[str] = None
    enabled: bool = True

    @property
    def is_confirmed(self) -> bool:
        return self.status == LEGACY_CONFIRMED_STATUS

    @classmethod
    def from_cognito(cls, data: Mapping[str, Any]) -> "LegacyUserRecord":
        """Build a record from an AdminGetUser response or a ListUsers entry.

        AdminGetUser returns `UserAttributes` while ListUsers entries carry
        `Attributes`; both are lists of {"Name": ..., "Value": ...}.
        """
        raw_attributes = data.get("UserAttributes")
        if raw_attributes is None:
            raw_attributes = data.get("Attributes") or []

        return cls(
            username=data.get("Username", ""),
            attributes=tuple(
                (attr["Name"], attr.get("Value", "")) for attr in raw_attributes
            ),
            status=data.get("UserStatus"),
            enabled=data.get("Enabled", True),
        )


@dataclass(frozen=True)
class MigrationOutcome:
    """Result of authenticating or locating a legacy user.

    Use the factory class methods rather than the constructor.
    """

    kind: OutcomeKind
    user: Optional[LegacyUserRecord] = None
    cause: Optional[Any] = None

    @property
    def is_found(self) -> bool:
        return self.kind == OutcomeKind.FOUND

    @property
    def is_rejection(self) -> bool:
        """True for the terminal "cannot migrate" kinds."""
        return self.kind in (OutcomeKind.NOT_FOUND, OutcomeKind.INVALID_CREDENTIALS)

    @classmethod
    def found(cls, user: LegacyUserRecord) -> "MigrationOutcome":
        return cls(kind=OutcomeKind.FOUND, user=user)

    @classmethod
    def not_found(cls) -> "MigrationOutcome":
        return cls(kind=OutcomeKind.NOT_FOUND)

    @classmethod
    def invalid_credentials(cls) -> "MigrationOutcome":
        return cls(kind=OutcomeKind.INVALID_CREDENTIALS)

    @classmethod
    def transient_error(cls, cause: Any) -> "MigrationOutcome":
        return cls(kind=OutcomeKind.TRANSIENT_ERROR, cause=cause)

    @classmethod
    def unavailable(cls, cause: Any = None) -> "MigrationOutcome":
        return cls(kind=OutcomeKind.UNAVAILABLE, cause=cause)


@dataclass
class MigrationResponse:
    """Attributes and flags handed back to the new pool.

    Attributes:
        attributes: normalized profile of the migrated user
        final_user_status: only set for the authentication flow
        suppress_welcome_message: always True; migrated users must not get
            a "new account" message
    """

    attributes: Dict[str, str]
    final_user_status: Optional[FinalUserStatus] = None
    suppress_welcome_message: bool = True


@dataclass
class TriggerEvent:
    """One inbound migration trigger invocation.

    Attributes:
        flow: flow name as received; validated by the dispatcher
        login_identifier: username or email the user typed
        password: plaintext password (authentication flow only)
        response: filled by the dispatcher on success
        raw: the untouched Lambda event, echoed back to Cognito
    """

    flow: Any
    login_identifier: Optional[str]
    password: Optional[str] = None
    response: Optional[MigrationResponse] = None
    raw: Dict[str, Any] = field(default_factory=dict)

    def __repr__(self) -> str:
        # password omitted
        return (
            f"TriggerEvent(flow={self.flow!r}, "
            f"login_identifier={self.login_identifier!r}, "
            f"response={self.response!r})"
        )


NormalizedProfile = Dict[str, str]
