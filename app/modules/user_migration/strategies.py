"""Legacy authentication strategies and the resolver that orders them.

Each strategy wraps one legacy authentication mechanism and reports a
MigrationOutcome. A strategy answers UNAVAILABLE only when the mechanism
itself is disabled or not permitted for the legacy app client; that is
the only answer that moves the resolver on to the next strategy.
"""

import threading
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from infrastructure.logging import get_module_logger
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus
from modules.user_migration.errors import MigrationConfigurationError
from modules.user_migration.legacy_client import LegacyIdentityClient
from modules.user_migration.models import MigrationOutcome, OutcomeKind

logger = get_module_logger()


class AuthStrategy(ABC):
    """One legacy authentication mechanism."""

    name: str = "base"

    def __init__(self, client: LegacyIdentityClient) -> None:
        self._client = client

    @abstractmethod
    def _initiate(self, username: str, password: str) -> OperationResult:
        """Call the legacy pool for this mechanism."""

    def attempt(self, username: str, password: str) -> MigrationOutcome:
        """Authenticate and, on success, fetch the full legacy record.

        An authenticated session and a pending challenge (MFA, new password
        required, ...) both prove the password; either one counts as success.
        """
        result = self._initiate(username, password)

        if result.is_success:
            data = result.data or {}
            if not data.get("AuthenticationResult") and not data.get("ChallengeName"):
                return MigrationOutcome.invalid_credentials()
            return self._client.get_user(username)

        if result.status == OperationStatus.UNSUPPORTED:
            return MigrationOutcome.unavailable(result)
        if result.status == OperationStatus.NOT_FOUND:
            return MigrationOutcome.not_found()
        if result.status == OperationStatus.UNAUTHORIZED:
            return MigrationOutcome.invalid_credentials()
        return MigrationOutcome.transient_error(result)


class AdminNoSrpStrategy(AuthStrategy):
    """AdminInitiateAuth with the plain password (no SRP). Needs admin IAM rights."""

    name = "admin_no_srp"

    def _initiate(self, username: str, password: str) -> OperationResult:
        return self._client.admin_authenticate(username, password)


class UserPasswordStrategy(AuthStrategy):
    """InitiateAuth with the USER_PASSWORD_AUTH grant."""

    name = "user_password"

    def _initiate(self, username: str, password: str) -> OperationResult:
        return self._client.direct_authenticate(username, password)


def default_strategies(client: LegacyIdentityClient) -> List[AuthStrategy]:
    """Strategies in priority order: admin flow first, direct grant second."""
    return [AdminNoSrpStrategy(client), UserPasswordStrategy(client)]


class AuthenticationResolver:
    """Try legacy authentication mechanisms in priority order.

    Args:
        strategies: strategies in priority order
        cache_mechanism: when True, the first strategy that gives a
            definite answer is tried first on later calls
    """

    def __init__(
        self,
        strategies: Sequence[AuthStrategy],
        cache_mechanism: bool = False,
    ) -> None:
        if not strategies:
            raise ValueError("At least one authentication strategy is required")
        self._strategies = list(strategies)
        self._cache_mechanism = cache_mechanism
        self._preferred: Optional[AuthStrategy] = None
        self._lock = threading.Lock()

    def _ordered(self) -> List[AuthStrategy]:
        preferred = self._preferred
        if preferred is None:
            return self._strategies
        return [preferred] + [s for s in self._strategies if s is not preferred]

    def authenticate(self, username: str, password: str) -> MigrationOutcome:
        """Authenticate against the legacy pool.

        Returns:
            FOUND, NOT_FOUND, INVALID_CREDENTIALS or TRANSIENT_ERROR

        Raises:
            MigrationConfigurationError: every mechanism is unavailable
        """
        for strategy in self._ordered():
            log = logger.bind(strategy=strategy.name)
            outcome = strategy.attempt(username, password)

            if outcome.kind == OutcomeKind.UNAVAILABLE:
                log.warning("legacy_auth_mechanism_unavailable")
                if self._preferred is strategy:
                    with self._lock:
                        self._preferred = None
                continue

            if self._cache_mechanism and self._preferred is not strategy:
                with self._lock:
                    self._preferred = strategy

            log.info("legacy_auth_attempt", outcome=outcome.kind.value)
            return outcome

        logger.error("legacy_auth_no_mechanism_available")
        raise MigrationConfigurationError(
            "No legacy authentication mechanism is enabled for the configured app client"
        )
