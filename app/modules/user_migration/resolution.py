"""User resolution chain.

Decides how to locate or authenticate the legacy user behind a login
identifier that may be a username or an email address. The legacy pool
and the new pool may disagree on which one is the canonical login, so an
email-shaped identifier that fails as a username is resolved to the real
legacy username and tried once more.
"""

from typing import Optional

from infrastructure.logging import get_module_logger
from modules.user_migration.legacy_client import LegacyIdentityClient
from modules.user_migration.models import (
    MigrationOutcome,
    OutcomeKind,
    ResolutionMode,
)
from modules.user_migration.strategies import AuthenticationResolver

logger = get_module_logger()


def looks_like_email(identifier: str) -> bool:
    return "@" in identifier


class UserResolutionChain:
    """Locate or authenticate a legacy user from a login identifier.

    Args:
        client: legacy identity client used for lookups
        authenticator: resolver over the legacy auth mechanisms
        email_fallback: resolve email-shaped identifiers on failed sign-in
    """

    def __init__(
        self,
        client: LegacyIdentityClient,
        authenticator: AuthenticationResolver,
        email_fallback: bool = True,
    ) -> None:
        self._client = client
        self._authenticator = authenticator
        self._email_fallback = email_fallback

    def resolve(
        self,
        identifier: str,
        password: Optional[str],
        mode: ResolutionMode,
    ) -> MigrationOutcome:
        """Resolve the identifier to a legacy user.

        Args:
            identifier: username or email as typed by the user
            password: plaintext password (AUTHENTICATE mode only)
            mode: AUTHENTICATE for sign-in, LOOKUP_ONLY for password reset

        Returns:
            FOUND, NOT_FOUND, INVALID_CREDENTIALS or TRANSIENT_ERROR
        """
        if mode == ResolutionMode.LOOKUP_ONLY:
            outcome = self._client.get_user(identifier)
            logger.info("legacy_lookup", outcome=outcome.kind.value)
            return outcome

        return self._authenticate(identifier, password or "")

    def _authenticate(self, identifier: str, password: str) -> MigrationOutcome:
        first = self._authenticator.authenticate(identifier, password)
        # Only NOT_FOUND / INVALID_CREDENTIALS may take the email route
        if not first.is_rejection:
            return first

        if not (self._email_fallback and looks_like_email(identifier)):
            return first

        log = logger.bind(first_outcome=first.kind.value)
        lookup = self._client.find_user_by_email(identifier)
        if lookup.kind == OutcomeKind.TRANSIENT_ERROR:
            log.error("email_fallback_lookup_failed")
            return lookup
        if not lookup.is_found or lookup.user is None:
            log.info("email_fallback_no_legacy_user")
            return first

        resolved_username = lookup.user.username
        if not resolved_username or resolved_username == identifier:
            log.info("email_fallback_same_username")
            return first

        log.info("email_fallback_retry", resolved_username=resolved_username)
        retry = self._authenticator.authenticate(resolved_username, password)
        if retry.is_found or retry.kind == OutcomeKind.TRANSIENT_ERROR:
            return retry
        return first
