"""Capability wrapper around the legacy user pool.

Exposes the three things the migration pipeline asks of the legacy pool:
authenticate a username/password, get a user by username, and find a user
by email. Lookups are returned as MigrationOutcome; authentication calls
return the classified OperationResult so strategies can tell "mechanism
unavailable" apart from credential rejections.
"""

import base64
import hashlib
import hmac
from typing import Optional

from infrastructure.clients.aws.cognito_idp import CognitoIdpClient
from infrastructure.logging import get_module_logger
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus
from modules.user_migration.models import LegacyUserRecord, MigrationOutcome

logger = get_module_logger()

ADMIN_AUTH_FLOW = "ADMIN_USER_PASSWORD_AUTH"
DIRECT_AUTH_FLOW = "USER_PASSWORD_AUTH"


def compute_secret_hash(username: str, client_id: str, client_secret: str) -> str:
    """Compute the SECRET_HASH Cognito requires for clients with a secret.

    Base64 of HMAC-SHA256(key=client_secret, msg=username + client_id).
    """
    digest = hmac.new(
        client_secret.encode("utf-8"),
        (username + client_id).encode("utf-8"),
        hashlib.sha256,
    ).digest()
    return base64.b64encode(digest).decode("utf-8")


def _escape_filter_value(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


def outcome_from_lookup(result: OperationResult) -> Optional[MigrationOutcome]:
    """Map a failed lookup result to an outcome; None when it succeeded."""
    if result.is_success:
        return None
    if result.status == OperationStatus.NOT_FOUND:
        return MigrationOutcome.not_found()
    return MigrationOutcome.transient_error(result)


class LegacyIdentityClient:
    """Legacy user pool operations used by the migration pipeline.

    The underlying boto3 client is shared across invocations; this class
    holds no per-request state.

    Args:
        cognito: CognitoIdpClient bound to the legacy user pool
        client_id: Legacy app client ID used for authentication
        client_secret: Legacy app client secret, if the client has one
    """

    def __init__(
        self,
        cognito: CognitoIdpClient,
        client_id: str,
        client_secret: Optional[str] = None,
    ) -> None:
        self._cognito = cognito
        self._client_id = client_id
        self._client_secret = client_secret
        self._logger = logger.bind(component="legacy_identity_client")

    def _auth_parameters(self, username: str, password: str) -> dict[str, str]:
        params = {"USERNAME": username, "PASSWORD": password}
        if self._client_secret:
            params["SECRET_HASH"] = compute_secret_hash(
                username, self._client_id, self._client_secret
            )
        return params

    def admin_authenticate(self, username: str, password: str) -> OperationResult:
        """Authenticate through AdminInitiateAuth (plain password, no SRP).

        Requires admin IAM permissions on the legacy pool.
        """
        return self._cognito.admin_initiate_auth(
            ADMIN_AUTH_FLOW,
            self._auth_parameters(username, password),
            client_id=self._client_id,
        )

    def direct_authenticate(self, username: str, password: str) -> OperationResult:
        """Authenticate through InitiateAuth with the USER_PASSWORD_AUTH grant."""
        return self._cognito.initiate_auth(
            DIRECT_AUTH_FLOW,
            self._auth_parameters(username, password),
            client_id=self._client_id,
        )

    def get_user(self, username: str) -> MigrationOutcome:
        """Fetch the full legacy record for a username.

        Returns:
            FOUND with the record, NOT_FOUND, or TRANSIENT_ERROR
        """
        result = self._cognito.admin_get_user(username)
        failed = outcome_from_lookup(result)
        if failed is not None:
            return failed

        data = dict(result.data or {})
        data.setdefault("Username", username)
        return MigrationOutcome.found(LegacyUserRecord.from_cognito(data))

    def find_user_by_email(self, email: str) -> MigrationOutcome:
        """Find the legacy user whose email attribute matches exactly.

        When several legacy users share the email, the first confirmed and
        enabled one wins, otherwise the first one returned.

        Returns:
            FOUND with the record, NOT_FOUND, or TRANSIENT_ERROR
        """
        log = self._logger.bind(method="find_user_by_email")
        result = self._cognito.list_users(
            filter_expression=f'email = "{_escape_filter_value(email)}"'
        )
        failed = outcome_from_lookup(result)
        if failed is not None:
            return failed

        users = [
            LegacyUserRecord.from_cognito(entry)
            for entry in (result.data or {}).get("Users", [])
        ]
        if not users:
            log.info("legacy_email_lookup_no_match")
            return MigrationOutcome.not_found()

        if len(users) > 1:
            log.warning("legacy_email_lookup_multiple_matches", count=len(users))

        chosen = next((u for u in users if u.is_confirmed and u.enabled), users[0])
        log.info("legacy_email_lookup_match", username=chosen.username)
        return MigrationOutcome.found(chosen)
