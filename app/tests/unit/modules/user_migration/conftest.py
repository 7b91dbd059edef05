"""Fixtures for user migration tests.

Provides a fake legacy user pool that speaks the boto3 cognito-idp API, so
the whole pipeline (dispatcher down to CognitoIdpClient) runs against it,
plus factories for legacy records and raw trigger events.
"""

import re
from typing import Any, Dict, List, Optional

import pytest
from botocore.exceptions import ClientError

from infrastructure.clients.aws.cognito_idp import CognitoIdpClient
from modules.user_migration.legacy_client import LegacyIdentityClient
from modules.user_migration.models import LegacyUserRecord
from modules.user_migration.resolution import UserResolutionChain
from modules.user_migration.strategies import (
    AuthenticationResolver,
    default_strategies,
)
from modules.user_migration.dispatcher import TriggerDispatcher

LEGACY_POOL_ID = "eu-west-1_legacy"
LEGACY_CLIENT_ID = "legacy-app-client"

_EMAIL_FILTER = re.compile(r'^email = "((?:[^"\\]|\\.)*)"$')


def _client_error(code: str, message: str, operation: str) -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": message}}, operation)


class FakeLegacyPool:
    """In-memory legacy user pool with the boto3 cognito-idp call surface.

    Args:
        admin_flow_enabled: AdminInitiateAuth is permitted for the client
        direct_flow_enabled: USER_PASSWORD_AUTH is enabled for the client
    """

    def __init__(self, admin_flow_enabled: bool = True, direct_flow_enabled: bool = True):
        self.users: Dict[str, Dict[str, Any]] = {}
        self.admin_flow_enabled = admin_flow_enabled
        self.direct_flow_enabled = direct_flow_enabled
        self.failures: Dict[str, Exception] = {}
        self.calls: List[tuple] = []

    def add_user(
        self,
        username: str,
        password: str = "p1",
        attributes: Optional[Dict[str, str]] = None,
        status: str = "CONFIRMED",
        enabled: bool = True,
    ) -> None:
        if attributes is None:
            attributes = {"email": f"{username}@example.com"}
        self.users[username] = {
            "password": password,
            "attributes": {"sub": f"sub-{username}", **attributes},
            "status": status,
            "enabled": enabled,
        }

    def fail(self, method: str, code: str, message: str = "error") -> None:
        self.failures[method] = _client_error(code, message, method)

    def called(self, method: str) -> List[Dict[str, Any]]:
        return [kwargs for name, kwargs in self.calls if name == method]

    def _record(self, method: str, kwargs: Dict[str, Any]) -> None:
        self.calls.append((method, kwargs))
        if method in self.failures:
            raise self.failures[method]

    def _user_payload(self, username: str) -> Dict[str, Any]:
        user = self.users[username]
        return {
            "Username": username,
            "UserStatus": user["status"],
            "Enabled": user["enabled"],
        }

    def _authenticate(self, params: Dict[str, str], operation: str) -> Dict[str, Any]:
        username = params["USERNAME"]
        user = self.users.get(username)
        if user is None:
            raise _client_error("UserNotFoundException", "User does not exist.", operation)
        if not user["enabled"]:
            raise _client_error("NotAuthorizedException", "User is disabled.", operation)
        if user["password"] != params["PASSWORD"]:
            raise _client_error(
                "NotAuthorizedException", "Incorrect username or password.", operation
            )
        if user["status"] == "FORCE_CHANGE_PASSWORD":
            return {"ChallengeName": "NEW_PASSWORD_REQUIRED", "Session": "s"}
        return {"AuthenticationResult": {"AccessToken": "token"}}

    def admin_initiate_auth(self, **kwargs):
        self._record("admin_initiate_auth", kwargs)
        if not self.admin_flow_enabled:
            raise _client_error(
                "AccessDeniedException",
                "User is not authorized to perform: cognito-idp:AdminInitiateAuth",
                "AdminInitiateAuth",
            )
        return self._authenticate(kwargs["AuthParameters"], "AdminInitiateAuth")

    def initiate_auth(self, **kwargs):
        self._record("initiate_auth", kwargs)
        if not self.direct_flow_enabled:
            raise _client_error(
                "InvalidParameterException",
                "USER_PASSWORD_AUTH flow not enabled for this client",
                "InitiateAuth",
            )
        return self._authenticate(kwargs["AuthParameters"], "InitiateAuth")

    def admin_get_user(self, **kwargs):
        self._record("admin_get_user", kwargs)
        username = kwargs["Username"]
        if username not in self.users:
            raise _client_error("UserNotFoundException", "User does not exist.", "AdminGetUser")
        payload = self._user_payload(username)
        payload["UserAttributes"] = [
            {"Name": name, "Value": value}
            for name, value in self.users[username]["attributes"].items()
        ]
        return payload

    def list_users(self, **kwargs):
        self._record("list_users", kwargs)
        match = _EMAIL_FILTER.match(kwargs.get("Filter", ""))
        email = match.group(1).replace('\\"', '"').replace("\\\\", "\\") if match else None
        users = []
        for username, user in self.users.items():
            if email is not None and user["attributes"].get("email") != email:
                continue
            payload = self._user_payload(username)
            payload["Attributes"] = [
                {"Name": name, "Value": value}
                for name, value in user["attributes"].items()
            ]
            users.append(payload)
        return {"Users": users}


class StaticSessionProvider:
    """Session provider stand-in that always hands out the same client."""

    def __init__(self, client: Any):
        self._client = client

    def get_client(self, service_name: str) -> Any:
        return self._client


@pytest.fixture
def legacy_pool():
    return FakeLegacyPool()


@pytest.fixture
def make_cognito():
    """Factory for a CognitoIdpClient bound to a fake legacy pool."""

    def _factory(pool: FakeLegacyPool) -> CognitoIdpClient:
        return CognitoIdpClient(
            StaticSessionProvider(pool),
            default_user_pool_id=LEGACY_POOL_ID,
            default_client_id=LEGACY_CLIENT_ID,
        )

    return _factory


@pytest.fixture
def make_legacy_client(make_cognito):
    """Factory for a LegacyIdentityClient bound to a fake legacy pool."""

    def _factory(
        pool: FakeLegacyPool, client_secret: Optional[str] = None
    ) -> LegacyIdentityClient:
        return LegacyIdentityClient(
            make_cognito(pool), client_id=LEGACY_CLIENT_ID, client_secret=client_secret
        )

    return _factory


@pytest.fixture
def make_dispatcher(make_legacy_client):
    """Factory for a fully wired TriggerDispatcher over a fake legacy pool."""

    def _factory(
        pool: FakeLegacyPool,
        email_fallback: bool = True,
        cache_mechanism: bool = False,
    ) -> TriggerDispatcher:
        client = make_legacy_client(pool)
        authenticator = AuthenticationResolver(
            default_strategies(client), cache_mechanism=cache_mechanism
        )
        return TriggerDispatcher(
            UserResolutionChain(client, authenticator, email_fallback=email_fallback)
        )

    return _factory


@pytest.fixture
def make_legacy_user():
    """Factory for LegacyUserRecord instances."""

    def _factory(
        username: str = "jdoe",
        attributes: Optional[Dict[str, str]] = None,
        status: str = "CONFIRMED",
        enabled: bool = True,
    ) -> LegacyUserRecord:
        if attributes is None:
            attributes = {"sub": "sub-1", "email": "jane@x.com"}
        return LegacyUserRecord(
            username=username,
            attributes=tuple(attributes.items()),
            status=status,
            enabled=enabled,
        )

    return _factory


@pytest.fixture
def make_raw_event():
    """Factory for raw Cognito user migration trigger events."""

    def _factory(
        trigger_source: str = "UserMigration_Authentication",
        user_name: Optional[str] = "jdoe",
        password: Optional[str] = "p1",
    ) -> Dict[str, Any]:
        request: Dict[str, Any] = {"validationData": None, "clientMetadata": None}
        if password is not None:
            request["password"] = password
        event: Dict[str, Any] = {
            "version": "1",
            "triggerSource": trigger_source,
            "region": "eu-west-1",
            "userPoolId": "eu-west-1_new",
            "callerContext": {"awsSdkVersion": "aws-sdk-unknown", "clientId": "new-app"},
            "request": request,
            "response": {},
        }
        if user_name is not None:
            event["userName"] = user_name
        return event

    return _factory
