"""Cognito Identity Provider client for AWS operations.

Provides access to the user pool operations the migration trigger needs
(admin_initiate_auth, initiate_auth, admin_get_user, list_users) with
consistent error handling and OperationResult return types.
"""

from typing import Any, Dict, Optional

import structlog

from infrastructure.clients.aws.client import execute_aws_api_call
from infrastructure.clients.aws.session_provider import SessionProvider
from infrastructure.operations.result import OperationResult

logger = structlog.get_logger()


class CognitoIdpClient:
    """Client for AWS Cognito Identity Provider operations.

    All methods return OperationResult for consistent error handling and
    downstream processing. Errors are classified with
    `classify_cognito_error`.

    Args:
        session_provider: SessionProvider instance for credential/config management
        default_user_pool_id: Default user pool ID for this client
        default_client_id: Default app client ID for authentication calls
    """

    def __init__(
        self,
        session_provider: SessionProvider,
        default_user_pool_id: Optional[str] = None,
        default_client_id: Optional[str] = None,
    ) -> None:
        self._session_provider = session_provider
        self._service_name = "cognito-idp"
        self._default_user_pool_id = default_user_pool_id
        self._default_client_id = default_client_id
        self._logger = logger.bind(component="cognito_idp_client")

    def _client(self) -> Any:
        return self._session_provider.get_client(self._service_name)

    def _resolve_pool_id(self, user_pool_id: Optional[str]) -> Optional[str]:
        return user_pool_id or self._default_user_pool_id

    def admin_initiate_auth(
        self,
        auth_flow: str,
        auth_parameters: Dict[str, str],
        user_pool_id: Optional[str] = None,
        client_id: Optional[str] = None,
        **kwargs,
    ) -> OperationResult:
        """Authenticate a user through the admin (server-side) API.

        Args:
            auth_flow: Admin auth flow (e.g. ADMIN_USER_PASSWORD_AUTH)
            auth_parameters: USERNAME, PASSWORD and optional SECRET_HASH
            user_pool_id: Optional override for the user pool ID
            client_id: Optional override for the app client ID
            **kwargs: Additional parameters

        Returns:
            OperationResult with the auth response (AuthenticationResult or
            ChallengeName) or error
        """
        pool_id = self._resolve_pool_id(user_pool_id)
        if not pool_id:
            return OperationResult.permanent_error(
                message="user_pool_id is required",
                error_code="MISSING_USER_POOL_ID",
            )

        return execute_aws_api_call(
            self._client(),
            "admin_initiate_auth",
            UserPoolId=pool_id,
            ClientId=client_id or self._default_client_id,
            AuthFlow=auth_flow,
            AuthParameters=auth_parameters,
            **kwargs,
        )

    def initiate_auth(
        self,
        auth_flow: str,
        auth_parameters: Dict[str, str],
        client_id: Optional[str] = None,
        **kwargs,
    ) -> OperationResult:
        """Authenticate a user through the public client API.

        Args:
            auth_flow: Client auth flow (e.g. USER_PASSWORD_AUTH)
            auth_parameters: USERNAME, PASSWORD and optional SECRET_HASH
            client_id: Optional override for the app client ID
            **kwargs: Additional parameters

        Returns:
            OperationResult with the auth response or error
        """
        return execute_aws_api_call(
            self._client(),
            "initiate_auth",
            ClientId=client_id or self._default_client_id,
            AuthFlow=auth_flow,
            AuthParameters=auth_parameters,
            **kwargs,
        )

    def admin_get_user(
        self,
        username: str,
        user_pool_id: Optional[str] = None,
        **kwargs,
    ) -> OperationResult:
        """Get a user from the user pool.

        Args:
            username: Username (or alias) of the user
            user_pool_id: Optional override for the user pool ID
            **kwargs: Additional parameters

        Returns:
            OperationResult with the user (Username, UserAttributes,
            UserStatus, Enabled) or error
        """
        pool_id = self._resolve_pool_id(user_pool_id)
        if not pool_id:
            return OperationResult.permanent_error(
                message="user_pool_id is required",
                error_code="MISSING_USER_POOL_ID",
            )

        return execute_aws_api_call(
            self._client(),
            "admin_get_user",
            UserPoolId=pool_id,
            Username=username,
            **kwargs,
        )

    def list_users(
        self,
        filter_expression: Optional[str] = None,
        limit: Optional[int] = None,
        user_pool_id: Optional[str] = None,
        **kwargs,
    ) -> OperationResult:
        """List users of the user pool, optionally filtered.

        Args:
            filter_expression: Cognito filter (e.g. 'email = "a@b.c"')
            limit: Maximum number of users to return
            user_pool_id: Optional override for the user pool ID
            **kwargs: Additional parameters

        Returns:
            OperationResult with the list_users response (Users) or error
        """
        pool_id = self._resolve_pool_id(user_pool_id)
        if not pool_id:
            return OperationResult.permanent_error(
                message="user_pool_id is required",
                error_code="MISSING_USER_POOL_ID",
            )

        params: Dict[str, Any] = {"UserPoolId": pool_id}
        if filter_expression:
            params["Filter"] = filter_expression
        if limit:
            params["Limit"] = limit

        return execute_aws_api_call(
            self._client(),
            "list_users",
            **params,
            **kwargs,
        )
