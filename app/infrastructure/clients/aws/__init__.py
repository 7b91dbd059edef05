"""Infrastructure AWS clients public API.

This package provides DI-friendly AWS clients for the legacy user pool:

    from infrastructure.clients.aws import CognitoIdpClient, SessionProvider

    provider = SessionProvider(region="eu-west-1")
    cognito = CognitoIdpClient(provider, default_user_pool_id="eu-west-1_abc")
    result = cognito.admin_get_user("jdoe")
    if result.is_success:
        print(result.data["UserStatus"])
"""

from infrastructure.clients.aws.cognito_idp import CognitoIdpClient
from infrastructure.clients.aws.session_provider import SessionProvider

__all__ = [
    "CognitoIdpClient",
    "SessionProvider",
]
