"""
Factory functions for dependency injection.

Provides process-scoped providers for core infrastructure services.
Lambda reuses the process between invocations, so cached providers are
created once per cold start.
"""

from functools import lru_cache

from infrastructure.clients.aws import CognitoIdpClient, SessionProvider
from infrastructure.configuration import LegacyPoolSettings, Settings


@lru_cache
def get_settings() -> Settings:
    """
    Get process-scoped settings singleton.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


def build_legacy_cognito_client(legacy: LegacyPoolSettings) -> CognitoIdpClient:
    """Build the client for the legacy user pool.

    The SessionProvider caches one boto3 cognito-idp client, so the
    connection pool and credentials are reused for as long as the returned
    client lives.

    Args:
        legacy: legacy user pool settings

    Returns:
        CognitoIdpClient bound to the configured legacy user pool
    """
    session_provider = SessionProvider(
        region=legacy.REGION,
        role_arn=legacy.ROLE_ARN,
        endpoint_url=legacy.ENDPOINT_URL,
        connect_timeout=legacy.CONNECT_TIMEOUT,
        read_timeout=legacy.READ_TIMEOUT,
    )
    return CognitoIdpClient(
        session_provider,
        default_user_pool_id=legacy.USER_POOL_ID,
        default_client_id=legacy.CLIENT_ID,
    )
