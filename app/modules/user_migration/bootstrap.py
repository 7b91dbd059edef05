"""Wiring of the migration pipeline.

Builds the dispatcher once per process from explicit settings. Missing
configuration fails here, at cold start, rather than per invocation.
"""

from functools import lru_cache
from typing import Optional

from infrastructure.clients.aws import CognitoIdpClient
from infrastructure.configuration import Settings
from infrastructure.logging import get_module_logger
from infrastructure.services import build_legacy_cognito_client, get_settings
from modules.user_migration.dispatcher import TriggerDispatcher
from modules.user_migration.errors import MigrationConfigurationError
from modules.user_migration.legacy_client import LegacyIdentityClient
from modules.user_migration.resolution import UserResolutionChain
from modules.user_migration.strategies import (
    AuthenticationResolver,
    default_strategies,
)

logger = get_module_logger()


def build_dispatcher(
    settings: Settings, cognito: Optional[CognitoIdpClient] = None
) -> TriggerDispatcher:
    """Assemble the dispatcher and its collaborators.

    Args:
        settings: application settings
        cognito: optional pre-built legacy pool client (tests)

    Raises:
        MigrationConfigurationError: required legacy pool settings are unset
    """
    legacy = settings.legacy_pool
    missing = legacy.missing_required()
    if missing:
        logger.error("migration_configuration_missing", missing=missing)
        raise MigrationConfigurationError(
            f"Missing required configuration: {', '.join(missing)}"
        )

    client = LegacyIdentityClient(
        cognito or build_legacy_cognito_client(legacy),
        client_id=legacy.CLIENT_ID,
        client_secret=legacy.CLIENT_SECRET,
    )
    authenticator = AuthenticationResolver(
        default_strategies(client),
        cache_mechanism=settings.migration.CACHE_AUTH_MECHANISM,
    )
    chain = UserResolutionChain(
        client,
        authenticator,
        email_fallback=settings.migration.EMAIL_FALLBACK_ENABLED,
    )
    logger.info(
        "migration_dispatcher_ready",
        legacy_user_pool_id=legacy.USER_POOL_ID,
        legacy_region=legacy.REGION,
        cache_auth_mechanism=settings.migration.CACHE_AUTH_MECHANISM,
    )
    return TriggerDispatcher(chain)


@lru_cache
def get_dispatcher() -> TriggerDispatcher:
    """Process-scoped dispatcher built from the environment settings."""
    return build_dispatcher(get_settings())
