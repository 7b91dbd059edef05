"""Legacy user pool integration settings."""

from typing import Optional

from pydantic import AliasChoices, Field

from infrastructure.configuration.base import IntegrationSettings


class LegacyPoolSettings(IntegrationSettings):
    """Connection settings for the legacy Cognito user pool.

    Environment Variables:
        LEGACY_USER_POOL_ID (or OLD_USER_POOL_ID): Legacy user pool ID (required)
        LEGACY_USER_POOL_REGION (or OLD_USER_POOL_REGION): Region of the
            legacy pool (default: eu-west-1)
        LEGACY_USER_POOL_CLIENT_ID (or OLD_USER_POOL_CLIENT_ID): App client
            ID used for authentication (required)
        LEGACY_USER_POOL_CLIENT_SECRET: App client secret, when the client has one
        LEGACY_USER_POOL_ROLE_ARN: Role assumed for the admin APIs (cross-account)
        LEGACY_USER_POOL_ENDPOINT_URL: Custom endpoint (LocalStack/testing)
        LEGACY_CONNECT_TIMEOUT: Connect timeout in seconds (default: 5)
        LEGACY_READ_TIMEOUT: Read timeout in seconds (default: 5)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        pool_id = settings.legacy_pool.USER_POOL_ID
        missing = settings.legacy_pool.missing_required()
        ```
    """

    USER_POOL_ID: str = Field(
        default="",
        validation_alias=AliasChoices("LEGACY_USER_POOL_ID", "OLD_USER_POOL_ID"),
    )
    REGION: str = Field(
        default="eu-west-1",
        validation_alias=AliasChoices(
            "LEGACY_USER_POOL_REGION", "OLD_USER_POOL_REGION"
        ),
    )
    CLIENT_ID: str = Field(
        default="",
        validation_alias=AliasChoices(
            "LEGACY_USER_POOL_CLIENT_ID", "OLD_USER_POOL_CLIENT_ID"
        ),
    )
    CLIENT_SECRET: Optional[str] = Field(
        default=None, alias="LEGACY_USER_POOL_CLIENT_SECRET"
    )
    ROLE_ARN: Optional[str] = Field(default=None, alias="LEGACY_USER_POOL_ROLE_ARN")
    ENDPOINT_URL: Optional[str] = Field(
        default=None, alias="LEGACY_USER_POOL_ENDPOINT_URL"
    )
    CONNECT_TIMEOUT: int = Field(default=5, alias="LEGACY_CONNECT_TIMEOUT")
    READ_TIMEOUT: int = Field(default=5, alias="LEGACY_READ_TIMEOUT")

    def missing_required(self) -> list[str]:
        """Names of required environment variables that are unset.

        Returns:
            List of environment variable names, empty when fully configured
        """
        missing = []
        if not self.USER_POOL_ID:
            missing.append("LEGACY_USER_POOL_ID")
        if not self.CLIENT_ID:
            missing.append("LEGACY_USER_POOL_CLIENT_ID")
        return missing
