"""User migration feature settings."""

from pydantic import Field

from infrastructure.configuration.base import FeatureSettings


class MigrationFeatureSettings(FeatureSettings):
    """User migration trigger configuration.

    Environment Variables:
        MIGRATION_CACHE_AUTH_MECHANISM: Remember the first enabled legacy
            auth mechanism for the lifetime of the process (default: False)
        MIGRATION_EMAIL_FALLBACK_ENABLED: Resolve email-shaped login
            identifiers to legacy usernames on failed sign-in (default: True)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        if settings.migration.CACHE_AUTH_MECHANISM:
            ...
        ```
    """

    CACHE_AUTH_MECHANISM: bool = Field(
        default=False, alias="MIGRATION_CACHE_AUTH_MECHANISM"
    )
    EMAIL_FALLBACK_ENABLED: bool = Field(
        default=True, alias="MIGRATION_EMAIL_FALLBACK_ENABLED"
    )
