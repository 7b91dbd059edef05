"""User migration trigger configuration settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from infrastructure.configuration.integrations import LegacyPoolSettings
from infrastructure.configuration.features import MigrationFeatureSettings


class Settings(BaseSettings):
    """User migration trigger configuration settings - main aggregator.

    Aggregates the domain-specific settings into a single configuration
    object, read once at process start:

    - **Integrations**: the legacy user pool connection
    - **Features**: migration behaviour switches

    Environment Variables:
        PREFIX: Environment prefix for non-production deployments
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        GIT_SHA: Git commit SHA for deployment tracking

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        pool_id = settings.legacy_pool.USER_POOL_ID
        if settings.migration.EMAIL_FALLBACK_ENABLED:
            ...
        ```
    """

    # Application-level settings
    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    GIT_SHA: str = "Unknown"

    # Integration settings
    legacy_pool: LegacyPoolSettings

    # Feature settings
    migration: MigrationFeatureSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if PREFIX is empty (production), False otherwise.
        """
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            "legacy_pool": LegacyPoolSettings,
            "migration": MigrationFeatureSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )
