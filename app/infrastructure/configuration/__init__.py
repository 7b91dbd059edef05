"""Infrastructure configuration module - public API.

Centralized configuration management for the user migration trigger
using Pydantic BaseSettings with domain-based organization. The process
wide instance comes from `infrastructure.services.get_settings`.

Exports:
    Settings: Main settings class
    LegacyPoolSettings: Legacy user pool connection settings
    MigrationFeatureSettings: Migration behaviour switches

Example:
    ```python
    from infrastructure.services import get_settings

    region = get_settings().legacy_pool.REGION
    ```
"""

from infrastructure.configuration.settings import Settings
from infrastructure.configuration.integrations import LegacyPoolSettings
from infrastructure.configuration.features import MigrationFeatureSettings

__all__ = [
    "Settings",
    "LegacyPoolSettings",
    "MigrationFeatureSettings",
]
