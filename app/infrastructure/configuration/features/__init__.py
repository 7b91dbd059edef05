"""Feature settings __init__ - exports all feature settings."""

from infrastructure.configuration.features.migration import MigrationFeatureSettings

__all__ = [
    "MigrationFeatureSettings",
]
