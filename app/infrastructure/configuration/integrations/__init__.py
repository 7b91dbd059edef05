"""Integration settings __init__ - exports all integration settings."""

from infrastructure.configuration.integrations.legacy_pool import LegacyPoolSettings

__all__ = [
    "LegacyPoolSettings",
]
