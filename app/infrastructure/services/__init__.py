"""
Dependency injection services.

Provides provider functions for process-scoped infrastructure services.
"""

from infrastructure.services.providers import (
    get_settings,
    build_legacy_cognito_client,
)

__all__ = [
    "get_settings",
    "build_legacy_cognito_client",
]
