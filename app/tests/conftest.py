"""Shared fixtures for the user migration test suite."""

import pytest

from infrastructure.services import get_settings
from modules.user_migration.bootstrap import get_dispatcher

LEGACY_ENV_VARS = (
    "LEGACY_USER_POOL_ID",
    "OLD_USER_POOL_ID",
    "LEGACY_USER_POOL_REGION",
    "OLD_USER_POOL_REGION",
    "LEGACY_USER_POOL_CLIENT_ID",
    "OLD_USER_POOL_CLIENT_ID",
    "LEGACY_USER_POOL_CLIENT_SECRET",
    "LEGACY_USER_POOL_ROLE_ARN",
    "LEGACY_USER_POOL_ENDPOINT_URL",
    "LEGACY_CONNECT_TIMEOUT",
    "LEGACY_READ_TIMEOUT",
    "MIGRATION_CACHE_AUTH_MECHANISM",
    "MIGRATION_EMAIL_FALLBACK_ENABLED",
)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Environment without any migration settings and no .env file."""
    for name in LEGACY_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


@pytest.fixture(autouse=True)
def reset_process_caches():
    """Process-scoped providers must not leak between tests."""
    get_settings.cache_clear()
    get_dispatcher.cache_clear()
    yield
    get_settings.cache_clear()
    get_dispatcher.cache_clear()
