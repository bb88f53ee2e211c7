"""Shared fixtures."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from tenantkit.config import Settings

TENANT_ID = "6f1c2a8e-6d35-4a0c-9b7e-2f1b7f0f9a11"


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, database_url="postgresql://tk:tk@localhost:5432/tk")


@pytest.fixture
def session():
    """AsyncSession double; the first execute() returns the new tenant id."""
    db = AsyncMock()
    tenant_result = MagicMock()
    tenant_result.scalar_one.return_value = TENANT_ID
    db.execute.return_value = tenant_result
    return db
