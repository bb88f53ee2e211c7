"""Transactional tenant writer."""

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from tenantkit.database import DatabasePool
from tenantkit.errors import TenantKitError, TenantValidationError
from tenantkit.schemas.tenant import ProvisionedTenant, TenantRequest
from tenantkit.storage.repositories import insert_api_key, insert_tenant, upsert_tenant_secret

logger = logging.getLogger(__name__)

PARTIAL_GHL_MESSAGE = (
    "If you provide GHL credentials, you must provide BOTH API key and Location ID."
)


@dataclass
class ProvisionResult:
    """Outcome of ``write_tenant``: either ``tenant`` or ``error`` is set."""

    tenant: ProvisionedTenant | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, tenant: ProvisionedTenant) -> "ProvisionResult":
        return cls(tenant=tenant)

    @classmethod
    def failure(cls, error: Exception) -> "ProvisionResult":
        return cls(error=error)


async def write_tenant(db: AsyncSession, request: TenantRequest, key_hash: str) -> ProvisionResult:
    """
    Insert tenant, API key hash and (optionally) GHL secrets, then commit.

    All statements share the session's transaction. Failures are returned,
    not raised; the caller rolls back.
    """
    try:
        tenant_id = await insert_tenant(db, request.name)
        logger.info("Inserted tenant %s", tenant_id)

        await insert_api_key(db, tenant_id, key_hash, request.label)

        if request.ghl_api_key or request.ghl_location_id:
            if request.has_partial_ghl_credentials:
                raise TenantValidationError(PARTIAL_GHL_MESSAGE)
            await upsert_tenant_secret(
                db,
                tenant_id,
                request.ghl_api_key,
                request.ghl_location_id,
                request.ghl_base_url,
                request.ghl_version,
            )
            logger.info("Stored GHL credentials for tenant %s", tenant_id)

        await db.commit()
    except (SQLAlchemyError, OSError, asyncio.TimeoutError, TenantKitError) as exc:
        logger.error("Tenant write failed: %s", exc)
        return ProvisionResult.failure(exc)

    return ProvisionResult.success(
        ProvisionedTenant(
            tenant_id=tenant_id,
            name=request.name,
            label=request.label,
            ghl_configured=request.has_ghl_credentials,
        )
    )


async def rollback_quietly(db: AsyncSession) -> None:
    """Roll back, logging and suppressing any rollback failure."""
    try:
        await db.rollback()
    except (SQLAlchemyError, OSError, asyncio.TimeoutError) as exc:
        logger.warning("Rollback failed: %s", exc)


@asynccontextmanager
async def provisioning_session(pool: DatabasePool) -> AsyncIterator[AsyncSession]:
    """Session whose transaction is rolled back unless it was committed."""
    session = pool.session()
    try:
        yield session
    except BaseException:
        await rollback_quietly(session)
        raise
    finally:
        await session.close()


async def provision_tenant(pool: DatabasePool, request: TenantRequest, key_hash: str) -> ProvisionResult:
    """Run ``write_tenant`` on a fresh session; a failed result triggers rollback."""
    async with provisioning_session(pool) as session:
        result = await write_tenant(session, request, key_hash)
        if not result.ok:
            await rollback_quietly(session)
        return result
