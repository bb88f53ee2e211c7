"""Repository functions for tenants, API keys and tenant secrets."""

from sqlalchemy import func, insert
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from tenantkit.models import ApiKey, Tenant, TenantSecret


def tenant_insert_stmt(name: str):
    return insert(Tenant).values(name=name).returning(Tenant.id)


def api_key_insert_stmt(tenant_id: str, key_hash: str, label: str):
    return insert(ApiKey).values(tenant_id=tenant_id, key_hash=key_hash, label=label)


def tenant_secret_upsert_stmt(
    tenant_id: str,
    ghl_api_key: str,
    ghl_location_id: str,
    ghl_base_url: str,
    ghl_version: str,
):
    """
    INSERT .. ON CONFLICT (tenant_id) DO UPDATE.

    An existing row is fully overwritten, never merged, and updated_at is refreshed.
    """
    stmt = pg_insert(TenantSecret).values(
        tenant_id=tenant_id,
        ghl_api_key=ghl_api_key,
        ghl_location_id=ghl_location_id,
        ghl_base_url=ghl_base_url,
        ghl_version=ghl_version,
    )
    return stmt.on_conflict_do_update(
        index_elements=[TenantSecret.tenant_id],
        set_={
            "ghl_api_key": stmt.excluded.ghl_api_key,
            "ghl_location_id": stmt.excluded.ghl_location_id,
            "ghl_base_url": stmt.excluded.ghl_base_url,
            "ghl_version": stmt.excluded.ghl_version,
            "updated_at": func.now(),
        },
    )


async def insert_tenant(db: AsyncSession, name: str) -> str:
    """Create tenant row and return its generated id."""
    result = await db.execute(tenant_insert_stmt(name))
    return str(result.scalar_one())


async def insert_api_key(db: AsyncSession, tenant_id: str, key_hash: str, label: str) -> None:
    await db.execute(api_key_insert_stmt(tenant_id, key_hash, label))


async def upsert_tenant_secret(
    db: AsyncSession,
    tenant_id: str,
    ghl_api_key: str,
    ghl_location_id: str,
    ghl_base_url: str,
    ghl_version: str,
) -> None:
    await db.execute(
        tenant_secret_upsert_stmt(
            tenant_id, ghl_api_key, ghl_location_id, ghl_base_url, ghl_version
        )
    )
