"""Database models."""

from tenantkit.models.tenant import ApiKey, Tenant
from tenantkit.models.secret import TenantSecret

__all__ = ["Tenant", "ApiKey", "TenantSecret"]
