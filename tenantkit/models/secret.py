"""Per-tenant third-party credentials."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Text, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from tenantkit.database import Base


class TenantSecret(Base):
    """GHL credentials - at most one row per tenant, overwritten on upsert."""

    __tablename__ = "tenant_secrets"

    tenant_id: Mapped[str] = mapped_column(
        UUID(as_uuid=False), ForeignKey("tenants.id"), primary_key=True
    )
    ghl_api_key: Mapped[str] = mapped_column(Text, nullable=False)
    ghl_location_id: Mapped[str] = mapped_column(Text, nullable=False)
    ghl_base_url: Mapped[str] = mapped_column(Text, nullable=False)
    ghl_version: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
