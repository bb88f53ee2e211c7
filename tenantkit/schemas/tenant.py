"""Tenant provisioning schemas."""

from pydantic import BaseModel, field_validator


class TenantRequest(BaseModel):
    """Answers collected from the operator."""

    name: str
    label: str = "primary"
    ghl_api_key: str | None = None
    ghl_location_id: str | None = None
    ghl_base_url: str = "https://services.leadconnectorhq.com"
    ghl_version: str = "2021-07-28"

    @field_validator("ghl_api_key", "ghl_location_id", mode="before")
    @classmethod
    def blank_to_none(cls, v: str | None) -> str | None:
        if isinstance(v, str):
            v = v.strip()
        return v or None

    @property
    def has_ghl_credentials(self) -> bool:
        """True only when both the GHL key and location id were given."""
        return bool(self.ghl_api_key and self.ghl_location_id)

    @property
    def has_partial_ghl_credentials(self) -> bool:
        return bool(self.ghl_api_key) != bool(self.ghl_location_id)


class ProvisionedTenant(BaseModel):
    """What was written for a new tenant (never includes the plaintext key)."""

    tenant_id: str
    name: str
    label: str
    ghl_configured: bool = False
