"""Console output for create-tenant."""

from tenantkit.auth.keys import bearer_header
from tenantkit.schemas.tenant import ProvisionedTenant

RULE = "-" * 50
EXECUTE_HINT = "POST /api/execute  (use your deployed base URL)"
GHL_FALLBACK_NOTE = (
    "ℹ️  Note: You skipped tenant_secrets. This tenant will only work if your server "
    "has env GHL_API_KEY + GHL_LOCATION_ID set (single-tenant fallback)."
)


def render_success(tenant: ProvisionedTenant, api_key: str) -> list[str]:
    lines = [
        "",
        "✅ Tenant created!",
        RULE,
        f"Tenant:     {tenant.name}",
        f"Tenant ID:  {tenant.tenant_id}",
        f"Key label:  {tenant.label}",
        "",
        "🔑 API Key (SAVE THIS NOW - it will not be shown again):",
        api_key,
        "",
        "📌 n8n Header:",
        bearer_header(api_key),
        "",
        "📍 Execute endpoint:",
        EXECUTE_HINT,
        RULE,
        "",
    ]
    if not tenant.ghl_configured:
        lines.append(GHL_FALLBACK_NOTE)
    return lines


def render_failure(error: BaseException | str) -> str:
    message = str(error) or type(error).__name__
    return f"\n❌ create-tenant failed: {message}"
