"""Interactive prompts for tenant details."""

from collections.abc import Callable

from tenantkit.config import Settings
from tenantkit.errors import TenantValidationError
from tenantkit.schemas.tenant import TenantRequest

Reader = Callable[[str], str]


def ask(question: str, default: str | None = None, reader: Reader = input) -> str | None:
    """Read one answer; blank input returns ``default``."""
    try:
        answer = reader(question)
    except EOFError as exc:
        raise TenantValidationError("Input closed before all answers were given.") from exc
    return answer.strip() or default


def collect_request(settings: Settings, reader: Reader = input) -> TenantRequest:
    """Prompt for the six tenant fields, in order."""
    name = ask("Tenant name (company): ", reader=reader)
    if not name:
        raise TenantValidationError("Tenant name is required.")

    label = ask(
        f"API key label [{settings.default_key_label}]: ",
        settings.default_key_label,
        reader,
    )
    ghl_api_key = ask("GHL API key (press Enter to skip for now): ", reader=reader)
    ghl_location_id = ask("GHL Location ID (press Enter to skip for now): ", reader=reader)

    # Rarely changed; Enter keeps the defaults.
    ghl_base_url = ask(f"GHL Base URL [{settings.ghl_base_url}]: ", settings.ghl_base_url, reader)
    ghl_version = ask(f"GHL Version [{settings.ghl_version}]: ", settings.ghl_version, reader)

    return TenantRequest(
        name=name,
        label=label,
        ghl_api_key=ghl_api_key,
        ghl_location_id=ghl_location_id,
        ghl_base_url=ghl_base_url,
        ghl_version=ghl_version,
    )
