"""Error types raised while provisioning a tenant."""


class TenantKitError(Exception):
    """Base class for errors reported to the operator."""


class ConfigurationError(TenantKitError):
    """Required configuration is missing or invalid."""


class TenantValidationError(TenantKitError):
    """Operator input failed validation."""
