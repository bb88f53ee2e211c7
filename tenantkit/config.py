"""Application configuration."""

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tenantkit.errors import ConfigurationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    database_url: str
    app_env: str = "development"
    ghl_base_url: str = "https://services.leadconnectorhq.com"
    ghl_version: str = "2021-07-28"
    default_key_label: str = "primary"
    log_level: str = "INFO"

    @field_validator("database_url", mode="before")
    @classmethod
    def require_db_url(cls, v):
        if v is None or (isinstance(v, str) and not v.strip()):
            raise ValueError("DATABASE_URL is empty")
        return v.strip() if isinstance(v, str) else v

    @field_validator("database_url", mode="after")
    @classmethod
    def normalize_db_url(cls, v: str) -> str:
        """Ensure postgresql+asyncpg scheme (hosted providers give postgresql://)."""
        if v.startswith("postgres://"):
            v = v.replace("postgres://", "postgresql://", 1)
        if v.startswith("postgresql://") and "+asyncpg" not in v:
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    @field_validator("log_level", mode="after")
    @classmethod
    def check_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")
        return level

    @property
    def is_production(self) -> bool:
        return self.app_env.lower() == "production"


def load_settings(**overrides) -> Settings:
    """Build settings from the environment, failing fast without DATABASE_URL."""
    try:
        return Settings(**overrides)
    except ValidationError as exc:
        if any(err["loc"] == ("database_url",) for err in exc.errors()):
            raise ConfigurationError("Missing DATABASE_URL env var") from exc
        raise ConfigurationError(str(exc)) from exc
