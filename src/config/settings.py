"""
Application settings with Pydantic v2 validation.

Loads configuration from environment variables with sensible defaults.
"""

from pathlib import Path
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseSettings):
    """SQLite storage configuration."""

    model_config = SettingsConfigDict(env_prefix="STORAGE_")

    data_dir: Path = Path("data")
    db_name: str = "pos.db"

    # SQLite settings
    pool_size: int = 5
    busy_timeout: int = 30000  # ms

    @property
    def db_path(self) -> Path:
        return self.data_dir / self.db_name


class DatabaseSettings(BaseSettings):
    """Postgres connection used by the schema repair tool."""

    model_config = SettingsConfigDict(env_prefix="")

    database_url: str | None = None
    database_schema: str = "public"
    database_connect_timeout: float = 10.0


class ReceiptSettingsConfig(BaseSettings):
    """Receipt rendering, archiving and printing configuration."""

    model_config = SettingsConfigDict(env_prefix="RECEIPT_")

    receipts_dir: Path = Path("receipts")
    settings_file: Path = Path("data/receipt-settings.json")
    default_paper_size: Literal["80x60", "80x70", "80x80", "a6"] = "80x80"
    currency_symbol: str = "MT"
    brand_name: str = "Maute360"
    footer_text: str = "Obrigado pela preferência!"

    # Print surface timing (seconds)
    settle_delay: float = 0.15
    teardown_delay: float = 1.0

    # Platform print command; the staged file path is appended
    print_command: list[str] = ["lp"]
    spool_dir: Path | None = None


class ClientSettings(BaseSettings):
    """HTTP client configuration for till-side commands."""

    model_config = SettingsConfigDict(env_prefix="POS_")

    base_url: str = "http://localhost:5000"
    timeout: float = 15.0
    user_id: str | None = None

    # Retry settings (idempotent requests only)
    max_retries: int = 3
    retry_delay: float = 0.5

    # First-run setup
    redirect_delay: float = 2.0


class SeedSettings(BaseSettings):
    """Default data written by the first-run seed."""

    model_config = SettingsConfigDict(env_prefix="SEED_")

    admin_username: str = "admin"
    admin_password: str = "senha123"
    admin_name: str = "Administrador"
    bcrypt_rounds: int = 10


class APISettings(BaseSettings):
    """API server configuration."""

    model_config = SettingsConfigDict(env_prefix="API_")

    host: str = "0.0.0.0"
    port: int = 5000
    debug: bool = False
    cors_origins: list[str] = ["*"]


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Maute360 POS"
    app_version: str = "1.0.0"
    environment: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Sub-settings
    storage: StorageSettings = Field(default_factory=StorageSettings)
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    receipt: ReceiptSettingsConfig = Field(default_factory=ReceiptSettingsConfig)
    client: ClientSettings = Field(default_factory=ClientSettings)
    seed: SeedSettings = Field(default_factory=SeedSettings)
    api: APISettings = Field(default_factory=APISettings)

    @field_validator("storage", mode="before")
    @classmethod
    def ensure_data_dir(cls, v: Any) -> StorageSettings:
        if isinstance(v, dict):
            settings = StorageSettings(**v)
        else:
            settings = v or StorageSettings()
        settings.data_dir.mkdir(parents=True, exist_ok=True)
        return settings


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings (for testing)."""
    global _settings
    _settings = None
