"""Application settings and configuration."""

from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_default_data_dir() -> Path:
    """Return the default data directory for the local document store."""
    return Path.home() / ".bankstore"


class Settings(BaseSettings):
    """Store configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="BANKSTORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Which document store backs the repositories
    store_backend: Literal["sqlalchemy", "cosmos"] = "sqlalchemy"

    # Local store (derived from data_dir if database_url is not set)
    data_dir: Optional[Path] = None
    database_url: Optional[str] = None

    # Cosmos connection, never hard-coded
    cosmos_endpoint: Optional[str] = None
    cosmos_key: Optional[SecretStr] = None
    application_name: str = "BankProject"
    cosmos_create_containers: bool = False

    # Logical database/container names
    accounts_database: str = "Accounts"
    accounts_container: str = "accounts"
    users_database: str = "BankUsers"
    users_container: str = "bankUsers"

    query_page_size: int = Field(default=100, ge=1)
    log_level: str = "INFO"

    def get_data_dir(self) -> Path:
        """Get the data directory, creating it if needed."""
        data_dir = self.data_dir or get_default_data_dir()
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir

    def get_database_url(self) -> str:
        """Get database URL, deriving from data_dir if not set."""
        if self.database_url:
            return self.database_url
        db_path = self.get_data_dir() / "documents.db"
        return f"sqlite:///{db_path}"


# Global settings instance (can be replaced at runtime)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the current settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Reset settings to force reload."""
    global _settings
    _settings = None
