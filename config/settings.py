"""
Configuration settings for the application
"""
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DATABASE_URL = "sqlite+aiosqlite:///./users.db"


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,  # Allow both field name and alias
        extra="ignore",
    )

    # Service metadata
    project_name: str = Field(default="User Service", alias="PROJECT_NAME")
    api_version: str = Field(default="1.0.0", alias="API_VERSION")

    # Infrastructure configuration
    database_url: Optional[str] = Field(default=None, alias="DATABASE_URL")
    database_echo: bool = Field(default=False, alias="DATABASE_ECHO")

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_dir: str = Field(default="./logs", alias="LOG_DIR")

    # Frontend configuration (comma-separated)
    cors_origins: str = Field(default="http://localhost:5173", alias="CORS_ORIGINS")

    # Environment configuration
    env: Optional[str] = Field(default=None, alias="ENV")

    @property
    def is_production(self) -> bool:
        return bool(self.env) and self.env.lower() == "production"

    @property
    def allowed_origins(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    def resolve_database_url(self) -> str:
        """
        Return the database URL to connect to.

        Outside production a missing DATABASE_URL falls back to a local SQLite file.
        In production the URL must be set and must not point at SQLite.
        """
        if self.is_production:
            if not self.database_url:
                raise RuntimeError("DATABASE_URL must be set in production. SQLite is not allowed in production.")
            if "sqlite" in self.database_url.lower():
                raise RuntimeError("SQLite is forbidden in production. Use a server-backed DATABASE_URL.")
        return self.database_url or DEFAULT_DATABASE_URL


# Instantiate settings object
settings = Settings()
