"""
Application configuration with Pydantic Settings for validation and type safety.
Supports environment-specific configurations and .env file loading.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Environment(str, Enum):
    """Application environment types"""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


@dataclass(frozen=True)
class DatabaseConfig:
    """Resolved connection parameters for the relational store."""

    url: str
    connect_args: dict[str, Any] = field(default_factory=dict)
    ssl: bool = False


class Settings(BaseSettings):
    """
    Application settings with validation.
    Settings are loaded from environment variables or .env file.
    """

    # Application settings
    app_name: str = Field(default="NutriApp", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    environment: Environment = Field(
        default=Environment.DEVELOPMENT, description="Application environment"
    )
    debug: bool = Field(default=False, description="Debug mode")

    # Server settings
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=3000, ge=1, le=65535, description="Server port")

    # Database settings - a full connection string wins over discrete parameters
    database_url: Optional[str] = Field(
        default=None, description="Full connection string (enables SSL)"
    )
    db_user: str = Field(default="postgres", description="Database user")
    db_password: str = Field(default="", description="Database password")
    db_host: str = Field(default="localhost", description="Database host")
    db_port: int = Field(default=5432, ge=1, le=65535, description="Database port")
    db_database: str = Field(default="nutriapp", description="Database name")
    db_echo: bool = Field(default=False, description="SQLAlchemy echo SQL statements")
    db_init_attempts: int = Field(
        default=8, ge=1, description="Database initialization retry attempts"
    )
    db_init_delay_sec: float = Field(
        default=2.0, ge=0, description="Delay between DB init attempts"
    )

    # Token signing
    jwt_secret: str = Field(
        default="change-me-in-production", description="Secret used to sign tokens"
    )
    jwt_algorithm: str = Field(default="HS256", description="Token signing algorithm")
    token_expire_hours: int = Field(
        default=24, ge=1, description="Session token lifetime in hours"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(
        default="%(asctime)s %(levelname)s %(name)s: %(message)s",
        description="Log format string",
    )

    # CORS settings
    cors_origins: list[str] = Field(default=["*"], description="Allowed CORS origins")
    cors_allow_credentials: bool = Field(
        default=True, description="Allow CORS credentials"
    )
    cors_allow_methods: list[str] = Field(
        default=["*"], description="Allowed HTTP methods"
    )
    cors_allow_headers: list[str] = Field(
        default=["*"], description="Allowed HTTP headers"
    )

    # API settings
    api_title: str = Field(default="NutriApp API", description="API documentation title")
    api_description: str = Field(
        default="Nutrition tracking, meal planning and community backend",
        description="API documentation description",
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    @field_validator("environment", mode="before")
    @classmethod
    def validate_environment(cls, v):
        """Validate and normalize environment value"""
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    @field_validator("database_url", mode="before")
    @classmethod
    def blank_database_url(cls, v):
        """Treat an empty DATABASE_URL as unset"""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def database_config(self) -> DatabaseConfig:
        """
        Resolve the store connection once.

        A DATABASE_URL (hosted deployments) is preferred and turns on encrypted
        transport; otherwise the discrete DB_* parameters are used without SSL.
        """
        if self.database_url:
            url = self.database_url
            if url.startswith("postgres://"):
                url = "postgresql+psycopg2://" + url[len("postgres://"):]
            elif url.startswith("postgresql://"):
                url = "postgresql+psycopg2://" + url[len("postgresql://"):]
            return DatabaseConfig(url=url, connect_args={"sslmode": "require"}, ssl=True)

        url = URL.create(
            "postgresql+psycopg2",
            username=self.db_user,
            password=self.db_password or None,
            host=self.db_host,
            port=self.db_port,
            database=self.db_database,
        )
        return DatabaseConfig(url=url.render_as_string(hide_password=False))

    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.environment == Environment.PRODUCTION

    def is_development(self) -> bool:
        """Check if running in development environment"""
        return self.environment == Environment.DEVELOPMENT


# Global settings instance
settings = Settings()
