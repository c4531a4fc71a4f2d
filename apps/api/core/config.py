"""
Centralized configuration management with validation.

All environment variables are loaded and validated here.
This ensures consistent configuration across the application.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from typing import Optional
from dotenv import load_dotenv

load_dotenv()


class Settings(BaseSettings):
    """Application settings with validation."""

    # Pydantic v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore"
    )

    # Database Configuration (libpq-style names)
    # DATABASE_URL wins when set, e.g. for tests or managed hosting.
    DATABASE_URL: Optional[str] = Field(default=None)
    PGUSER: str = Field(default="postgres")
    PGPASSWORD: str = Field(default="postgres")
    PGDATABASE: str = Field(default="fittrack")
    PGHOST: str = Field(default="localhost")
    PGPORT: int = Field(default=5432)
    PGSSLMODE: Optional[str] = Field(default=None)  # e.g. "require" for hosted Postgres

    # Database Pool Configuration
    DB_POOL_SIZE: int = Field(default=10)
    DB_MAX_OVERFLOW: int = Field(default=10)
    DB_POOL_TIMEOUT: int = Field(default=30)
    DB_POOL_RECYCLE: int = Field(default=3600)  # 1 hour

    # JWT Authentication - REQUIRED for token signing
    # Must be set via environment variable, never use default in production
    SECRET_KEY: str = Field(
        default=...,  # Required - no default
        description="JWT signing key. Must be cryptographically secure (32+ chars). "
                    "Generate with: python -c \"import secrets; print(secrets.token_urlsafe(32))\""
    )
    ACCESS_TOKEN_EXPIRE_DAYS: int = Field(default=7, ge=1)

    # bcrypt cost factor; 10 is roughly 100ms per verify on commodity hardware
    BCRYPT_ROUNDS: int = Field(default=10, ge=4, le=31)

    # API Configuration
    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=5068)

    # Logging Configuration
    LOG_LEVEL: str = Field(default="INFO")
    LOG_FORMAT: str = Field(default="json")  # json or text

    # Environment
    ENVIRONMENT: str = Field(default="development")
    DEBUG: bool = Field(default=False)

    # CORS - comma-separated list of allowed origins; all origins when unset
    CORS_ORIGINS: Optional[str] = Field(default=None)

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        url = (
            f"postgresql://{self.PGUSER}:"
            f"{self.PGPASSWORD}@"
            f"{self.PGHOST}:"
            f"{self.PGPORT}/"
            f"{self.PGDATABASE}"
        )
        if self.PGSSLMODE:
            url += f"?sslmode={self.PGSSLMODE}"
        return url


# Global settings instance
settings = Settings()
