"""
app/core/config.py

Purpose: Application configuration

- Loads environment variables
- Centralizes config values (store backend, DB URI, email relay, etc.)
- Validates configuration on startup
- Environment-specific settings
"""

from pydantic import Field, validator
from pydantic_settings import BaseSettings
from typing import Optional, Literal


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    Validates all required configs on startup.
    """

    # Environment
    ENVIRONMENT: Literal["development", "staging", "production"] = "development"

    # Identity store
    STORE_BACKEND: Literal["memory", "mongo"] = Field(
        default="memory",
        description="Where user records live: in-process map or MongoDB"
    )
    MIN_PASSWORD_LENGTH: int = Field(
        default=6,
        description="Minimum password length accepted at registration"
    )

    # MongoDB
    MONGODB_URL: str = Field(
        default="mongodb://localhost:27017",
        description="MongoDB connection URI"
    )
    MONGODB_DB_NAME: str = Field(
        default="medicover",
        description="MongoDB database name"
    )

    # Login notification email relay
    EMAIL_API_URL: Optional[str] = Field(
        default=None,
        description="HTTP endpoint of the transactional email relay"
    )
    EMAIL_API_KEY: Optional[str] = Field(
        default=None,
        description="Bearer key for the email relay"
    )
    EMAIL_FROM: str = Field(
        default="security@medicover.local",
        description="Sender address for notifications"
    )
    EMAIL_FROM_NAME: str = Field(
        default="Medicover Security",
        description="Sender display name for notifications"
    )
    EMAIL_TIMEOUT: float = Field(
        default=10.0,
        description="Email relay request timeout in seconds"
    )

    # Application
    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    API_PREFIX: str = Field(
        default="/api",
        description="API route prefix"
    )
    CORS_ORIGINS: list = Field(
        default=["*"],
        description="Allowed CORS origins"
    )
    PORT: int = Field(
        default=5000,
        description="Port used when running the module directly"
    )

    @validator("MONGODB_URL")
    def validate_mongodb_url(cls, v, values):
        """Mongo backend needs a real connection string."""
        if values.get("STORE_BACKEND") == "mongo" and not v:
            raise ValueError("MONGODB_URL is required when STORE_BACKEND is 'mongo'")
        return v

    @validator("MIN_PASSWORD_LENGTH")
    def validate_min_password_length(cls, v):
        if v < 1:
            raise ValueError("MIN_PASSWORD_LENGTH must be positive")
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"

    class Config:
        env_file = ".env"
        case_sensitive = True
        env_file_encoding = "utf-8"


# Global settings instance
settings = Settings()


def validate_settings():
    """
    Validates critical settings on application startup.
    Raises ValueError if any required setting is missing or invalid.
    """
    errors = []

    if settings.STORE_BACKEND == "mongo" and not settings.MONGODB_DB_NAME:
        errors.append("MONGODB_DB_NAME is required for the mongo store backend")

    if settings.EMAIL_API_URL and not settings.EMAIL_API_KEY:
        errors.append("EMAIL_API_KEY is required when EMAIL_API_URL is set")

    if errors:
        raise ValueError(f"Configuration validation failed: {', '.join(errors)}")

    return True
