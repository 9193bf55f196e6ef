"""
app/core/config.py

Purpose: Application configuration

- Loads environment variables
- Centralizes config values (DB URI, mail API, etc.)
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

    # MongoDB
    MONGODB_URL: str = Field(
        default="mongodb://localhost:27017",
        description="MongoDB connection URI"
    )
    MONGODB_DB_NAME: str = Field(
        default="userhub",
        description="MongoDB database name"
    )
    USERS_COLLECTION: str = Field(
        default="Users",
        description="Collection holding user records"
    )

    # Transactional mail API
    MAIL_API_URL: str = Field(
        default="http://localhost:8025/api/v1/send",
        description="HTTP endpoint accepting outbound mail"
    )
    MAIL_API_KEY: Optional[str] = Field(
        default=None,
        description="Bearer token for the mail API"
    )
    MAIL_SENDER: str = Field(
        default="no-reply@userhub.local",
        description="Fixed From address for notifications"
    )
    MAIL_TIMEOUT: float = Field(
        default=10.0,
        description="Mail API request timeout in seconds"
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
        default="",
        description="API route prefix"
    )
    CORS_ORIGINS: list = Field(
        default=["*"],
        description="Allowed CORS origins"
    )

    @validator("MAIL_API_KEY")
    def validate_mail_key(cls, v, values):
        """Ensure the mail key is set in production."""
        if values.get("ENVIRONMENT") == "production" and not v:
            raise ValueError("MAIL_API_KEY is required in production environment")
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

    if not settings.MONGODB_URL:
        errors.append("MONGODB_URL is required")

    if not settings.USERS_COLLECTION:
        errors.append("USERS_COLLECTION is required")

    if not settings.MAIL_API_URL:
        errors.append("MAIL_API_URL is required")

    if not settings.MAIL_SENDER:
        errors.append("MAIL_SENDER is required")

    # Production-specific validations
    if settings.is_production:
        if not settings.MAIL_API_KEY:
            errors.append("MAIL_API_KEY is required in production")

    if errors:
        raise ValueError(f"Configuration validation failed: {', '.join(errors)}")

    return True
