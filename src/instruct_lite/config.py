"""
Configuration settings for instruct-lite.

All settings are loaded from environment variables with sensible defaults.
Use a .env file for local development.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Application ===
    APP_NAME: str = "instruct-lite"
    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "development"

    # === Retry ===
    DEFAULT_MAX_RETRIES: int = 0  # Used when instruct() is called without max_retries
    MAX_ERRORS_IN_RETRY: int = 20  # Error lines fed back to the model on retry

    # === Monitoring ===
    PROMETHEUS_ENABLED: bool = True


# Global settings instance
settings = Settings()
