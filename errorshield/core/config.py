"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here. No scattered magic strings.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

DEVELOPMENT = "development"


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        environment: Deployment environment name (development, staging,
            production).
        expose_errors: Explicit override for error disclosure. When unset,
            disclosure follows the environment.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        rate_limit_default: Default rate limit for all endpoints.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "errorshield"
    version: str = "0.1.0"
    environment: str = "production"
    expose_errors: Optional[bool] = None
    log_level: str = "INFO"
    rate_limit_default: str = "60/minute"

    @property
    def disclose_errors(self) -> bool:
        """Whether raw error messages may be shown to clients."""
        if self.expose_errors is not None:
            return self.expose_errors
        return self.environment.lower() == DEVELOPMENT


settings = Settings()
