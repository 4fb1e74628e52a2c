"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here, with no scattered magic strings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode (exposes /docs). Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        host: Interface the bundled server binds to.
        port: Port the bundled server listens on.
        default_error_status: Status used when an error value is emitted
            and no status has been set for the request.
        rate_limit_enabled: Toggle for the global rate limiter.
        rate_limit_default: Default rate limit for all endpoints.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_prefix="CATALOG_"
    )

    project_name: str = "Catalog"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8080
    default_error_status: int = 400
    rate_limit_enabled: bool = True
    rate_limit_default: str = "60/minute"


settings = Settings()
