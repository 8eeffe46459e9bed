"""
Application configuration.

Loads settings from environment variables (prefix ``USERAPI_``) and
an optional .env file. Defaults reproduce the service's fixed
bind address and behavior.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode (exposes /docs and /redoc).
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        host: Interface the server binds to.
        port: TCP port the server listens on.
        rate_limit_enabled: Whether per-client rate limiting of the user routes is active.
        rate_limit_default: Rate limit applied to the user routes when enabled.
    """

    model_config = SettingsConfigDict(
        env_prefix="USERAPI_", env_file=".env", env_file_encoding="utf-8"
    )

    project_name: str = "User API"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 3000
    rate_limit_enabled: bool = False
    rate_limit_default: str = "60/minute"


settings = Settings()
