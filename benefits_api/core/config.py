"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here. Cost policy values are not
configuration; they live with the paycheck calculator.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode (exposes /docs). Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        rate_limit_enabled: Turn per-client rate limiting on or off.
        rate_limit_default: Default rate limit for all endpoints.
        data_path: Location of the JSON employee store.
        cors_origins: Origins allowed to call the API from a browser.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_prefix="BENEFITS_"
    )

    project_name: str = "Employee Benefit Cost Calculation API"
    version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"
    rate_limit_enabled: bool = True
    rate_limit_default: str = "60/minute"
    data_path: str = "data/employees.json"
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost"]


settings = Settings()
