"""Centralised application settings loaded from environment / .env file."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_title: str = "Detour Planner API"

    # Logging
    log_level: str = "INFO"

    # Rate limiting (slowapi syntax)
    rate_limit: str = "100/minute"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
