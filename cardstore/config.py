"""Card store configuration."""

import logging

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Card store settings."""

    # Database
    database_url: str = "sqlite:///./cards.db"
    database_echo: bool = False  # Set to True for SQL statement logging in development
    pool_pre_ping: bool = True
    lock_timeout_ms: int = 5000  # PostgreSQL only

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )


def configure_logging(config: Settings) -> None:
    """Configure root logging for processes that embed the card store."""
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


settings = Settings()
