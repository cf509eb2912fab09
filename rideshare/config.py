"""Centralised application settings loaded from environment / .env file."""

import logging

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Record loader
    data_directory: str = "./support"

    # Driver revenue
    platform_fee: float = 1.65  # flat fee per completed trip
    driver_share: float = 0.80  # share of the net cost paid out

    # Logging
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_prefix": "RIDESHARE_", "extra": "ignore"}


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(level=level or settings.log_level)
