"""
Yahtzee - Application Settings

Loads configuration from environment variables (or a ``.env`` file) using
Pydantic Settings.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    debug: bool = False
    log_level: str = "INFO"

    # Gameplay
    rng_seed: int | None = None
    flash_delay: float = Field(default=0.1, ge=0.0)

    # Display
    use_color: bool = True

    model_config = {
        "env_prefix": "YAHTZEE_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    return Settings()
