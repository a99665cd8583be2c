"""Configuration for the emoji search engine and its HTTP surface.

All settings can be overridden with ``EMOJI_SEARCH_*`` environment
variables or a local ``.env`` file.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings."""

    # Dataset
    data_dir: str = Field(default="data", description="Directory holding the dataset JSON files")

    # Search
    max_limit: int = Field(default=500, ge=1, description="Largest limit accepted over HTTP")

    # Per-entity scoring pool
    max_workers: int = Field(default=4, ge=1)
    min_chunk_size: int = Field(
        default=256,
        ge=1,
        description="Entities per scoring task; smaller workloads are scored inline",
    )

    # Service
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO")
    debug: bool = Field(default=False)
    cors_allowed_origins: str = Field(default="*")

    model_config = SettingsConfigDict(
        env_prefix="EMOJI_SEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins string into list."""
        return [origin.strip() for origin in self.cors_allowed_origins.split(",") if origin.strip()]


settings = Settings()
