from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration, read from ``GEOIP_RS_*`` environment variables or a ``.env`` file."""

    model_config = SettingsConfigDict(
        env_prefix="GEOIP_RS_",
        env_file=".env",
        extra="ignore",
    )

    db_path: str | None = Field(
        default=None,
        description="Path to the MaxMind City database (.mmdb). Required at startup.",
    )
    country_names: str | None = Field(
        default=None,
        description='Optional JSON file of localized country names: {"<lang>": {"<code>": "<name>"}}.',
    )
    host: str = "127.0.0.1"
    port: int = 3000


@lru_cache
def get_settings() -> Settings:
    return Settings()
