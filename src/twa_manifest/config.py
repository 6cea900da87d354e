"""Runtime settings for twa-manifest.

Only the I/O seams read these; derivation and validation are pure.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """twa-manifest settings, overridable through TWA_MANIFEST_* env vars."""

    model_config = SettingsConfigDict(env_prefix="TWA_MANIFEST_", env_file=".env", extra="ignore")

    fetch_timeout: float = Field(
        default=15.0, gt=0, description="Timeout in seconds for fetching a web manifest"
    )
    user_agent: str = Field(
        default="twa-manifest/0.1", description="User-Agent header sent with manifest fetches"
    )
    follow_redirects: bool = Field(
        default=True, description="Follow HTTP redirects when fetching a web manifest"
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
