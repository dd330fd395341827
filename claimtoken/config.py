"""
Configuration management for claim token services.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class TokenSettings(BaseSettings):
    """Settings consumed by ``TokenService``; the core functions never read them."""

    model_config = SettingsConfigDict(
        env_prefix="CLAIMTOKEN_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    # Environment
    env: str = "local"
    log_level: str = "info"

    # Security
    signing_key: Optional[SecretStr] = None

    # Token lifetime
    default_ttl_seconds: Optional[int] = Field(default=None, gt=0)
    leeway_seconds: int = Field(default=0, ge=0)


@lru_cache()
def get_settings() -> TokenSettings:
    """Get cached settings loaded from the environment."""
    return TokenSettings()
