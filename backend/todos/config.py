"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - REDIS_HOST defaults to localhost; every other setting has a working default
    - get_settings() is cached (lru_cache) — single instance per process
    - Settings are read here only; handlers receive them through ServiceContext

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Listen address defaults to 0.0.0.0:5000 to match existing deployments
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Redis
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_db: int = 0
    redis_password: str | None = None
    redis_key_prefix: str = ""
    redis_max_connections: int = 50
    redis_pool_timeout_seconds: float = 5.0
    redis_socket_timeout_seconds: float = 5.0

    @field_validator("redis_key_prefix")
    @classmethod
    def normalize_key_prefix(cls, v: str) -> str:
        """Prefix always ends in ':' when set, so keys read `prefix:urn:todo:1`."""
        v = v.strip()
        if v and not v.endswith(":"):
            v += ":"
        return v

    # Server
    host: str = "0.0.0.0"
    port: int = 5000
    static_dir: str = "wwwroot"

    # API
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
