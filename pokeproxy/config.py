# pokeproxy/config.py

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

POKEAPI_URL_TEMPLATE = "https://pokeapi.co/api/v2/pokemon/{identifier}"


class Settings(BaseSettings):
    """Process configuration, read from the environment or a local .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    port: int = Field(default=3000, ge=1, le=65535)
    host: str = "0.0.0.0"
    environment: str = Field(
        default="development",
        description="Only reported in the startup log line.",
    )
    log_level: str = "INFO"

    upstream_url_template: str = Field(
        default=POKEAPI_URL_TEMPLATE,
        description="Outbound URL; {identifier} is replaced by the lower-cased name.",
    )
    # None means the outbound call never times out
    upstream_timeout_seconds: Optional[float] = Field(default=None, gt=0)

    proxy_base_url: str = Field(
        default="http://localhost:3000",
        description="Where the search client finds the proxy.",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
