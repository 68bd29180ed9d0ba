from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PUBG_BASE_URL = "https://api.pubg.com/shards/steam"


@dataclass(frozen=True)
class UpstreamConfig:
    """Immutable upstream settings handed to the PUBG client."""

    base_url: str = DEFAULT_PUBG_BASE_URL
    api_key: str | None = field(default=None, repr=False)
    timeout_s: float | None = None


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # pubg
    pubg_api_key: str | None = Field(default=None, repr=False)
    pubg_base_url: str = DEFAULT_PUBG_BASE_URL
    # None disables the client-side timeout.
    pubg_http_timeout_s: float | None = None

    # server
    graphql_path: str = "/"
    graphiql: bool = True
    host: str = "127.0.0.1"
    port: int = 4000

    log_level: str = "INFO"

    def upstream_config(self) -> UpstreamConfig:
        return UpstreamConfig(
            base_url=self.pubg_base_url,
            api_key=self.pubg_api_key or None,
            timeout_s=self.pubg_http_timeout_s,
        )


settings = Settings()
