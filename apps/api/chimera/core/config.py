"""Application configuration."""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from chimera.core.networks import DEFAULT_NETWORK, get_network
from chimera.schemas.network import Network


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables."""

    network: str = DEFAULT_NETWORK
    deploy_secret: str | None = None

    model_config = SettingsConfigDict(env_prefix="CHIMERA_", extra="ignore")

    @field_validator("network")
    @classmethod
    def _known_network(cls, value: str) -> str:
        get_network(value)
        return value

    @property
    def active_network(self) -> Network:
        return get_network(self.network)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
