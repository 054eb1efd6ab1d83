# sizing/config.py
from functools import lru_cache
from typing import Annotated, Tuple

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Process settings, read from SIZING_* environment variables."""

    model_config = SettingsConfigDict(env_prefix="SIZING_", frozen=True)

    api_version: str = Field(default="1.0.0", description="Version reported by health")
    environment: str = Field(default="production", description="Environment reported by health")
    cors_origins: Annotated[Tuple[str, ...], NoDecode] = Field(
        default=("*",),
        description="Allowed CORS origins, comma-separated in the environment",
    )
    log_level: str = Field(default="INFO", description="Root log level")

    @field_validator("cors_origins", mode="before")
    @classmethod
    def split_origins(cls, v):
        if isinstance(v, str):
            v = [o.strip() for o in v.split(",")]
        origins = tuple(o for o in v if o)
        return origins or ("*",)

    @field_validator("log_level")
    @classmethod
    def upper_level(cls, v: str) -> str:
        return v.upper()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
