from functools import lru_cache
from typing import Any, Optional, Tuple, Type

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import (
    BaseSettings,
    DotEnvSettingsSource,
    EnvSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from luckydraw.utils.constants import CELEBRATION_DURATION_MS, LANDED_DWELL_MS, SPIN_DURATION_MS


class NonEmptyEnvSource(EnvSettingsSource):
    def __call__(self) -> dict[str, Any]:
        data = super().__call__()
        # filter out empty values
        return {k: v for k, v in data.items() if v not in (None, "")}


class RevealTimings(BaseModel):
    spin_ms: int = Field(default=SPIN_DURATION_MS, ge=0, description="Wheel transition duration")
    landed_dwell_ms: int = Field(default=LANDED_DWELL_MS, ge=0, description="Pause on the stopped sector")
    celebration_ms: int = Field(default=CELEBRATION_DURATION_MS, ge=0, description="Confetti display time")


class BackendConfig(BaseModel):
    base_url: str = Field(default="http://localhost:8000", description="Lucky draw backend root URL")
    access_token: Optional[str] = Field(default=None, description="Bearer token for admin endpoints")
    timeout: int = Field(default=30, ge=1, description="Total request timeout in seconds")
    verify_ssl: bool = Field(default=True, description="Verify TLS certificates with certifi")

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        extra="ignore",
        env_file=".env",
        env_prefix="LUCKYDRAW_",
        env_nested_delimiter="__",
        nested_model_default_partial_update=False,
    )

    # Application configuration
    program_name: str = Field(default="Lucky Draw", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")

    # Campaign configuration
    organization_id: int = Field(default=1, description="Organization whose draw is shown on the entry form")
    fallback_lucky_draw_id: int = Field(default=1, description="Draw used when organization data is unavailable")

    backend: BackendConfig = Field(default_factory=BackendConfig, description="Backend API configuration")
    reveal: RevealTimings = Field(default_factory=RevealTimings, description="Spin wheel timings")

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        source = [
            init_settings,
            NonEmptyEnvSource(settings_cls=settings_cls),
            DotEnvSettingsSource(settings_cls=settings_cls),
            file_secret_settings,
        ]

        return (*source,)


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
