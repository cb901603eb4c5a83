from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PodpoolSettings(BaseSettings):
    pod_count: int = Field(14, ge=1)
    changeover: int = Field(5, ge=0)  # minutes
    policy: Literal["start_time_first", "headcount_first"] = "start_time_first"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    model_config = SettingsConfigDict(env_prefix="PODPOOL_")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


@lru_cache
def get_settings() -> PodpoolSettings:
    return PodpoolSettings()
