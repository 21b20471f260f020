from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="GITREV_", case_sensitive=False)

    git_executable: str = "git"
    git_timeout: float | None = None
    file_mode: int | None = None
    verbose: bool = False


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
