"""Application settings."""

from functools import lru_cache
from pathlib import Path
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Always load `backend/.env` no matter where the process is started from.
    # Field names double as (case-insensitive) environment variable names.
    _backend_env_file = (Path(__file__).resolve().parents[2] / ".env").as_posix()
    model_config = SettingsConfigDict(env_file=_backend_env_file, env_file_encoding="utf-8", extra="ignore")

    app_name: str = "Semant Backend"
    bitext_endpoint: str = "http://svc9.bitext.com/WS_NOps_Val/Service.aspx"
    # Fallback credentials when the caller does not bring its own pair.
    bitext_user: str | None = None
    bitext_password: str | None = None
    bitext_timeout: float = Field(default=30.0, gt=0)
    # Documents longer than this are rejected locally, the service refuses them anyway.
    bitext_max_source_length: int = Field(default=8192, gt=0)
    default_language: str = "en"


@lru_cache
def get_settings() -> Settings:
    return Settings()
