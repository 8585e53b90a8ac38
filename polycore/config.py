from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PORT = 3001
DEFAULT_OPENAI_MODEL = "gpt-3.5-turbo"
DEFAULT_PROVIDER_TIMEOUT_SEC = 10.0


class Settings(BaseSettings):
    # Server
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    reload: bool = False
    log_level: str = "info"

    # Providers. Both spellings are accepted so the frontend's .env can be shared.
    youtube_api_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("YOUTUBE_API_KEY", "VITE_YOUTUBE_API_KEY", "youtube_api_key"),
    )
    openai_api_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("OPENAI_API_KEY", "VITE_OPENAI_API_KEY", "openai_api_key"),
    )
    openai_model: str = DEFAULT_OPENAI_MODEL
    openai_base_url: Optional[str] = None
    provider_timeout_sec: float = DEFAULT_PROVIDER_TIMEOUT_SEC

    # Frontend
    static_dir: Path = Path("dist")
    cors_origins: str = "*"  # comma-separated

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )

    @field_validator("log_level")
    @classmethod
    def _lower_log_level(cls, value: str) -> str:
        return value.lower()

    @property
    def cors_origin_list(self) -> List[str]:
        origins = [o.strip() for o in self.cors_origins.split(",") if o.strip()]
        return origins or ["*"]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
