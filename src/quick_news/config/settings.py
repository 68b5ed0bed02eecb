from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from quick_news.kit.errors import ConfigError

DEFAULT_BASE_URL = "https://newsapi.org/v2"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # NewsAPI
    api_key: str = ''
    newsapi_base_url: str = DEFAULT_BASE_URL

    # Logging
    log_path: str = 'logs/quick-news.log'
    log_level: str = 'INFO'

    @field_validator('log_level', mode='before')
    def _upper(cls, v):  # type: ignore
        return str(v or 'INFO').upper()


def require_api_key(s: Settings) -> str:
    key = (s.api_key or '').strip()
    if not key:
        raise ConfigError("API_KEY is not set. Export it or add it to .env")
    if not key.isascii():
        raise ConfigError("API_KEY must contain only ASCII characters")
    return key
