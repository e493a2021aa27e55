# src/vocab/core/settings.py
"""
Runtime settings loaded from environment variables.
"""

import os
from dataclasses import dataclass, field


DEFAULT_DICT_API_URL = "https://api.dictionaryapi.dev/api/v2/entries/en/"
DEFAULT_CORS_ORIGINS = ("http://localhost:5173", "http://localhost:3000")


def _split_origins(value: str | None) -> tuple[str, ...]:
    if not value:
        return DEFAULT_CORS_ORIGINS
    return tuple(o.strip() for o in value.split(",") if o.strip())


@dataclass(frozen=True)
class Settings:
    redis_url: str = "redis://localhost:6379/0"
    redis_timeout_s: float = 5.0
    dict_api_url: str = DEFAULT_DICT_API_URL
    http_timeout_s: float = 10.0
    cache_prefix: str = "vocab:dict"
    wordbook_prefix: str = "vocab:wordbook"
    purge_interval_s: float = 3600.0
    log_level: str = "INFO"
    cors_origins: tuple[str, ...] = field(default=DEFAULT_CORS_ORIGINS)
    api_url: str = "http://localhost:8000/api"

    @staticmethod
    def from_env() -> "Settings":
        """Load settings from VOCAB_* environment variables."""
        return Settings(
            redis_url=os.getenv("VOCAB_REDIS_URL", "redis://localhost:6379/0"),
            redis_timeout_s=float(os.getenv("VOCAB_REDIS_TIMEOUT_S", "5")),
            dict_api_url=os.getenv("VOCAB_DICT_API_URL", DEFAULT_DICT_API_URL),
            http_timeout_s=float(os.getenv("VOCAB_HTTP_TIMEOUT_S", "10")),
            cache_prefix=os.getenv("VOCAB_CACHE_PREFIX", "vocab:dict"),
            wordbook_prefix=os.getenv("VOCAB_WORDBOOK_PREFIX", "vocab:wordbook"),
            purge_interval_s=float(os.getenv("VOCAB_PURGE_INTERVAL_S", "3600")),
            log_level=os.getenv("VOCAB_LOG_LEVEL", "INFO").upper(),
            cors_origins=_split_origins(os.getenv("VOCAB_CORS_ORIGINS")),
            api_url=os.getenv("VOCAB_API_URL", "http://localhost:8000/api"),
        )
