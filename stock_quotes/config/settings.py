import os
from functools import lru_cache

from pydantic import BaseModel, Field

from stock_quotes.errors import ConfigurationError


class Settings(BaseModel):
    FINNHUB_API_KEY: str | None = None
    FINNHUB_BASE_URL: str = "https://finnhub.io/api/v1"
    FINNHUB_TIMEOUT_SEC: float = Field(default=5.0, gt=0)
    QUOTE_BATCH_SIZE: int = Field(default=10, ge=1)
    QUOTE_BATCH_DELAY_MS: int = Field(default=200, ge=0)

    @classmethod
    def from_env(cls) -> "Settings":
        raw = {
            "FINNHUB_API_KEY": (os.getenv("FINNHUB_API_KEY") or "").strip() or None,
            "FINNHUB_BASE_URL": os.getenv("FINNHUB_BASE_URL"),
            "FINNHUB_TIMEOUT_SEC": os.getenv("FINNHUB_TIMEOUT_SEC"),
            "QUOTE_BATCH_SIZE": os.getenv("QUOTE_BATCH_SIZE"),
            "QUOTE_BATCH_DELAY_MS": os.getenv("QUOTE_BATCH_DELAY_MS"),
        }
        # unset optional knobs fall through to field defaults
        return cls.model_validate({k: v for k, v in raw.items() if v is not None})

    @property
    def batch_delay_sec(self) -> float:
        return self.QUOTE_BATCH_DELAY_MS / 1000.0

    def require_api_key(self) -> str:
        if not self.FINNHUB_API_KEY:
            raise ConfigurationError("FINNHUB_API_KEY not configured")
        return self.FINNHUB_API_KEY


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()
