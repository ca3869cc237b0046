from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from typing import List

GEMINI_OPENAI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"

class Settings(BaseSettings):
    # Text generation (OpenAI-compatible endpoint)
    OPENAI_API_KEY: str | None = None
    OPENAI_MODEL: str = "gemini-2.5-flash"
    OPENAI_BASE_URL: str | None = GEMINI_OPENAI_BASE_URL
    MOCK_MODE: bool = False

    # Streaming relay
    STREAM_DELAY_MS: int = 50

    # Safety/abuse knobs
    RATE_LIMIT: str = "30/minute"
    RATE_LIMIT_ENABLED: bool = True

    # Logging
    LOG_LEVEL: str = "INFO"

    # CORS
    ALLOW_ORIGINS: List[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://127.0.0.1:5173"]
    )

    # Optional extra frontend
    FRONTEND_ORIGIN: str | None = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def api_key_configured(self) -> bool:
        return bool((self.OPENAI_API_KEY or "").strip())

settings = Settings()
if settings.FRONTEND_ORIGIN:
    settings.ALLOW_ORIGINS.append(settings.FRONTEND_ORIGIN)

def get_settings() -> Settings:
    """FastAPI dependency; tests override it with their own Settings."""
    return settings
