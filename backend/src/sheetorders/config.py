"""Application configuration via environment variables.

Provides type-safe settings loading using pydantic-settings.
Environment variables can be loaded from a .env file.
"""

from typing import Literal, Optional
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables.

    The credential for the selected provider is not checked here. A missing
    or invalid key shows up as a failed extraction on first use.

    Environment Variables:
        LLM_PROVIDER: 'gemini' (default) or 'openai'
        GEMINI_API_KEY: Google Gemini API key
        GEMINI_MODEL: Gemini model name (default gemini-2.5-flash)
        OPENAI_API_KEY: OpenAI API key
        OPENAI_MODEL: OpenAI model name (default gpt-4o-mini)
        LLM_TIMEOUT_SECONDS: Transport timeout for the remote call
        LOG_LEVEL: Logging level (default INFO)
        LOG_JSON: Emit JSON log lines (default True)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # AI Providers
    LLM_PROVIDER: Literal["gemini", "openai"] = "gemini"
    GEMINI_API_KEY: Optional[str] = None
    GEMINI_MODEL: str = "gemini-2.5-flash"
    OPENAI_API_KEY: Optional[str] = None
    OPENAI_MODEL: str = "gpt-4o-mini"
    LLM_TIMEOUT_SECONDS: float = Field(60.0, gt=0)

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache for singleton behavior.
    Call get_settings.cache_clear() to reload settings.
    """
    return Settings()
