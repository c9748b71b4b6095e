"""Wiring: build an inference provider and extractor from Settings."""

from typing import Optional

from sheetorders.config import Settings, get_settings
from sheetorders.domain.ai.ports import StructuredInferencePort
from sheetorders.extraction.extractors.sheet_extractor import SheetOrderExtractor
from .gemini_provider import GeminiProvider
from .openai_provider import OpenAIProvider


def create_inference_provider(
    settings: Settings,
    provider: Optional[str] = None,
    model: Optional[str] = None,
) -> StructuredInferencePort:
    """Create the configured provider.

    Args:
        settings: Application settings
        provider: Override for settings.LLM_PROVIDER
        model: Override for the provider's configured model

    Returns:
        StructuredInferencePort implementation

    Raises:
        ValueError: If the provider name is unknown
    """
    provider = provider or settings.LLM_PROVIDER

    if provider == "gemini":
        return GeminiProvider(
            api_key=settings.GEMINI_API_KEY,
            model=model or settings.GEMINI_MODEL,
            timeout_seconds=settings.LLM_TIMEOUT_SECONDS,
        )
    if provider == "openai":
        return OpenAIProvider(
            api_key=settings.OPENAI_API_KEY,
            model=model or settings.OPENAI_MODEL,
            timeout_seconds=settings.LLM_TIMEOUT_SECONDS,
        )

    raise ValueError(f"Unknown LLM provider: {provider!r} (expected 'gemini' or 'openai')")


def build_extractor(
    settings: Optional[Settings] = None,
    provider: Optional[str] = None,
    model: Optional[str] = None,
) -> SheetOrderExtractor:
    """Build a SheetOrderExtractor backed by the configured provider."""
    settings = settings or get_settings()
    return SheetOrderExtractor(create_inference_provider(settings, provider=provider, model=model))
