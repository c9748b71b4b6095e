"""AI Infrastructure - Adapters for structured inference providers.

This module contains concrete implementations of AI domain ports.
"""

from .gemini_provider import GeminiProvider
from .openai_provider import OpenAIProvider
from .factory import build_extractor, create_inference_provider

__all__ = [
    "GeminiProvider",
    "OpenAIProvider",
    "build_extractor",
    "create_inference_provider",
]
