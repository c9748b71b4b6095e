"""Domain ports for AI providers."""

from .ports import (
    InferenceResult,
    StructuredInferencePort,
    LLMError,
    LLMTimeoutError,
    LLMRateLimitError,
    LLMAuthError,
    LLMServiceError,
)

__all__ = [
    "InferenceResult",
    "StructuredInferencePort",
    "LLMError",
    "LLMTimeoutError",
    "LLMRateLimitError",
    "LLMAuthError",
    "LLMServiceError",
]
