"""
Structured Inference Port - Abstract interface for LLM providers.

Hexagonal Architecture: This is a domain port that infrastructure adapters implement.
The extractor depends on this port, not on concrete implementations (Gemini, OpenAI).
Tests substitute a double that returns canned response text.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class InferenceResult:
    """
    Result from a structured inference call.

    Contains the raw response text plus metadata for logging/tracking.
    The text is untrusted: callers must parse and validate it.

    Attributes:
        text: Raw response text from the LLM (empty string if the provider returned none)
        provider: Provider name (e.g., 'gemini', 'openai')
        model: Model name (e.g., 'gemini-2.5-flash')
        tokens_in: Input tokens used (None if provider doesn't report)
        tokens_out: Output tokens used (None if provider doesn't report)
        latency_ms: Latency in milliseconds
    """
    text: str
    provider: str
    model: str
    tokens_in: Optional[int] = None
    tokens_out: Optional[int] = None
    latency_ms: int = 0


class StructuredInferencePort(ABC):
    """
    Abstract interface for schema-constrained LLM calls.

    Implementations must handle:
    - API authentication
    - Request formatting for the provider
    - Passing the response schema as a structured-output constraint
    - Error translation (timeouts, rate limits, auth, service errors)

    Implementations make exactly one attempt per call.
    """

    provider_name: str = "unknown"

    @abstractmethod
    async def generate_structured(
        self,
        prompt: str,
        system_instruction: str,
        response_schema: dict[str, Any],
    ) -> InferenceResult:
        """
        Ask the remote model for a single JSON document matching the schema.

        Args:
            prompt: User prompt (instructions plus embedded source data)
            system_instruction: System-level behavioral directive
            response_schema: JSON-schema descriptor of the expected output

        Returns:
            InferenceResult with the raw response text and call metadata

        Raises:
            LLMTimeoutError: Request timed out
            LLMRateLimitError: Rate limit exceeded
            LLMAuthError: Authentication failed or credential missing
            LLMServiceError: Provider service unavailable or returned an error
        """
        pass


# Custom exceptions for LLM operations
class LLMError(Exception):
    """Base exception for LLM operations"""
    pass


class LLMTimeoutError(LLMError):
    """LLM request timed out"""
    pass


class LLMRateLimitError(LLMError):
    """Rate limit exceeded"""
    pass


class LLMAuthError(LLMError):
    """Authentication failed"""
    pass


class LLMServiceError(LLMError):
    """Provider service unavailable or returned error"""
    pass
