"""
Gemini Provider - Concrete implementation of StructuredInferencePort for Google Gemini.

Uses the google-genai SDK async client with JSON-schema constrained output.
"""

import copy
import time
from typing import Any, Optional

import httpx
from google import genai
from google.genai import errors, types

from sheetorders.domain.ai.ports import (
    InferenceResult,
    StructuredInferencePort,
    LLMAuthError,
    LLMRateLimitError,
    LLMServiceError,
    LLMTimeoutError,
)


class GeminiProvider(StructuredInferencePort):
    """
    Gemini implementation of StructuredInferencePort.

    The SDK client is created on first use and then reused for the lifetime
    of the provider, so a missing credential surfaces as LLMAuthError on the
    first call rather than at construction time.
    """

    provider_name = "gemini"

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = "gemini-2.5-flash",
        timeout_seconds: float = 60.0,
        client: Optional[genai.Client] = None,
    ):
        """
        Initialize Gemini provider.

        Args:
            api_key: Gemini API key (the SDK falls back to GEMINI_API_KEY /
                GOOGLE_API_KEY env vars when None)
            model: Gemini model name
            timeout_seconds: Transport timeout per request
            client: Pre-built SDK client (tests, custom transports)
        """
        self.api_key = api_key
        self.model = model
        self.timeout_seconds = timeout_seconds
        self._client = client

    def _get_client(self) -> genai.Client:
        if self._client is None:
            try:
                self._client = genai.Client(
                    api_key=self.api_key,
                    http_options=types.HttpOptions(timeout=int(self.timeout_seconds * 1000)),
                )
            except ValueError as e:
                raise LLMAuthError(f"Gemini client could not be created: {str(e)}") from e
        return self._client

    async def generate_structured(
        self,
        prompt: str,
        system_instruction: str,
        response_schema: dict[str, Any],
    ) -> InferenceResult:
        """
        Run one generate_content call with JSON output constrained by the schema.

        Args:
            prompt: User prompt
            system_instruction: System-level directive
            response_schema: JSON-schema descriptor of the expected output

        Returns:
            InferenceResult (text is "" when Gemini returns no text)

        Raises:
            LLMTimeoutError, LLMRateLimitError, LLMAuthError, LLMServiceError
        """
        client = self._get_client()
        start_time = time.perf_counter()

        config = types.GenerateContentConfig(
            system_instruction=system_instruction,
            response_mime_type="application/json",
            response_json_schema=copy.deepcopy(response_schema),
        )

        try:
            response = await client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
                config=config,
            )

        except errors.APIError as e:
            if e.code in (401, 403):
                raise LLMAuthError(f"Gemini authentication failed: {str(e)}") from e
            if e.code == 429:
                raise LLMRateLimitError(f"Gemini rate limit exceeded: {str(e)}") from e
            if e.code in (408, 504):
                raise LLMTimeoutError(f"Gemini API timeout: {str(e)}") from e
            raise LLMServiceError(f"Gemini service error: {str(e)}") from e

        except httpx.TimeoutException as e:
            raise LLMTimeoutError(f"Gemini API timeout: {str(e)}") from e

        except Exception as e:
            raise LLMServiceError(f"Unexpected error calling Gemini: {str(e)}") from e

        latency_ms = int((time.perf_counter() - start_time) * 1000)

        usage = response.usage_metadata
        return InferenceResult(
            text=response.text or "",
            provider=self.provider_name,
            model=self.model,
            tokens_in=usage.prompt_token_count if usage else None,
            tokens_out=usage.candidates_token_count if usage else None,
            latency_ms=latency_ms,
        )
