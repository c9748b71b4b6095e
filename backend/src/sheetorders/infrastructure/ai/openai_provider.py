"""
OpenAI Provider - Concrete implementation of StructuredInferencePort for OpenAI.

Uses the OpenAI Python SDK (v1.x+) async client with strict JSON-schema
structured output.
"""

import copy
import time
from typing import Any, Optional

from openai import (
    AsyncOpenAI,
    APIConnectionError,
    APIError,
    APITimeoutError,
    AuthenticationError,
    OpenAIError,
    RateLimitError,
)

from sheetorders.domain.ai.ports import (
    InferenceResult,
    StructuredInferencePort,
    LLMAuthError,
    LLMRateLimitError,
    LLMServiceError,
    LLMTimeoutError,
)
from sheetorders.domain.extraction.schema import SCHEMA_NAME


class OpenAIProvider(StructuredInferencePort):
    """
    OpenAI implementation of StructuredInferencePort.

    SDK-level retries are switched off (max_retries=0): one attempt per call.
    The client is created lazily like GeminiProvider's.
    """

    provider_name = "openai"

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = "gpt-4o-mini",
        timeout_seconds: float = 60.0,
        client: Optional[AsyncOpenAI] = None,
    ):
        """
        Initialize OpenAI provider.

        Args:
            api_key: OpenAI API key (SDK falls back to OPENAI_API_KEY env var when None)
            model: Chat model name
            timeout_seconds: Transport timeout per request
            client: Pre-built async client (tests, custom transports)
        """
        self.api_key = api_key
        self.model = model
        self.timeout_seconds = timeout_seconds
        self._client = client

    def _get_client(self) -> AsyncOpenAI:
        if self._client is None:
            try:
                self._client = AsyncOpenAI(
                    api_key=self.api_key,
                    timeout=self.timeout_seconds,
                    max_retries=0,
                )
            except OpenAIError as e:
                raise LLMAuthError(f"OpenAI client could not be created: {str(e)}") from e
        return self._client

    async def generate_structured(
        self,
        prompt: str,
        system_instruction: str,
        response_schema: dict[str, Any],
    ) -> InferenceResult:
        """
        Run one chat completion with a strict json_schema response format.

        Args:
            prompt: User prompt
            system_instruction: System message content
            response_schema: JSON-schema descriptor of the expected output

        Returns:
            InferenceResult (text is "" when the message has no content)

        Raises:
            LLMTimeoutError, LLMRateLimitError, LLMAuthError, LLMServiceError
        """
        client = self._get_client()
        start_time = time.perf_counter()

        messages = [
            {"role": "system", "content": system_instruction},
            {"role": "user", "content": prompt}
        ]

        try:
            response = await client.chat.completions.create(
                model=self.model,
                messages=messages,
                response_format={
                    "type": "json_schema",
                    "json_schema": {
                        "name": SCHEMA_NAME,
                        "strict": True,
                        "schema": copy.deepcopy(response_schema),
                    },
                },
                temperature=0.0,
            )

        except APITimeoutError as e:
            raise LLMTimeoutError(f"OpenAI API timeout: {str(e)}") from e

        except RateLimitError as e:
            raise LLMRateLimitError(f"OpenAI rate limit exceeded: {str(e)}") from e

        except AuthenticationError as e:
            raise LLMAuthError(f"OpenAI authentication failed: {str(e)}") from e

        except (APIConnectionError, APIError) as e:
            raise LLMServiceError(f"OpenAI service error: {str(e)}") from e

        except Exception as e:
            raise LLMServiceError(f"Unexpected error calling OpenAI: {str(e)}") from e

        latency_ms = int((time.perf_counter() - start_time) * 1000)

        if not response.choices:
            raise LLMServiceError("OpenAI returned no choices")

        # Extract token usage
        usage = response.usage
        return InferenceResult(
            text=response.choices[0].message.content or "",
            provider=self.provider_name,
            model=self.model,
            tokens_in=usage.prompt_tokens if usage else None,
            tokens_out=usage.completion_tokens if usage else None,
            latency_ms=latency_ms,
        )
