"""LLM-based extractor for spreadsheet-exported order sheets."""

import json
import logging

from sheetorders.domain.ai.ports import StructuredInferencePort
from sheetorders.domain.extraction.models import (
    EmptyResponseError,
    ExtractedOrder,
    ExtractionFailedError,
)
from sheetorders.domain.extraction.schema import EXTRACTION_SCHEMA
from sheetorders.domain.extraction.validation import validate_extracted_order
from sheetorders.extraction.prompts import build_sheet_extraction_prompt
from sheetorders.observability.extraction_id import (
    generate_extraction_id,
    reset_extraction_id,
    set_extraction_id,
)


logger = logging.getLogger(__name__)


class SheetOrderExtractor:
    """Turns raw CSV text from an order spreadsheet into an ExtractedOrder.

    The interpretation (summary vs. standard layout, field lookup) is done by
    the remote model; this class builds the prompt, makes one structured
    inference call and checks the response shape:
    - response text must be non-empty
    - response text must parse as JSON
    - parsed object must have shippingInfo and an items array

    Every failure is logged with its cause and re-raised as
    ExtractionFailedError. Nothing partial is ever returned.
    """

    def __init__(self, inference_provider: StructuredInferencePort):
        """Initialize sheet extractor.

        Args:
            inference_provider: Structured inference implementation, shared
                across calls and never mutated
        """
        self.inference_provider = inference_provider

    async def extract(self, raw_table: str) -> ExtractedOrder:
        """Extract order information from spreadsheet text.

        Args:
            raw_table: Spreadsheet content serialized as CSV text, passed
                to the model verbatim

        Returns:
            The parsed response object, unchanged

        Raises:
            ExtractionFailedError: On any remote, parse or shape failure
        """
        token = set_extraction_id(generate_extraction_id())
        try:
            return await self._extract(raw_table)
        finally:
            reset_extraction_id(token)

    async def _extract(self, raw_table: str) -> ExtractedOrder:
        try:
            system_prompt, user_prompt = build_sheet_extraction_prompt(raw_table)

            result = await self.inference_provider.generate_structured(
                prompt=user_prompt,
                system_instruction=system_prompt,
                response_schema=EXTRACTION_SCHEMA,
            )

            if not result.text:
                raise EmptyResponseError("API returned an empty response.")

            order = validate_extracted_order(json.loads(result.text))

        except Exception as e:
            logger.error(
                f"Sheet extraction failed: {type(e).__name__}: {e}",
                exc_info=True,
                extra={"provider": self.inference_provider.provider_name},
            )
            raise ExtractionFailedError() from e

        logger.info(
            "Sheet extraction succeeded",
            extra={
                "provider": result.provider,
                "model": result.model,
                "latency_ms": result.latency_ms,
                "tokens_in": result.tokens_in,
                "tokens_out": result.tokens_out,
                "item_count": len(order["items"]),
            },
        )
        return order
