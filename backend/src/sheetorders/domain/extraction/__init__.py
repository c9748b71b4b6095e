"""Domain layer for sheet extraction.

Defines the extracted order shapes, the structured-output schema and the
structural checks applied to every remote response.
"""

from .models import (
    EXTRACTION_FAILED_MESSAGE,
    EmptyResponseError,
    ExtractedOrder,
    ExtractionFailedError,
    OrderItem,
    ResponseShapeError,
    ShippingInfo,
)
from .schema import EXTRACTION_SCHEMA, SCHEMA_NAME
from .validation import validate_extracted_order

__all__ = [
    "EXTRACTION_FAILED_MESSAGE",
    "EXTRACTION_SCHEMA",
    "SCHEMA_NAME",
    "EmptyResponseError",
    "ExtractedOrder",
    "ExtractionFailedError",
    "OrderItem",
    "ResponseShapeError",
    "ShippingInfo",
    "validate_extracted_order",
]
