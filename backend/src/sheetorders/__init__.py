"""sheetorders - extract structured orders from spreadsheet exports with an LLM.

Usage:
    from sheetorders import build_extractor

    extractor = build_extractor()
    order = await extractor.extract(csv_text)
"""

from sheetorders.domain.extraction.models import (
    ExtractedOrder,
    ExtractionFailedError,
    OrderItem,
    ShippingInfo,
)
from sheetorders.domain.ai.ports import InferenceResult, StructuredInferencePort
from sheetorders.extraction.extractors.sheet_extractor import SheetOrderExtractor
from sheetorders.infrastructure.ai.factory import build_extractor

__version__ = "0.1.0"

__all__ = [
    "ExtractedOrder",
    "ExtractionFailedError",
    "InferenceResult",
    "OrderItem",
    "ShippingInfo",
    "SheetOrderExtractor",
    "StructuredInferencePort",
    "build_extractor",
]
