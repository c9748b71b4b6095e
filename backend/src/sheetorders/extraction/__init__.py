"""Extraction: prompt templates and the sheet order extractor."""

from .prompts import build_sheet_extraction_prompt
from .extractors import SheetOrderExtractor

__all__ = ["SheetOrderExtractor", "build_sheet_extraction_prompt"]
