"""Extractor implementations."""

from .sheet_extractor import SheetOrderExtractor

__all__ = ["SheetOrderExtractor"]
