"""Observability: structured logging and extraction ID correlation."""

from .extraction_id import (
    generate_extraction_id,
    get_extraction_id,
    reset_extraction_id,
    set_extraction_id,
)
from .logging_config import ExtractionIDFilter, JSONFormatter, configure_logging

__all__ = [
    "generate_extraction_id",
    "get_extraction_id",
    "reset_extraction_id",
    "set_extraction_id",
    "ExtractionIDFilter",
    "JSONFormatter",
    "configure_logging",
]
