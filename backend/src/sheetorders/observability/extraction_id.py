"""Per-call extraction IDs for log correlation.

SheetOrderExtractor.extract sets a fresh ID on entry and resets it on exit,
so every log line written during one extraction (provider debug output,
the failure line, the success line) carries the same ID. The ID lives in a
ContextVar, which keeps concurrent extractions on one event loop apart.
"""

import uuid
from contextvars import ContextVar, Token
from typing import Optional

extraction_id_var: ContextVar[Optional[str]] = ContextVar("extraction_id", default=None)


def generate_extraction_id() -> str:
    """New UUID4 string for one extract() call."""
    return str(uuid.uuid4())


def get_extraction_id() -> str:
    """ID of the extraction running in this context.

    Returns "no-extraction-id" for log lines written outside extract().
    """
    return extraction_id_var.get() or "no-extraction-id"


def set_extraction_id(extraction_id: str) -> Token:
    """Bind an extraction ID to the current context.

    Args:
        extraction_id: ID for the extraction that is starting

    Returns:
        Token to hand to reset_extraction_id when the extraction ends
    """
    return extraction_id_var.set(extraction_id)


def reset_extraction_id(token: Token) -> None:
    extraction_id_var.reset(token)
