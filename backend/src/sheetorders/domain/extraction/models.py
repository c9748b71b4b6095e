"""Order shapes produced by sheet extraction, plus extraction exceptions.

The shapes are TypedDicts: the extractor hands back the parsed JSON object
itself, so callers get plain dicts keyed exactly as the remote model emits
them (camelCase).
"""

from typing import List, TypedDict


class OrderItem(TypedDict):
    """Single line item: device/product name and ordered quantity."""

    name: str
    quantity: float


class ShippingInfo(TypedDict):
    """Recipient and delivery address.

    recipient is the complete string as written in the sheet, including
    any customer id and phone annotation.
    """

    recipient: str
    address: str


class ExtractedOrder(TypedDict):
    """Structured order extracted from a spreadsheet export.

    orderTitle and deliveryDate may be empty strings (summary sheets carry
    neither). items may be empty but is always a list.
    """

    orderTitle: str
    items: List[OrderItem]
    deliveryDate: str
    shippingInfo: ShippingInfo


EXTRACTION_FAILED_MESSAGE = (
    "Failed to extract order information. "
    "Please check the file format and try again."
)


class ExtractionFailedError(Exception):
    """The only error callers of the extractor ever see.

    The underlying cause is chained as __cause__ and logged, never put in
    the message.
    """

    def __init__(self, message: str = EXTRACTION_FAILED_MESSAGE):
        super().__init__(message)


class EmptyResponseError(Exception):
    """The remote model returned no text."""
    pass


class ResponseShapeError(ValueError):
    """Parsed response lacks a required top-level field or has the wrong type."""
    pass
