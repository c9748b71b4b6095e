"""Structural checks on the remote model's parsed response.

Only the top-level contract is checked: the response must be an object,
shippingInfo must be present and truthy, and items must be a list. Field contents
(empty strings, item shapes, quantity values) are left as the model
returned them.
"""

from typing import Any, cast

from .models import ExtractedOrder, ResponseShapeError


def validate_extracted_order(parsed: Any) -> ExtractedOrder:
    """Check the parsed response shape and return it typed as ExtractedOrder.

    Args:
        parsed: Result of json.loads on the response text

    Returns:
        The same object, unchanged

    Raises:
        ResponseShapeError: If the object, shippingInfo or items check fails
    """
    if not isinstance(parsed, dict):
        raise ResponseShapeError(
            f"Expected a JSON object, got {type(parsed).__name__}"
        )

    # null, "", 0 and false count as missing; empty objects and arrays do not.
    shipping_info = parsed.get("shippingInfo")
    if shipping_info is None or (not isinstance(shipping_info, (dict, list)) and not shipping_info):
        raise ResponseShapeError("Extracted data is missing required field 'shippingInfo'")

    if not isinstance(parsed.get("items"), list):
        raise ResponseShapeError("Extracted data field 'items' is not an array")

    return cast(ExtractedOrder, parsed)
