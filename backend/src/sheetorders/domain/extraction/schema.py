"""Structured-output schema sent with every extraction request.

Plain JSON Schema, accepted by both Gemini (response_json_schema) and
OpenAI (json_schema response_format, strict mode). Strict mode needs every
object closed with additionalProperties=false and every property listed in
required; Gemini accepts the same closed form.
"""

from typing import Any

SCHEMA_NAME = "extracted_order"


def _build_extraction_schema() -> dict[str, Any]:
    """Build the extraction schema dict (called once at import)."""
    item_schema = {
        "type": "object",
        "properties": {
            "name": {
                "type": "string",
                "description": "The name of the item.",
            },
            "quantity": {
                "type": "number",
                "description": "The quantity of the item.",
            },
        },
        "required": ["name", "quantity"],
        "additionalProperties": False,
    }

    shipping_schema = {
        "type": "object",
        "description": "Information about the recipient.",
        "properties": {
            "recipient": {
                "type": "string",
                "description": (
                    "The FULL recipient string, including any ID and phone number (SĐT). "
                    "Example: '26178 - Nguyễn Tấn Anh / SĐT: 0825979194'."
                ),
            },
            "address": {
                "type": "string",
                "description": "The full delivery address.",
            },
        },
        "required": ["recipient", "address"],
        "additionalProperties": False,
    }

    return {
        "type": "object",
        "properties": {
            "orderTitle": {
                "type": "string",
                "description": (
                    "The main title or identifier for the order "
                    "(e.g., '15468 - BHX_DNA_TKH - 8 Thái Thị Bôi'). "
                    "Can be an empty string if not found, especially for summary files."
                ),
            },
            "items": {
                "type": "array",
                "description": "A list of all items in the order.",
                "items": item_schema,
            },
            "deliveryDate": {
                "type": "string",
                "description": (
                    "The requested delivery date (e.g., '31/07/2025'). "
                    "Can be an empty string if not found."
                ),
            },
            "shippingInfo": shipping_schema,
        },
        "required": ["orderTitle", "items", "deliveryDate", "shippingInfo"],
        "additionalProperties": False,
    }


# Built once per process. Treat as read-only; adapters deep-copy it before handing it to an SDK.
EXTRACTION_SCHEMA: dict[str, Any] = _build_extraction_schema()
