"""LLM prompt templates for spreadsheet order extraction."""

# Grand-total row label that marks a summary sheet
SUMMARY_MARKER = "Tổng Cộng"

# Column headers of the vertical item list on standard sheets
ITEM_NAME_COLUMN = "Tên thiết bị"
QUANTITY_COLUMN = "SL"

SHEET_EXTRACT_V1_SYSTEM = (
    "You are a highly efficient, specialized API for parsing Excel data. "
    "Your sole function is to follow the user's workflow instructions precisely "
    "and return the data in the specified JSON format as quickly as possible. "
    "Do not add any commentary or explanation."
)

SHEET_EXTRACT_V1_USER = """Analyze the provided CSV data from an Excel spreadsheet and extract order information. Follow this prioritized workflow:

**Priority 1: Summary Format (Check for '{{summary_marker}}')**
1.  Scan the data for a row containing the text '{{summary_marker}}'.
2.  If this row is found, you are dealing with a summary file. The items and their total quantities are listed horizontally in this row. The device names are in the header row above it.
3.  Extract all device names and their corresponding quantities from the '{{summary_marker}}' row.
4.  The 'orderTitle' and 'deliveryDate' may not be present; return empty strings for them.
5.  The shipping information is located in a separate area. Find it and extract it.

**Priority 2: Standard Format (If '{{summary_marker}}' is not found)**
1.  If no '{{summary_marker}}' row exists, treat this as a standard order file.
2.  The items are listed vertically in two columns, '{{item_name_column}}' (Item Name) and '{{quantity_column}}' (Quantity).
3.  Extract the 'orderTitle', 'deliveryDate', and all items with their quantities.
4.  Extract the shipping information.

**Key Extraction Rules for both formats:**
-   **Shipping Information**: For the 'recipient' field, you MUST extract the entire, complete string. This includes any ID numbers, the recipient's name, and the phone number (SĐT). Do not omit any part of it.
-   **Output**: Your final output must be a single JSON object that strictly adheres to the provided schema.

CSV Data:
---
{{csv_data}}
---"""


def build_sheet_extraction_prompt(
    csv_data: str,
    summary_marker: str = SUMMARY_MARKER,
    item_name_column: str = ITEM_NAME_COLUMN,
    quantity_column: str = QUANTITY_COLUMN,
) -> tuple[str, str]:
    """Build the sheet extraction prompt from template.

    The CSV data is substituted last so that text inside it which happens
    to look like a placeholder is left alone.

    Args:
        csv_data: Raw spreadsheet export, embedded verbatim
        summary_marker: Label of the grand-total row on summary sheets
        item_name_column: Item name column header on standard sheets
        quantity_column: Quantity column header on standard sheets

    Returns:
        Tuple of (system_prompt, user_prompt)
    """
    user_prompt = SHEET_EXTRACT_V1_USER.replace("{{summary_marker}}", summary_marker)
    user_prompt = user_prompt.replace("{{item_name_column}}", item_name_column)
    user_prompt = user_prompt.replace("{{quantity_column}}", quantity_column)
    user_prompt = user_prompt.replace("{{csv_data}}", csv_data)

    return SHEET_EXTRACT_V1_SYSTEM, user_prompt
