#!/usr/bin/env python3
"""Extract an order from a spreadsheet CSV export and print it as JSON.

Reads the file as text, runs one extraction against the configured LLM
provider and writes the result to stdout.

Usage:
    # Default provider from LLM_PROVIDER (gemini)
    GEMINI_API_KEY=... python backend/scripts/extract_sheet.py order.csv

    # Use OpenAI with a specific model
    OPENAI_API_KEY=... python backend/scripts/extract_sheet.py order.csv \
        --provider openai --model gpt-4o
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path

from sheetorders.config import get_settings
from sheetorders.domain.extraction.models import ExtractionFailedError
from sheetorders.infrastructure.ai.factory import build_extractor
from sheetorders.observability.logging_config import configure_logging


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Extract structured order data from a spreadsheet CSV export"
    )
    parser.add_argument("path", type=Path, help="CSV file exported from the order spreadsheet")
    parser.add_argument(
        "--provider",
        choices=["gemini", "openai"],
        help="LLM provider (default: LLM_PROVIDER setting)",
    )
    parser.add_argument("--model", help="Model name override")
    parser.add_argument(
        "--encoding",
        default="utf-8-sig",
        help="File encoding (default: utf-8-sig, strips an Excel BOM)",
    )
    return parser.parse_args(argv)


async def run(args: argparse.Namespace) -> int:
    settings = get_settings()
    configure_logging(level=settings.LOG_LEVEL, json_format=settings.LOG_JSON)

    try:
        raw_table = args.path.read_text(encoding=args.encoding)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: cannot read {args.path}: {e}", file=sys.stderr)
        return 2

    extractor = build_extractor(settings, provider=args.provider, model=args.model)

    try:
        order = await extractor.extract(raw_table)
    except ExtractionFailedError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(order, indent=2, ensure_ascii=False))
    return 0


def main(argv=None) -> int:
    return asyncio.run(run(parse_args(argv)))


if __name__ == "__main__":
    sys.exit(main())
