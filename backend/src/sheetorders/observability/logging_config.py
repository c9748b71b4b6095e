"""Logging setup for extraction runs.

One stdout handler, one JSON object per line. Each line carries the
extraction ID of the extract() call that wrote it, plus the provider call
metadata (provider, model, latency, tokens, item count) when the caller
passed it via `extra`.
"""

import logging
import json
import sys
from datetime import datetime, timezone

from .extraction_id import get_extraction_id

# Record attributes copied into the JSON payload when set via `extra`
EXTRA_FIELDS = ("provider", "model", "latency_ms", "tokens_in", "tokens_out", "item_count")

NOISY_LOGGERS = ("httpx", "httpcore", "openai", "google_genai")


class ExtractionIDFilter(logging.Filter):
    """Stamp records with the current extraction ID; never drops a record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.extraction_id = get_extraction_id()
        return True


class JSONFormatter(logging.Formatter):
    """Render a record as one JSON line, keeping non-ASCII text readable."""

    def format(self, record: logging.LogRecord) -> str:
        """Build the JSON line.

        Sheet content is often Vietnamese, so ensure_ascii is off and names
        like 'Nguyễn Tấn Anh' stay legible in the log.

        Args:
            record: Log record, normally already passed through ExtractionIDFilter

        Returns:
            str: One-line JSON document
        """
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "extraction_id": getattr(record, "extraction_id", "no-extraction-id"),
            "module": record.module,
            "function": record.funcName,
            "message": record.getMessage(),
        }

        # Failed extractions log with exc_info; keep the chained cause visible
        if record.exc_info:
            log_data["error"] = str(record.exc_info[1])
            log_data["traceback"] = self.formatException(record.exc_info)

        for field in EXTRA_FIELDS:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        return json.dumps(log_data, ensure_ascii=False)


def configure_logging(level: str = "INFO", json_format: bool = True) -> None:
    """Install the single stdout handler used by scripts and host applications.

    Replaces any handlers already on the root logger and turns the HTTP
    and SDK loggers down to WARNING so one extraction does not produce a
    page of transport noise.

    Args:
        level: Log level name, case-insensitive
        json_format: JSON lines if True, plain text with the extraction ID otherwise
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(getattr(logging, level.upper()))

    if json_format:
        formatter = JSONFormatter()
    else:
        formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(extraction_id)s - %(module)s.%(funcName)s - %(message)s'
        )

    handler.setFormatter(formatter)
    handler.addFilter(ExtractionIDFilter())
    root_logger.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
