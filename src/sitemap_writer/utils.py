"""Utility functions for the sitemap writer."""

import logging
import math
import os
from datetime import datetime, timezone
from decimal import Decimal
from typing import List, Optional, Sequence, TypeVar
from xml.sax.saxutils import escape

from .config import DEFAULT_ENCODING

logger = logging.getLogger(__name__)

T = TypeVar("T")

# saxutils.escape always handles &, < and > (ampersand first)
XML_ENTITIES = {'"': "&quot;", "'": "&apos;"}


def escape_xml(text: str) -> str:
    """Escape the five reserved XML characters in text content."""
    return escape(text, XML_ENTITIES)


def format_priority(priority: float) -> str:
    """
    Format a priority value without redundant trailing zeros.

    Whole numbers drop the decimal point (1.0 -> "1"); anything else keeps
    the shortest round-trip digits in positional form (0.5 -> "0.5",
    0.00001 -> "0.00001").
    """
    value = float(priority)
    if value.is_integer():
        return str(int(value))
    if not math.isfinite(value):
        return repr(value)

    # Positional notation; repr would switch to exponents (1e-05)
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def write_document(filepath: str, content: str) -> None:
    """Write a document to disk, replacing any existing file."""
    with open(filepath, "w", encoding=DEFAULT_ENCODING, newline="\n") as f:
        f.write(content)


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """Set up logging configuration."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)


def format_number(number: int) -> str:
    """Format number with thousands separators."""
    return f"{number:,}"


def get_current_timestamp() -> str:
    """Get current timestamp in ISO format for sitemaps."""
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S+00:00")


def create_directory_if_not_exists(directory: str) -> None:
    """Create directory if it doesn't exist."""
    os.makedirs(directory, exist_ok=True)


def chunk_records(records: Sequence[T], chunk_size: int) -> List[List[T]]:
    """Split records into chunks of specified size."""
    chunks = []
    for i in range(0, len(records), chunk_size):
        chunks.append(list(records[i:i + chunk_size]))
    return chunks

