"""Tests for utility functions."""

import logging
import os
import re
import tempfile
from lxml import etree
import pytest
from sitemap_writer.utils import (
    escape_xml,
    format_priority,
    format_number,
    chunk_records,
    get_current_timestamp,
    setup_logging,
)


def test_escape_reserved_characters():
    """Test each reserved character maps to its entity."""
    assert escape_xml("&") == "&amp;"
    assert escape_xml("<") == "&lt;"
    assert escape_xml(">") == "&gt;"
    assert escape_xml('"') == "&quot;"
    assert escape_xml("'") == "&apos;"


def test_escape_does_not_double_encode():
    """Test entities introduced by escaping are not escaped again."""
    assert escape_xml("<&>") == "&lt;&amp;&gt;"
    assert escape_xml("&amp;") == "&amp;amp;"


def test_escape_plain_text_unchanged():
    assert escape_xml("") == ""
    assert escape_xml("https://example.com/über") == "https://example.com/über"


@pytest.mark.parametrize("text", [
    "&<>\"'",
    "'\"><&",
    "a&&b<<c>>d\"\"e''f",
    "https://example.com/?q=<tag attr=\"1\">&lang='en'",
    "&amp;&lt;",
])
def test_escape_round_trips_through_parser(text):
    """Test escaped text parses back to the original string."""
    element = etree.fromstring(f"<loc>{escape_xml(text)}</loc>")
    assert element.text == text


@pytest.mark.parametrize("priority, expected", [
    (1.0, "1"),
    (0.5, "0.5"),
    (0.1, "0.1"),
    (0.0, "0"),
    (0.123, "0.123"),
    (0.00001, "0.00001"),
    (1e-7, "0.0000001"),
    (3, "3"),
])
def test_format_priority(priority, expected):
    assert format_priority(priority) == expected


def test_format_number():
    assert format_number(50000) == "50,000"
    assert format_number(7) == "7"


def test_chunk_records():
    """Test splitting records keeps order and sizes."""
    chunks = chunk_records(list(range(7)), 3)
    assert chunks == [[0, 1, 2], [3, 4, 5], [6]]
    assert chunk_records([], 3) == []


def test_current_timestamp_format():
    assert re.fullmatch(
        r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\+00:00",
        get_current_timestamp(),
    )


def test_setup_logging_with_file():
    """Test logging goes to console and the optional log file."""
    root_logger = logging.getLogger()
    saved_handlers = root_logger.handlers[:]
    saved_level = root_logger.level

    with tempfile.TemporaryDirectory() as tmpdir:
        log_file = os.path.join(tmpdir, "sitemap.log")
        try:
            setup_logging("debug", log_file)

            assert root_logger.level == logging.DEBUG
            assert len(root_logger.handlers) == 2

            logging.getLogger("sitemap_writer.test").info("hello")
            for handler in root_logger.handlers:
                handler.flush()

            with open(log_file) as f:
                assert "sitemap_writer.test - INFO - hello" in f.read()
        finally:
            for handler in root_logger.handlers[:]:
                root_logger.removeHandler(handler)
                handler.close()
            for handler in saved_handlers:
                root_logger.addHandler(handler)
            root_logger.setLevel(saved_level)
