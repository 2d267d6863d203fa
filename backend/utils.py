"""
utils.py - Utility functions and helpers
"""

import json
import logging
import math
from datetime import datetime

import PyPDF2

logger = logging.getLogger("mock_interview.utils")


class PdfParseError(Exception):
    """Raised when a PDF cannot be read."""


# -------------------- JSON columns --------------------
def from_json(json_str, default=None):
    """Parse a JSON text column, falling back to `default` (an empty list) on bad input."""
    if default is None:
        default = []
    if not json_str:
        return default
    try:
        return json.loads(json_str)
    except (json.JSONDecodeError, TypeError):
        return default


def to_json(value):
    """Serialize a list/dict for a JSON text column; empty values become NULL."""
    if not value:
        return None
    return json.dumps(value)


def isoformat(dt):
    return dt.isoformat() if isinstance(dt, datetime) else None


# -------------------- Numbers --------------------
def round_half_up(value):
    """Round to the nearest integer with halves going up (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))


def clamp(value, low, high):
    return max(low, min(high, value))


# -------------------- File processing --------------------
def clean_extracted_text(text):
    """Trim every line and drop blank ones, keeping line breaks."""
    lines = (line.strip() for line in (text or "").splitlines())
    return "\n".join(line for line in lines if line)


def extract_text_from_pdf(file_stream):
    """Extract and clean text from a PDF file stream."""
    try:
        pdf_reader = PyPDF2.PdfReader(file_stream)
        text = ""
        for page in pdf_reader.pages:
            page_text = page.extract_text() or ""
            text += page_text + "\n"
    except Exception as e:
        logger.error("❌ PDF extraction error: %s", e)
        raise PdfParseError("Failed to parse PDF file") from e
    return clean_extracted_text(text)
