"""
Address Formatting Transformer

Normalizes Australian postcodes and flattens address components into the
single text line the location search matches against.
"""
import re
from typing import Optional

from src.realestate_directory.utils.logger import get_logger

logger = get_logger(__name__)

POSTCODE_LENGTH = 4


def normalize_postcode(postcode) -> Optional[str]:
    """
    Normalize a postcode to 4 digits.

    Spreadsheet and CSV sources frequently store postcodes as numbers, which
    drops the leading zero of Northern Territory postcodes (800 -> "0800").

    Args:
        postcode: Raw postcode (str, int or float)

    Returns:
        4-digit postcode or None
    """
    if postcode is None:
        return None

    text = str(postcode).strip()
    if text.endswith(".0"):
        text = text[:-2]

    # Extract digits
    digits = re.sub(r'\D', '', text)

    if not digits or len(digits) > POSTCODE_LENGTH:
        logger.debug("postcode_not_normalized", raw=text[:20])
        return None

    return digits.zfill(POSTCODE_LENGTH)


def normalize_text(value: Optional[str]) -> str:
    """Trim and lowercase, treating None as empty."""
    if not value:
        return ""
    return value.strip().lower()


def format_address_text(unit: Optional[str], street: Optional[str],
                        suburb: Optional[str], postcode: Optional[str],
                        state: Optional[str]) -> str:
    """
    Build the address line used for substring matching.

    Components are joined in display order (unit, street, suburb, postcode,
    state); missing components are skipped.

    Returns:
        Space-joined address text, possibly empty
    """
    parts = []

    for part in (unit, street, suburb, postcode, state):
        if part and part.strip():
            parts.append(' '.join(part.split()))

    return ' '.join(parts)
