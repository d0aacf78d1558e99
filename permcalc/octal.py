"""
Validation and parsing of 4-digit octal permission strings.
"""

import logging

from .config import OCTAL_WIDTH, PERMISSION_MASK
from .exceptions import OctalFormatError, PermissionRangeError

logger = logging.getLogger(__name__)


def is_valid_octal4(text: str) -> bool:
    """
    Check that ``text`` is exactly four characters, each '0'..'7'.

    No whitespace trimming or sign handling; "644" and " 644" are both
    rejected.
    """
    if len(text) != OCTAL_WIDTH:
        return False
    return all("0" <= ch <= "7" for ch in text)


def octal_to_int(text: str) -> int:
    """Convert a validated octal digit string to its integer value."""
    value = 0
    for ch in text:
        value = value * 8 + (ord(ch) - ord("0"))
    return value


def check_range(value: int, field: str) -> int:
    """
    Ensure ``value`` fits in the nine permission bits.

    Args:
        value: Parsed integer value
        field: Name of the input field, used in the error message

    Returns:
        The value unchanged

    Raises:
        PermissionRangeError: If value is outside 0..0o777
    """
    if value < 0 or value > PERMISSION_MASK:
        logger.debug(f"{field} value {value:o} exceeds {PERMISSION_MASK:o}")
        raise PermissionRangeError(field, value)
    return value


def parse_field(text: str, field: str) -> int:
    """
    Validate and parse one input field.

    The range is not checked here; callers run ``check_range`` once every
    field has passed format validation.

    Raises:
        OctalFormatError: If text is not 4-digit octal
    """
    if not is_valid_octal4(text):
        logger.debug(f"Rejected {field} input {text!r}")
        raise OctalFormatError(field)
    value = octal_to_int(text)
    logger.debug(f"Parsed {field} {text} -> {value}")
    return value
