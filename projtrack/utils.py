"""
Utility functions for the projtrack CLI application.
"""

import re
from datetime import date, datetime
from typing import List, Optional

from projtrack.constants import DATE_FORMAT, DATE_REGEX_PATTERN, ID_REGEX_PATTERN


def parse_date(date_string: str) -> Optional[date]:
    """
    Parse a YYYY-MM-DD date string.

    Args:
        date_string: The date string to parse.

    Returns:
        A date object if parsing succeeds, None otherwise.

    Examples:
        >>> parse_date("2025-12-10")
        datetime.date(2025, 12, 10)
        >>> parse_date("10/12/2025") is None
        True
        >>> parse_date("2025-1-5") is None
        True
    """
    date_string = date_string.strip()
    if not re.match(DATE_REGEX_PATTERN, date_string):
        return None
    try:
        return datetime.strptime(date_string, DATE_FORMAT).date()
    except ValueError:
        return None


def format_date(value: date) -> str:
    """Format a date in YYYY-MM-DD form."""
    return value.strftime(DATE_FORMAT)


def parse_tags(tags_string: Optional[str]) -> List[str]:
    """
    Split a comma-separated tag string, dropping blanks and surrounding spaces.

    Examples:
        >>> parse_tags("work, fpga,,")
        ['work', 'fpga']
    """
    if not tags_string:
        return []
    return [tag.strip() for tag in tags_string.split(",") if tag.strip()]


def parse_id(id_string: str) -> Optional[int]:
    """Parse a project id, returning None for anything that isn't an integer."""
    id_string = id_string.strip()
    if not re.match(ID_REGEX_PATTERN, id_string):
        return None
    return int(id_string)


def truncate(text: str, max_length: int) -> str:
    """Shorten text to max_length characters, ending with '...' when cut."""
    if len(text) <= max_length:
        return text
    if max_length <= 3:
        return text[:max_length]
    return text[: max_length - 3] + "..."
