"""Input validation utilities for scrapers."""

import re
from typing import Optional, Tuple


# Unanchored: a match anywhere in the input is accepted.
STATION_PATTERN = re.compile(r'[A-Z]{2,3}')
DATE_PATTERN = re.compile(r'\d{4}-\d{2}-\d{2}')


def is_valid_station(code: str) -> bool:
    """
    Validate station code format.

    Args:
        code: Station code, e.g. 'PSE' or 'YK'

    Returns:
        True if the code contains a run of 2-3 uppercase letters
    """
    return bool(STATION_PATTERN.search(code))


def is_valid_date(date: str) -> bool:
    """
    Validate date format.

    Args:
        date: Date string in YYYY-MM-DD form

    Returns:
        True if valid, False otherwise
    """
    return bool(DATE_PATTERN.search(date))


def validate_search_params(
    origination: str,
    destination: str,
    date: str
) -> Tuple[bool, Optional[str]]:
    """
    Validate the inputs of a train search.

    Args:
        origination: Departure station code
        destination: Arrival station code
        date: Travel date (YYYY-MM-DD)

    Returns:
        Tuple of (is_valid, error_message)
    """
    for field, value in (('origination', origination), ('destination', destination)):
        if not value:
            return False, f"Missing required field: {field}"
        if not is_valid_station(value):
            return False, f"Invalid {field} station code: {value}"

    if not date:
        return False, "Missing required field: date"
    if not is_valid_date(date):
        return False, f"Invalid date format: {date} (expected YYYY-MM-DD)"

    return True, None
