"""Search query construction for booking.kai.id."""

import logging
from typing import Dict
from urllib.parse import urlencode

from .config import BASE_URL, QUERY_DEFAULTS
from .dates import to_localized_date


logger = logging.getLogger(__name__)


def build_query(origination: str, destination: str, date: str) -> Dict[str, str]:
    """
    Build the outbound search query.

    Inputs are not re-validated here; see validate_search_params().

    Args:
        origination: Departure station code, e.g. 'PSE'
        destination: Arrival station code, e.g. 'YK'
        date: Travel date (YYYY-MM-DD)

    Returns:
        Query mapping with keys origination, destination, tanggal,
        adult, infant and submit, in that order

    Raises:
        InvalidMonthError: If the date month is unknown
    """
    query = {
        'origination': origination,
        'destination': destination,
        'tanggal': to_localized_date(date),
        'adult': QUERY_DEFAULTS['adult'],
        'infant': QUERY_DEFAULTS['infant'],
        'submit': QUERY_DEFAULTS['submit'],
    }
    logger.debug(f"Built search query: {query}")
    return query


def encode_query(query: Dict[str, str]) -> str:
    """URL-encode a search query."""
    return urlencode(query)


def build_search_url(query: Dict[str, str], base_url: str = BASE_URL) -> str:
    """Return the full search URL for a query."""
    return f"{base_url}?{encode_query(query)}"
