"""Configuration for KAI booking scraper."""

from typing import Dict, Any, Tuple

BASE_URL = 'https://booking.kai.id/'

# The scraper refuses to visit any other host
ALLOWED_DOMAINS: Tuple[str, ...] = ('booking.kai.id',)

# Fixed search form values, one adult and no infants
QUERY_DEFAULTS: Dict[str, str] = {
    'adult': '1',
    'infant': '0',
    'submit': 'Cari & Pesan Tiket',
}

# Default configuration
DEFAULT_CONFIG: Dict[str, Any] = {
    'timeout': 30,  # seconds
    'max_retries': 3,
    'backoff_factor': 0.5,
    'retry_statuses': (429, 500, 502, 503, 504),
    'rate_limit': 30,  # requests per minute
    'user_agent': 'KaiBooking-Scraper/1.0',
}

# The results page is rendered in Indonesian
DEFAULT_HEADERS: Dict[str, str] = {
    'Accept': 'text/html,application/xhtml+xml',
    'Accept-Language': 'id-ID,id;q=0.9',
}
