"""Shared HTTP client with retry logic, rate limiting and domain filtering."""

import time
import logging
from typing import Dict, Iterable, Optional, Sequence
from urllib.parse import urlparse
import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .exceptions import ConfigurationError, NetworkError


logger = logging.getLogger(__name__)


class RateLimiter:
    """Keeps requests at least 60 / requests_per_minute seconds apart."""

    def __init__(self, requests_per_minute: int = 30):
        if requests_per_minute <= 0:
            raise ValueError(f"requests_per_minute must be positive, got {requests_per_minute}")
        self.requests_per_minute = requests_per_minute
        self.min_interval = 60.0 / requests_per_minute
        # time.monotonic() of the previous request
        self.last_request: Optional[float] = None

    def wait(self):
        """Block until the next request is allowed."""
        now = time.monotonic()
        if self.last_request is not None:
            sleep_time = self.min_interval - (now - self.last_request)
            if sleep_time > 0:
                logger.debug(f"Rate limiting: sleeping for {sleep_time:.2f} seconds")
                time.sleep(sleep_time)
                now = time.monotonic()
        self.last_request = now


def get_http_session(
    max_retries: int = 3,
    user_agent: str = "KaiBooking-Scraper/1.0",
    backoff_factor: float = 0.3,
    retry_statuses: Sequence[int] = (429, 500, 502, 503, 504),
    headers: Optional[Dict[str, str]] = None
) -> requests.Session:
    """
    Create an HTTP session that retries failed GET requests.

    Args:
        max_retries: Maximum number of retries for failed requests
        user_agent: User agent string to identify the scraper
        backoff_factor: Exponential backoff factor between retries
        retry_statuses: Response status codes that trigger a retry
        headers: Extra default headers, e.g. Accept-Language

    Returns:
        Configured requests.Session object
    """
    retry = Retry(
        total=max_retries,
        backoff_factor=backoff_factor,
        status_forcelist=tuple(retry_statuses),
        allowed_methods=frozenset(['GET']),
        raise_on_status=False
    )
    adapter = HTTPAdapter(max_retries=retry)

    session = requests.Session()
    for prefix in ('http://', 'https://'):
        session.mount(prefix, adapter)

    session.headers['User-Agent'] = user_agent
    session.headers.update(headers or {})

    return session


def is_allowed_url(url: str, allowed_domains: Iterable[str]) -> bool:
    """
    Check that the URL host is one of the allowed domains.

    Args:
        url: Absolute URL
        allowed_domains: Host names the scraper may visit

    Returns:
        True if the host matches exactly
    """
    host = urlparse(url).hostname or ''
    return host.lower() in {domain.lower() for domain in allowed_domains}


def safe_get(
    session: requests.Session,
    url: str,
    allowed_domains: Optional[Iterable[str]] = None,
    **kwargs
) -> requests.Response:
    """
    Perform a GET request with error handling.

    Args:
        session: Requests session to use
        url: URL to fetch
        allowed_domains: Optional host whitelist; other hosts are refused
        **kwargs: Additional arguments to pass to session.get()

    Returns:
        Response object

    Raises:
        ConfigurationError: If the URL host is not allowed
        NetworkError: If the request fails
    """
    if allowed_domains is not None and not is_allowed_url(url, allowed_domains):
        raise ConfigurationError(f"Refusing to visit {url}: domain not allowed")

    try:
        logger.info(f"Visiting {url}")
        response = session.get(url, **kwargs)
        response.raise_for_status()
        return response
    except requests.RequestException as e:
        logger.error(f"Network error fetching {url}: {e}")
        raise NetworkError(f"Failed to fetch {url}: {e}")
