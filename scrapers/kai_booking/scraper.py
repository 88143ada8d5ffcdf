"""Main KAI booking scraper implementation."""

import argparse
import json
import logging
import sys
from typing import List, Dict, Any, Optional
from urllib.parse import urlparse

from scrapers.common.http_client import get_http_session, safe_get, RateLimiter
from scrapers.common.exceptions import (
    ConfigurationError,
    NetworkError,
    NoResultsError,
    ParsingError,
    ValidationError,
)
from scrapers.common.validators import validate_search_params
from scrapers.kai_booking.config import ALLOWED_DOMAINS, BASE_URL, DEFAULT_CONFIG, DEFAULT_HEADERS
from scrapers.kai_booking.models import Train
from scrapers.kai_booking.parser import parse_search_results
from scrapers.kai_booking.query import build_query, build_search_url


logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INVALID_INPUT = 2
EXIT_NO_RESULTS = 3


class KaiBookingScraper:
    """Scraper for booking.kai.id train search results."""

    def __init__(self, base_url: str = BASE_URL):
        """
        Initialize scraper.

        Args:
            base_url: Search page URL

        Raises:
            ConfigurationError: If base_url points outside the allowed domains
        """
        host = urlparse(base_url).hostname
        if host not in ALLOWED_DOMAINS:
            raise ConfigurationError(
                f"Base URL host {host!r} is not allowed. "
                f"Allowed: {', '.join(ALLOWED_DOMAINS)}"
            )

        self.base_url = base_url
        self.session = get_http_session(
            max_retries=DEFAULT_CONFIG['max_retries'],
            user_agent=DEFAULT_CONFIG['user_agent'],
            backoff_factor=DEFAULT_CONFIG['backoff_factor'],
            retry_statuses=DEFAULT_CONFIG['retry_statuses'],
            headers=DEFAULT_HEADERS
        )
        self.rate_limiter = RateLimiter(DEFAULT_CONFIG['rate_limit'])

        logger.info(f"Initialized KAI booking scraper for {base_url}")

    def search(self, origination: str, destination: str, date: str) -> List[Train]:
        """
        Search trains between two stations on a date.

        Args:
            origination: Departure station code, e.g. 'PSE'
            destination: Arrival station code, e.g. 'YK'
            date: Travel date (YYYY-MM-DD)

        Returns:
            List of Train objects, empty if no trains were found

        Raises:
            ValidationError: If the input is invalid (InvalidMonthError for unknown months)
            NetworkError: If request fails
            ParsingError: If response cannot be parsed
        """
        is_valid, error = validate_search_params(origination, destination, date)
        if not is_valid:
            raise ValidationError(error)

        query = build_query(origination, destination, date)
        url = build_search_url(query, self.base_url)

        self.rate_limiter.wait()

        try:
            response = safe_get(
                self.session,
                url,
                allowed_domains=ALLOWED_DOMAINS,
                timeout=DEFAULT_CONFIG['timeout']
            )

            trains = parse_search_results(response.text)
            logger.info(f"Found {len(trains)} trains from {origination} to {destination}")
            return trains

        except NetworkError:
            raise
        except ParsingError:
            raise
        except Exception as e:
            logger.error(f"Unexpected error searching {origination} -> {destination}: {e}")
            raise

    def search_or_raise(self, origination: str, destination: str, date: str) -> List[Train]:
        """
        Like search(), but an empty result is reported as NoResultsError.

        Raises:
            NoResultsError: If no trains were found
        """
        trains = self.search(origination, destination, date)
        if not trains:
            raise NoResultsError(
                f"No trains found from {origination} to {destination} on {date}"
            )
        return trains

    def export_to_dict(self, trains: List[Train]) -> List[Dict[str, Any]]:
        """
        Export trains to dictionary format.

        Args:
            trains: List of Train objects

        Returns:
            List of dictionaries
        """
        return [train.to_dict() for train in trains]


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line interface for the scraper."""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    parser = argparse.ArgumentParser(description='KAI booking train search scraper')
    parser.add_argument(
        '--origin',
        required=True,
        help='Departure station code (e.g. PSE)'
    )
    parser.add_argument(
        '--destination',
        required=True,
        help='Arrival station code (e.g. YK)'
    )
    parser.add_argument(
        '--date',
        required=True,
        help='Travel date in YYYY-MM-DD format'
    )
    parser.add_argument(
        '--output',
        help='Output JSON file (default: stdout)'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        scraper = KaiBookingScraper()
        trains = scraper.search_or_raise(args.origin, args.destination, args.date)
        output_data = scraper.export_to_dict(trains)

        if args.output:
            with open(args.output, 'w', encoding='utf-8') as f:
                json.dump(output_data, f, indent=2, ensure_ascii=False)
            logger.info(f"Results written to {args.output}")
        else:
            print(json.dumps(output_data, indent=2, ensure_ascii=False))

        logger.info(f"Scraping completed successfully: {len(trains)} trains")
        return EXIT_OK

    except ValidationError as e:
        logger.error(f"Invalid input: {e}")
        return EXIT_INVALID_INPUT
    except NoResultsError as e:
        logger.warning(str(e))
        return EXIT_NO_RESULTS
    except Exception as e:
        logger.error(f"Scraping failed: {e}", exc_info=True)
        return EXIT_ERROR


if __name__ == '__main__':
    sys.exit(main())
