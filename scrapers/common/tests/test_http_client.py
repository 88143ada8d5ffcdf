"""Tests for HTTP client utilities."""

import unittest
from unittest.mock import Mock, patch
import time
import requests

from scrapers.common.http_client import RateLimiter, get_http_session, safe_get, is_allowed_url
from scrapers.common.exceptions import ConfigurationError, NetworkError


class TestRateLimiter(unittest.TestCase):
    """Tests for RateLimiter class."""

    def test_rate_limiter_init(self):
        """Test RateLimiter initialization."""
        # :: Act
        limiter = RateLimiter(requests_per_minute=30)

        # :: Assert
        self.assertEqual(limiter.requests_per_minute, 30)
        self.assertEqual(limiter.min_interval, 2.0)  # 60/30
        self.assertIsNone(limiter.last_request)

    def test_rate_limiter_rejects_non_positive_rate(self):
        """Test that a zero or negative rate is refused."""
        # :: Act & Assert
        for rate in [0, -5]:
            with self.subTest(rate=rate):
                with self.assertRaises(ValueError):
                    RateLimiter(requests_per_minute=rate)

    @patch('scrapers.common.http_client.time')
    def test_rate_limiter_sleeps_remaining_interval(self, mock_time):
        """Test that only the remaining part of the interval is slept."""
        # :: Setup
        mock_time.monotonic.side_effect = [100.0, 100.5, 102.0]
        limiter = RateLimiter(requests_per_minute=30)  # 2s interval

        # :: Act
        limiter.wait()
        limiter.wait()

        # :: Assert
        mock_time.sleep.assert_called_once_with(1.5)
        self.assertEqual(limiter.last_request, 102.0)

    def test_rate_limiter_first_wait(self):
        """Test that first wait doesn't sleep."""
        # :: Setup
        limiter = RateLimiter(requests_per_minute=60)

        # :: Act
        start = time.time()
        limiter.wait()
        elapsed = time.time() - start

        # :: Assert
        self.assertLess(elapsed, 0.1, "First wait should not sleep")
        self.assertIsNotNone(limiter.last_request)

    def test_rate_limiter_subsequent_wait(self):
        """Test that the second wait respects the rate limit."""
        # :: Setup
        limiter = RateLimiter(requests_per_minute=120)  # one request per 0.5s

        # :: Act
        limiter.wait()
        start = time.time()
        limiter.wait()
        elapsed = time.time() - start

        # :: Assert
        self.assertGreater(elapsed, 0.4, "Should wait close to 0.5 seconds")
        self.assertLess(elapsed, 0.8, "Should not wait much more than 0.5 seconds")


class TestGetHttpSession(unittest.TestCase):
    """Tests for get_http_session function."""

    def test_get_http_session_default(self):
        """Test creating session with default parameters."""
        # :: Act
        session = get_http_session()

        # :: Assert
        self.assertIsInstance(session, requests.Session)
        self.assertIn('KaiBooking', session.headers['User-Agent'])

    def test_get_http_session_custom_user_agent(self):
        """Test creating session with custom user agent."""
        # :: Act
        session = get_http_session(user_agent='TestBot/1.0')

        # :: Assert
        self.assertEqual(session.headers['User-Agent'], 'TestBot/1.0')

    def test_get_http_session_has_retry_adapter(self):
        """Test that session has retry adapter configured."""
        # :: Act
        session = get_http_session(max_retries=5)

        # :: Assert
        adapter = session.adapters['https://']
        self.assertEqual(adapter.max_retries.total, 5)
        self.assertIn('http://', session.adapters)

    def test_get_http_session_retry_policy(self):
        """Test backoff, retried statuses and GET-only retries."""
        # :: Act
        session = get_http_session(backoff_factor=0.5, retry_statuses=[503])

        # :: Assert
        retry = session.adapters['http://'].max_retries
        self.assertEqual(retry.backoff_factor, 0.5)
        self.assertEqual(set(retry.status_forcelist), {503})
        self.assertEqual(set(retry.allowed_methods), {'GET'})

    def test_get_http_session_extra_headers(self):
        """Test that extra headers are added next to the user agent."""
        # :: Act
        session = get_http_session(user_agent='TestBot/1.0', headers={'Accept-Language': 'id-ID'})

        # :: Assert
        self.assertEqual(session.headers['Accept-Language'], 'id-ID')
        self.assertEqual(session.headers['User-Agent'], 'TestBot/1.0')


class TestIsAllowedUrl(unittest.TestCase):
    """Tests for is_allowed_url function."""

    def test_is_allowed_url(self):
        """Test host matching against the allowed domains."""
        # :: Setup
        cases = [
            ('https://booking.kai.id/?origination=PSE', True),
            ('https://BOOKING.KAI.ID/', True),
            ('https://kai.id/', False),
            ('https://booking.kai.id.example.com/', False),
            ('not a url', False),
        ]

        # :: Act & Assert
        for url, expected in cases:
            with self.subTest(url=url):
                self.assertEqual(is_allowed_url(url, ('booking.kai.id',)), expected)


class TestSafeGet(unittest.TestCase):
    """Tests for safe_get function."""

    def test_safe_get_success(self):
        """Test successful GET request."""
        # :: Setup
        mock_session = Mock()
        mock_response = Mock()
        mock_response.raise_for_status = Mock()
        mock_session.get.return_value = mock_response

        # :: Act
        result = safe_get(mock_session, 'https://booking.kai.id/')

        # :: Assert
        self.assertEqual(result, mock_response)
        mock_session.get.assert_called_once_with('https://booking.kai.id/')

    def test_safe_get_passes_kwargs(self):
        """Test that extra kwargs reach session.get but allowed_domains does not."""
        # :: Setup
        mock_session = Mock()
        mock_session.get.return_value = Mock()

        # :: Act
        safe_get(
            mock_session,
            'https://booking.kai.id/',
            allowed_domains=('booking.kai.id',),
            timeout=30
        )

        # :: Assert
        mock_session.get.assert_called_once_with('https://booking.kai.id/', timeout=30)

    def test_safe_get_refuses_other_domains(self):
        """Test that hosts outside the allowed domains are never requested."""
        # :: Setup
        mock_session = Mock()

        # :: Act & Assert
        with self.assertRaises(ConfigurationError):
            safe_get(mock_session, 'https://example.com/', allowed_domains=('booking.kai.id',))

        mock_session.get.assert_not_called()

    def test_safe_get_network_error(self):
        """Test handling of network errors."""
        # :: Setup
        mock_session = Mock()
        mock_session.get.side_effect = requests.ConnectionError("Connection failed")

        # :: Act & Assert
        with self.assertRaises(NetworkError) as context:
            safe_get(mock_session, 'https://booking.kai.id/')

        self.assertIn('Connection failed', str(context.exception))

    def test_safe_get_http_error(self):
        """Test handling of HTTP errors."""
        # :: Setup
        mock_session = Mock()
        mock_response = Mock()
        mock_response.raise_for_status.side_effect = requests.HTTPError("503 Service Unavailable")
        mock_session.get.return_value = mock_response

        # :: Act & Assert
        with self.assertRaises(NetworkError):
            safe_get(mock_session, 'https://booking.kai.id/')


if __name__ == '__main__':
    unittest.main()
