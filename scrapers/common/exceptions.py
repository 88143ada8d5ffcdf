"""Common exception classes for scrapers."""


class ScraperError(Exception):
    """Base exception for scraper errors."""
    pass


class NetworkError(ScraperError):
    """Network-related errors."""
    pass


class ParsingError(ScraperError):
    """Data parsing errors."""
    pass


class ValidationError(ScraperError):
    """Invalid search input (station codes or date)."""
    pass


class InvalidMonthError(ValidationError):
    """Date month segment is not one of the twelve known keys."""

    def __init__(self, month: str):
        self.month = month
        super().__init__(f"Unknown month: {month!r}")


class NoResultsError(ScraperError):
    """Search completed but no trains were found."""
    pass


class ConfigurationError(ScraperError):
    """Configuration errors."""
    pass
