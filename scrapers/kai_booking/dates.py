"""Conversion of ISO dates into the format the KAI search form expects."""

from types import MappingProxyType
from typing import Mapping

from ..common.exceptions import InvalidMonthError, ValidationError
from ..common.validators import DATE_PATTERN


MONTH_NAMES: Mapping[str, str] = MappingProxyType({
    '01': 'Januari',
    '02': 'Februari',
    '03': 'Maret',
    '04': 'April',
    '05': 'Mei',
    '06': 'Juni',
    '07': 'Juli',
    '08': 'Agustus',
    '09': 'September',
    '10': 'Oktober',
    '11': 'November',
    '12': 'Desember',
})


def to_localized_date(date: str, month_names: Mapping[str, str] = MONTH_NAMES) -> str:
    """
    Convert a YYYY-MM-DD date into DD-MonthName-YYYY.

    Only the first YYYY-MM-DD run in the input is converted, so anything
    is_valid_date() accepts gives a well-formed result.

    Args:
        date: Date string, e.g. '2022-09-20'
        month_names: Month key to name table

    Returns:
        Localized date, e.g. '20-September-2022'

    Raises:
        ValidationError: If the input contains no YYYY-MM-DD run
        InvalidMonthError: If the month segment is not a known key
    """
    match = DATE_PATTERN.search(date)
    if not match:
        raise ValidationError(f"Invalid date format: {date} (expected YYYY-MM-DD)")

    year, month, day = match.group().split('-')
    if month not in month_names:
        raise InvalidMonthError(month)

    return '-'.join([day, month_names[month], year])
