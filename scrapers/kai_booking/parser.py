"""HTML parsing logic for booking.kai.id search results."""

import logging
from typing import List, NamedTuple
from bs4 import BeautifulSoup, Tag

from ..common.exceptions import ParsingError
from .models import Train, TrainOrigin, TrainDestination


logger = logging.getLogger(__name__)


# One container per train offering
CONTAINER_SELECTOR = 'div.data-wrapper'

# Positions a FieldRule can read from
TEXT = 'text'
FIRST_CHILD = 'first_child'
LAST_CHILD = 'last_child'
POSITIONS = (TEXT, FIRST_CHILD, LAST_CHILD)


class FieldRule(NamedTuple):
    """Where a field lives inside a container."""

    selector: str
    position: str = TEXT


FIELD_RULES = {
    'train_name': FieldRule('div.name'),
    # The class label is whatever renders last in the first column
    'train_class': FieldRule('div.col-one', LAST_CHILD),
    'departure_station': FieldRule('div.station-start'),
    'departure_date': FieldRule('div.date-start'),
    'departure_time': FieldRule('div.time-start'),
    'arrival_station': FieldRule('div.card-arrival', FIRST_CHILD),
    'arrival_date': FieldRule('div.card-arrival', LAST_CHILD),
    'arrival_time': FieldRule('div.time-end'),
    'travel_time': FieldRule('div.long-time'),
    'ticket_price': FieldRule('div.price'),
    'seat_availability': FieldRule('small.sisa-kursi'),
}


def extract_field(container: Tag, rule: FieldRule) -> str:
    """
    Read one field from a container.

    Args:
        container: Container element
        rule: Selector and position to read

    Returns:
        Stripped text, or an empty string if nothing matches
    """
    if rule.position not in POSITIONS:
        raise ValueError(f"Unknown field position: {rule.position}")

    matches = container.select(rule.selector)
    if not matches:
        return ''

    if rule.position == TEXT:
        return ''.join(elem.get_text() for elem in matches).strip()

    children = [
        child
        for elem in matches
        for child in elem.find_all(recursive=False)
    ]
    if not children:
        return ''

    if rule.position == FIRST_CHILD:
        return children[0].get_text().strip()
    return children[-1].get_text().strip()


def parse_train(container: Tag) -> Train:
    """
    Build a Train from one container element.

    Missing fields are left empty.

    Args:
        container: A div.data-wrapper element

    Returns:
        Train object
    """
    fields = {name: extract_field(container, rule) for name, rule in FIELD_RULES.items()}

    return Train(
        train_name=fields['train_name'],
        train_class=fields['train_class'],
        origin=TrainOrigin(
            departure_station=fields['departure_station'],
            departure_date=fields['departure_date'],
            departure_time=fields['departure_time'],
        ),
        destination=TrainDestination(
            arrival_station=fields['arrival_station'],
            arrival_date=fields['arrival_date'],
            arrival_time=fields['arrival_time'],
        ),
        travel_time=fields['travel_time'],
        ticket_price=fields['ticket_price'],
        seat_availability=fields['seat_availability'],
    )


def extract_trains(document: BeautifulSoup) -> List[Train]:
    """
    Extract every train offering from a parsed results page.

    Args:
        document: Parsed search results page

    Returns:
        List of Train objects in document order, empty if none were found
    """
    containers = document.select(CONTAINER_SELECTOR)

    if not containers:
        logger.warning("No train containers found in search results")
        return []

    trains = []
    for container in containers:
        train = parse_train(container)
        logger.debug(f"Parsed train: {train.train_name} ({train.train_class})")
        trains.append(train)

    logger.info(f"Parsed {len(trains)} trains")
    return trains


def parse_search_results(html: str) -> List[Train]:
    """
    Parse a search results page.

    Args:
        html: HTML content of search results page

    Returns:
        List of Train objects

    Raises:
        ParsingError: If the page cannot be parsed
    """
    try:
        soup = BeautifulSoup(html, 'html.parser')
        return extract_trains(soup)
    except Exception as e:
        raise ParsingError(f"Failed to parse search results: {e}")
