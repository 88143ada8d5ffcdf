"""Data models for KAI booking scraper."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TrainOrigin:
    """Departure side of a train offering."""

    departure_station: str = ''
    departure_date: str = ''
    departure_time: str = ''

    def to_dict(self):
        """Convert to dictionary representation."""
        return {
            'departureStation': self.departure_station,
            'departureDate': self.departure_date,
            'departureTime': self.departure_time,
        }


@dataclass(frozen=True)
class TrainDestination:
    """Arrival side of a train offering."""

    arrival_station: str = ''
    arrival_date: str = ''
    arrival_time: str = ''

    def to_dict(self):
        """Convert to dictionary representation."""
        return {
            'arrivalStation': self.arrival_station,
            'arrivalDate': self.arrival_date,
            'arrivalTime': self.arrival_time,
        }


@dataclass(frozen=True)
class Train:
    """
    One train offering from a search results page.

    All fields hold the text as shown on the page; nothing is parsed
    into numbers or dates.
    """

    train_name: str
    train_class: str
    origin: TrainOrigin
    destination: TrainDestination
    travel_time: str = ''
    ticket_price: str = ''  # e.g. 'Rp 250.000'
    seat_availability: str = ''

    def to_dict(self):
        """Convert to dictionary representation."""
        return {
            'trainName': self.train_name,
            'trainClass': self.train_class,
            'trainOrigin': self.origin.to_dict(),
            'trainDestination': self.destination.to_dict(),
            'travelTime': self.travel_time,
            'ticketPrice': self.ticket_price,
            'seatAvailability': self.seat_availability,
        }
