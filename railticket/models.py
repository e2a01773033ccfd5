from dataclasses import dataclass, fields
from typing import Any, Dict

from .utils import new_ticket_id, utc_timestamp

UNKNOWN = "Unknown"

# attribute name -> persisted key
_JSON_KEYS = {
    "id": "id",
    "pnr": "pnr",
    "train_number": "trainNumber",
    "train_name": "trainName",
    "origin": "from",
    "destination": "to",
    "date_of_journey": "dateOfJourney",
    "departure_time": "departureTime",
    "travel_class": "class",
    "coach": "coach",
    "seat_berth": "seatBerth",
    "passenger_name": "passengerName",
    "uploaded_at": "uploadedAt",
}

@dataclass(frozen=True)
class Ticket:
    """One passenger's reservation on one journey segment.

    Empty string means "absent" for every free-text field. Tickets are never
    edited in place; replace them instead.
    """
    id: str
    pnr: str
    train_number: str
    train_name: str
    origin: str
    destination: str
    date_of_journey: str
    departure_time: str
    travel_class: str
    coach: str
    seat_berth: str
    passenger_name: str
    uploaded_at: str

    @classmethod
    def create(cls, pnr: str = "", train_number: str = "", train_name: str = "",
               origin: str = "", destination: str = "", date_of_journey: str = "",
               departure_time: str = "", travel_class: str = "", coach: str = "",
               seat_berth: str = "", passenger_name: str = "") -> "Ticket":
        """Build a ticket with a fresh id and upload timestamp."""
        return cls(
            id=new_ticket_id(),
            pnr=pnr,
            train_number=train_number,
            train_name=train_name,
            origin=origin,
            destination=destination,
            date_of_journey=date_of_journey,
            departure_time=departure_time,
            travel_class=travel_class,
            coach=coach,
            seat_berth=seat_berth,
            passenger_name=passenger_name,
            uploaded_at=utc_timestamp(),
        )

    def to_dict(self) -> Dict[str, str]:
        return {_JSON_KEYS[f.name]: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Ticket":
        kwargs = {}
        for attr, key in _JSON_KEYS.items():
            val = data.get(key)
            kwargs[attr] = "" if val is None else str(val)
        return cls(**kwargs)
