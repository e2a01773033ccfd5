"""Multi-passenger extraction from a decoded ticket QR payload."""
import logging
from typing import Dict, Any, List, Optional

from .extractors import extract_fields, find_passenger_blocks, decompose_status
from .models import Ticket, UNKNOWN
from .rules import load_rules
from .utils import normalize_text

logger = logging.getLogger(__name__)

def parse_qr_data(text: str, rules: Optional[Dict[str, Any]] = None) -> Optional[List[Ticket]]:
    """
    Return one Ticket per passenger block, sharing the trip-level fields.

    An empty list means the payload held no passenger blocks; None means
    parsing itself failed.
    """
    try:
        rules = rules or load_rules()
        clean = normalize_text(text)

        trip = extract_fields(clean, rules["qr"])
        shared = dict(
            pnr=trip.get("pnr") or "",
            train_number=trip.get("train_number") or "",
            train_name=trip.get("train_name") or UNKNOWN,
            origin=trip.get("origin") or "",
            destination=trip.get("destination") or "",
            date_of_journey=trip.get("date_of_journey") or "",
            departure_time=trip.get("departure_time") or "",
            travel_class=trip.get("travel_class") or UNKNOWN,
        )

        tickets: List[Ticket] = []
        status_pattern = rules["status"]["pattern"]
        for name, status in find_passenger_blocks(clean, rules["qr_passenger"]):
            parts = decompose_status(status, status_pattern)
            logger.debug("passenger %r status %r -> coach=%r seat=%r",
                         name, status, parts.coach, parts.seat_berth)
            tickets.append(Ticket.create(
                coach=parts.coach,
                seat_berth=parts.seat_berth,
                passenger_name=name,
                **shared,
            ))
    except Exception:
        logger.exception("error parsing QR payload")
        return None

    if not tickets:
        logger.info("no passenger blocks found in QR payload")
    return tickets
