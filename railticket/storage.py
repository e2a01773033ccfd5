import json
import logging
import os
from datetime import datetime
from typing import List, Iterable, Tuple

from .models import Ticket
from .utils import try_parse_date

logger = logging.getLogger(__name__)

STORAGE_KEY = "tickets"

def load_tickets(path: str) -> List[Ticket]:
    """Load the saved ticket list. A missing or unreadable store yields []."""
    if not os.path.exists(path):
        return []
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f) or {}
        return [Ticket.from_dict(d) for d in data.get(STORAGE_KEY, [])]
    except (OSError, ValueError, AttributeError, TypeError) as e:
        logger.error("failed to load tickets from %s: %s", path, e)
        return []

def save_tickets(path: str, tickets: Iterable[Ticket]) -> None:
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    payload = {STORAGE_KEY: [t.to_dict() for t in tickets]}
    with open(path, "w", encoding="utf-8") as f:
        json.dump(payload, f, ensure_ascii=False, indent=2)

def add_tickets(path: str, new: Iterable[Ticket]) -> List[Ticket]:
    """Prepend freshly parsed tickets (newest first) and persist."""
    tickets = list(new) + load_tickets(path)
    save_tickets(path, tickets)
    return tickets

def delete_ticket(path: str, ticket_id: str) -> bool:
    tickets = load_tickets(path)
    kept = [t for t in tickets if t.id != ticket_id]
    if len(kept) == len(tickets):
        return False
    save_tickets(path, kept)
    return True

def _journey_key(t: Ticket) -> Tuple[int, datetime]:
    dt = try_parse_date(t.date_of_journey)
    if dt is None:
        return (1, datetime.min)
    return (0, dt.replace(tzinfo=None))

def sort_tickets(tickets: Iterable[Ticket]) -> List[Ticket]:
    """Upcoming journeys first; tickets without a usable date go last."""
    return sorted(tickets, key=_journey_key)
