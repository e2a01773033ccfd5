"""Single-ticket extraction from the text layer of a railway e-ticket PDF."""
import asyncio
import logging
from typing import Dict, Any, Optional

from .extractors import extract_fields
from .loader import load_pdf_text, PdfSource
from .models import Ticket, UNKNOWN
from .rules import load_rules
from .utils import normalize_text

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("pnr", "train_number", "origin", "destination")

def parse_ticket_text(raw_text: str, rules: Optional[Dict[str, Any]] = None) -> Optional[Ticket]:
    """
    Build one Ticket from raw PDF text, or None if any load-bearing field
    (PNR, train number, origin, destination) could not be found.
    """
    rules = rules or load_rules()
    text = normalize_text(raw_text)
    logger.debug("normalized text length: %d", len(text))

    ex = extract_fields(text, rules["pdf"])
    missing = [f for f in REQUIRED_FIELDS if not ex.get(f)]
    if missing:
        logger.info("validation failed, missing required fields: %s", ", ".join(missing))
        return None

    return Ticket.create(
        pnr=ex["pnr"],
        train_number=ex["train_number"],
        train_name=ex.get("train_name") or UNKNOWN,
        origin=ex["origin"],
        destination=ex["destination"],
        date_of_journey=ex.get("date_of_journey") or "",
        departure_time=ex.get("departure_time") or "",
        travel_class=ex.get("travel_class") or UNKNOWN,
        coach=ex.get("coach") or "",
        seat_berth=ex.get("seat_berth") or "",
        passenger_name=ex.get("passenger_name") or "",
    )

def parse_ticket_pdf(source: PdfSource, rules: Optional[Dict[str, Any]] = None) -> Optional[Ticket]:
    """Read a PDF (path or binary file object) and parse it. Never raises."""
    text, err = load_pdf_text(source)
    if err:
        logger.error("could not read PDF text: %s", err)
        return None
    try:
        return parse_ticket_text(text, rules)
    except Exception:
        logger.exception("error parsing PDF ticket")
        return None

async def parse_ticket_pdf_async(source: PdfSource, rules: Optional[Dict[str, Any]] = None) -> Optional[Ticket]:
    return await asyncio.to_thread(parse_ticket_pdf, source, rules)
