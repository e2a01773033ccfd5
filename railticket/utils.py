import re
import uuid
from datetime import datetime, timezone
from typing import Optional

from dateutil import parser as dateparser

_WS_RE = re.compile(r"\s+")

def normalize_text(s: str) -> str:
    """Collapse every run of whitespace to one space and strip the ends."""
    if not s:
        return ""
    return _WS_RE.sub(" ", s).strip()

def new_ticket_id() -> str:
    return str(uuid.uuid4())

def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2026-03-25T10:15:00.000Z"""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")

def try_parse_date(s: str) -> Optional[datetime]:
    """Parse a journey date such as 25-Mar-2026, 25/03/2026 or 2026-03-25."""
    if not s or not s.strip():
        return None
    try:
        return dateparser.parse(s, dayfirst=True, fuzzy=False)
    except (ValueError, OverflowError):
        return None
