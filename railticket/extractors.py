import logging
from typing import Dict, Any, Optional, List, Iterable, Iterator, Tuple, NamedTuple
import regex as re

logger = logging.getLogger(__name__)

# ======================
# Ranked field extractor
# ======================

class FieldPattern:
    """One candidate pattern for a field and the capture group holding the value."""

    def __init__(self, pattern: str, group: int = 1):
        self.pattern = pattern
        self.group = group
        self.regex = re.compile(pattern, flags=re.IGNORECASE)

    def match(self, text: str) -> Optional[str]:
        m = self.regex.search(text)
        if not m:
            return None
        val = m.group(self.group)
        if val is None:
            return None
        val = val.strip()
        return val or None

    def __repr__(self) -> str:
        return f"FieldPattern({self.pattern!r}, group={self.group})"

PatternSpec = Any  # FieldPattern | str | {"pattern": ..., "group": ...}

def compile_patterns(entries: Iterable[PatternSpec]) -> List[FieldPattern]:
    out: List[FieldPattern] = []
    for e in entries:
        if isinstance(e, FieldPattern):
            out.append(e)
        elif isinstance(e, str):
            out.append(FieldPattern(e))
        else:
            out.append(FieldPattern(e["pattern"], int(e.get("group", 1))))
    return out

def extract_field(text: str, patterns: Iterable[PatternSpec], default: Optional[str] = None) -> Optional[str]:
    """
    Try each candidate in order and return the first trimmed, non-empty capture.
    Returns `default` when nothing matches (None unless the caller asks for "").
    """
    for fp in compile_patterns(patterns):
        val = fp.match(text)
        if val is not None:
            return val
    return default

def extract_fields(text: str, table: Dict[str, Iterable[PatternSpec]]) -> Dict[str, Optional[str]]:
    out: Dict[str, Optional[str]] = {}
    for field, patterns in table.items():
        out[field] = extract_field(text, patterns)
        logger.debug("extracted %s=%r", field, out[field])
    return out

# ================
# Passenger blocks
# ================

def find_passenger_blocks(text: str, rule: Dict[str, Any]) -> Iterator[Tuple[str, str]]:
    """Yield (name, status) for every passenger block, in payload order."""
    rx = re.compile(rule["pattern"], flags=re.IGNORECASE)
    name_group = int(rule.get("name_group", 1))
    status_group = int(rule.get("status_group", 2))
    for m in rx.finditer(text):
        name = (m.group(name_group) or "").strip()
        status = (m.group(status_group) or "").strip()
        yield name, status

# =================
# Status decomposer
# =================

class StatusParts(NamedTuple):
    coach: str
    seat_berth: str

STATUS_PATTERN = r"^CNF([A-Z0-9]+)/(\d+)([A-Z]+)$"

def decompose_status(status: str, pattern: str = STATUS_PATTERN) -> StatusParts:
    """
    CNFB1/50MB -> coach "B1", seat/berth "50 (MB)".
    Anything else (waitlist, RAC, ...) is kept verbatim as the seat/berth
    with no coach; the grammar of those states is not known.
    """
    status = (status or "").strip()
    m = re.match(pattern, status, flags=re.IGNORECASE)
    if m:
        return StatusParts(m.group(1), f"{m.group(2)} ({m.group(3)})")
    return StatusParts("", status)
