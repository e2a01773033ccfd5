import copy
from typing import Dict, Any, List, Optional
import yaml

from .extractors import STATUS_PATTERN

# Each field owns a ranked list of candidate patterns; the first one whose
# capture group is non-empty wins. Terminators are lookaheads, never consumed.
DEFAULT_RULES: Dict[str, Any] = {
    "pdf": {
        "pnr": [
            {"pattern": r"PNR\s*[:-]?\s*([A-Z0-9]{10})"},
            {"pattern": r"Confirmation[\w\s]*[:-]?\s*([A-Z0-9]{10})"},
        ],
        "train_number": [
            {"pattern": r"Train\s*No[\w\s]*[:-]?\s*(\d{5})"},
            {"pattern": r"Train\s*Number[\w\s]*[:-]?\s*(\d{5})"},
        ],
        "train_name": [
            {"pattern": r"Train\s*Name[\w\s]*?[:-]?\s*([\w\s]+?)(?=Depart|From|Class)"},
            {"pattern": r"Train[\s/]*Name[\w\s]*?[:-]?\s*([\w\s]+?)(?=\d{2}[-/])"},
        ],
        "origin": [
            {"pattern": r"From[\w\s]*?[:-]?\s*([A-Z\s]+?)(?=To|Dept)"},
            {"pattern": r"Boarding[\w\s]*?[:-]?\s*([A-Z\s]+?)(?=To|Date)"},
        ],
        "destination": [
            {"pattern": r"To[\w\s]*?[:-]?\s*([A-Z\s]+?)(?=Date|Dept|Class)"},
            {"pattern": r"Destination[\w\s]*?[:-]?\s*([A-Z\s]+?)(?=Date)"},
        ],
        "date_of_journey": [
            {"pattern": r"Date[\w\s]*[:-]?\s*(\d{2}[-/]\d{2}[-/]\d{2,4})"},
            {"pattern": r"Journey[\w\s]*[:-]?\s*(\d{2}[-/]\d{2}[-/]\d{2,4})"},
        ],
        "departure_time": [
            {"pattern": r"Depart[\w\s]*[:-]?\s*(\d{2}:\d{2})"},
            {"pattern": r"Departure[\w\s]*[:-]?\s*(\d{2}:\d{2})"},
        ],
        # single-pattern special case: "Class" label then one token
        "travel_class": [
            {"pattern": r"Class\s*[:=]?\s*([A-Z0-9]+)"},
        ],
        "coach": [
            {"pattern": r"Coach[\w\s]*[:-]?\s*([A-Z0-9]+)"},
        ],
        "seat_berth": [
            {"pattern": r"(?:Seat|Berth)[\w\s]*[:-]?\s*([A-Z0-9]+)"},
        ],
        "passenger_name": [
            {"pattern": r"Passenger[\w\s]*?[:-]?\s*([A-Za-z\s]+?)(?=Age|Sex|Class|Coach|$)"},
            {"pattern": r"Name[\w\s]*?[:-]?\s*([A-Za-z\s]+?)(?=Age|Sex|Berth|Class|$)"},
        ],
    },
    "qr": {
        "pnr": [{"pattern": r"PNR No\. ?: ?(\d+)"}],
        "train_number": [{"pattern": r"Train No\. ?: ?(\d+)"}],
        "train_name": [{"pattern": r"Train Name ?: ?([^,]+)"}],
        "origin": [{"pattern": r"\bFrom ?: ?([^,]+)"}],
        "destination": [{"pattern": r"\bTo ?: ?([^,]+)"}],
        "date_of_journey": [{"pattern": r"Date Of Journey ?: ?([^,]+)"}],
        # value is "<date> <HH:MM>"; keep the time only
        "departure_time": [{"pattern": r"Scheduled Departure ?: ?[^ ]+ (\d{2}:\d{2})"}],
        "travel_class": [{"pattern": r"Class ?: ?([^,]+)"}],
    },
    "qr_passenger": {
        "pattern": (r"Passenger Name:([^,]+),\s*Gender:[^,]+,\s*Age:\d+,\s*Status:([^,]+?)"
                    r"(?:,\s*)?(?=Passenger Name|Quota|Train|Ticket|$)"),
        "name_group": 1,
        "status_group": 2,
    },
    "status": {
        "pattern": STATUS_PATTERN,
    },
}

FIELD_TABLES = ("pdf", "qr")

def _normalize_entries(entries: Any, where: str) -> List[Dict[str, Any]]:
    if isinstance(entries, (str, dict)):
        entries = [entries]
    if not isinstance(entries, list):
        raise ValueError(f"{where}: expected a list of patterns")
    out = []
    for e in entries:
        if isinstance(e, str):
            out.append({"pattern": e, "group": 1})
        elif isinstance(e, dict) and e.get("pattern"):
            out.append({"pattern": str(e["pattern"]), "group": int(e.get("group", 1))})
        else:
            raise ValueError(f"{where}: pattern entry needs a 'pattern' key")
    return out

def load_rules(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Return the extraction rules. Without a path the built-in tables are used.
    A YAML file may replace the candidate list of any field; everything it
    does not mention keeps its default.
    """
    data = copy.deepcopy(DEFAULT_RULES)
    for table in FIELD_TABLES:
        for field, entries in data[table].items():
            data[table][field] = _normalize_entries(entries, f"{table}.{field}")
    if not path:
        return data

    with open(path, "r", encoding="utf-8") as f:
        override = yaml.safe_load(f) or {}
    if not isinstance(override, dict):
        raise ValueError(f"{path}: top level must be a mapping")

    for table in FIELD_TABLES:
        for field, entries in (override.get(table) or {}).items():
            if field not in data[table]:
                continue
            data[table][field] = _normalize_entries(entries, f"{table}.{field}")
    for section in ("qr_passenger", "status"):
        extra = override.get(section)
        if isinstance(extra, dict):
            data[section].update(extra)
    return data
