from railticket.utils import normalize_text, utc_timestamp, new_ticket_id, try_parse_date

def test_normalize_collapses_whitespace():
    assert normalize_text("  PNR:\n 4512378960\t\tTrain   No: 12952 \r\n") == "PNR: 4512378960 Train No: 12952"

def test_normalize_is_idempotent():
    once = normalize_text("a \n\n b\tc  ")
    assert normalize_text(once) == once

def test_normalize_empty():
    assert normalize_text("") == ""
    assert normalize_text(None) == ""
    assert normalize_text(" \n\t ") == ""

def test_timestamp_and_ids():
    ts = utc_timestamp()
    assert ts.endswith("Z") and "T" in ts
    assert new_ticket_id() != new_ticket_id()

def test_try_parse_date_formats():
    assert try_parse_date("25-Mar-2026").month == 3
    d = try_parse_date("14-03-2026")
    assert (d.day, d.month, d.year) == (14, 3, 2026)
    assert try_parse_date("") is None
    assert try_parse_date("not a date") is None
