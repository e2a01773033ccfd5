from railticket import qr_parser
from railticket.qr_parser import parse_qr_data

TRIP = ("PNR No.: 1234567890, Train No.: 12345, Train Name: Rajdhani, From: DELHI, To: MUMBAI, "
        "Date Of Journey: 25-Mar-2026, Scheduled Departure:25-Mar-2026 19:05, Class: 3A, ")

def test_single_passenger_end_to_end():
    tickets = parse_qr_data(TRIP + "Passenger Name:Jane Doe, Gender:F, Age:30, Status:CNFB1/50MB")
    assert len(tickets) == 1
    t = tickets[0].to_dict()
    assert t["pnr"] == "1234567890"
    assert t["trainNumber"] == "12345"
    assert t["trainName"] == "Rajdhani"
    assert t["from"] == "DELHI"
    assert t["to"] == "MUMBAI"
    assert t["dateOfJourney"] == "25-Mar-2026"
    assert t["departureTime"] == "19:05"
    assert t["class"] == "3A"
    assert t["passengerName"] == "Jane Doe"
    assert t["coach"] == "B1"
    assert t["seatBerth"] == "50 (MB)"

def test_three_passengers():
    text = (TRIP
            + "Passenger Name:Jane Doe, Gender:F, Age:30, Status:CNFB1/50MB,\n"
            + "Passenger Name:John Doe, Gender:M, Age:32, Status:CNFB1/51UB\n"
            + "Passenger Name:Baby Doe, Gender:F, Age:5, Status:WL/12")
    tickets = parse_qr_data(text)
    assert len(tickets) == 3
    assert len({t.id for t in tickets}) == 3
    assert {(t.pnr, t.train_number, t.origin, t.destination) for t in tickets} == {("1234567890", "12345", "DELHI", "MUMBAI")}
    assert [t.passenger_name for t in tickets] == ["Jane Doe", "John Doe", "Baby Doe"]
    assert [(t.coach, t.seat_berth) for t in tickets] == [("B1", "50 (MB)"), ("B1", "51 (UB)"), ("", "WL/12")]

def test_zero_passengers_is_empty_not_failure():
    assert parse_qr_data("PNR No.: 1234567890, Train No.: 12345") == []
    assert parse_qr_data("") == []

def test_missing_trip_fields_default():
    tickets = parse_qr_data("Passenger Name:Jane Doe, Gender:F, Age:30, Status:RAC 5")
    t = tickets[0]
    assert t.train_name == "Unknown" and t.travel_class == "Unknown"
    assert t.pnr == "" and t.origin == ""
    assert t.seat_berth == "RAC 5"

def test_internal_error_is_none(monkeypatch):
    def boom(*a, **kw):
        raise RuntimeError("boom")
    monkeypatch.setattr(qr_parser, "extract_fields", boom)
    assert parse_qr_data(TRIP) is None
