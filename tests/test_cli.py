import json
from click.testing import CliRunner
from railticket import cli
from railticket.cli import main

QR = ("PNR No.: 1234567890, Train No.: 12345, Train Name: Rajdhani, From: DELHI, To: MUMBAI, "
      "Date Of Journey: 25-Mar-2026, Scheduled Departure:25-Mar-2026 19:05, Class: 3A, "
      "Passenger Name:Jane Doe, Gender:F, Age:30, Status:CNFB1/50MB")

PDF_TEXT = "PNR: 4512378960 Train No: 12952 From: NEW DELHI To: MUMBAI CENTRAL Date: 14-03-2026"

def test_qr_command_outputs_tickets(tmp_path):
    store = str(tmp_path / "tickets.json")
    result = CliRunner().invoke(main, ["qr", QR, "--store", store])
    assert result.exit_code == 0
    out = json.loads(result.output)
    assert out[0]["seatBerth"] == "50 (MB)"

    listed = CliRunner().invoke(main, ["list", "--store", store])
    assert listed.exit_code == 0
    assert json.loads(listed.output.strip())["passengerName"] == "Jane Doe"

def test_qr_command_from_stdin():
    result = CliRunner().invoke(main, ["qr"], input=QR)
    assert result.exit_code == 0
    assert json.loads(result.output)[0]["pnr"] == "1234567890"

def test_qr_command_no_passengers():
    result = CliRunner().invoke(main, ["qr", "PNR No.: 1234567890"])
    assert result.exit_code == 1
    assert "No valid ticket data found in QR code" in result.output

def test_pdf_command_with_report(tmp_path, monkeypatch):
    pdf = tmp_path / "ticket.pdf"
    pdf.write_bytes(b"%PDF-1.4")
    report = tmp_path / "out" / "report.csv"
    monkeypatch.setattr(cli, "load_pdf_text", lambda path: (PDF_TEXT, None))
    result = CliRunner().invoke(main, ["pdf", str(pdf), "--report", str(report)])
    assert result.exit_code == 0
    res = json.loads(result.output.strip())
    assert res["ticket"]["pnr"] == "4512378960"
    assert res["errors"] is None
    assert "4512378960" in report.read_text(encoding="utf-8")

def test_pdf_command_failure(tmp_path, monkeypatch):
    pdf = tmp_path / "ticket.pdf"
    pdf.write_bytes(b"%PDF-1.4")
    monkeypatch.setattr(cli, "load_pdf_text", lambda path: ("Train No: 12952", None))
    result = CliRunner().invoke(main, ["pdf", str(pdf)])
    assert result.exit_code == 1
    assert json.loads(result.output.strip())["ticket"] is None

def test_delete_unknown_id(tmp_path):
    result = CliRunner().invoke(main, ["delete", "nope", "--store", str(tmp_path / "t.json")])
    assert result.exit_code == 1
