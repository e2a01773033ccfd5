import os, sys, json, csv, logging, click
from typing import Dict, Any, List, Optional
from .rules import load_rules
from .loader import load_pdf_text
from .pdf_parser import parse_ticket_text
from .qr_parser import parse_qr_data
from .storage import add_tickets, load_tickets, delete_ticket, sort_tickets

REPORT_FIELDS = ["path_in", "id", "pnr", "trainNumber", "trainName", "from", "to", "dateOfJourney",
                 "departureTime", "class", "coach", "seatBerth", "passengerName", "uploadedAt", "errors"]

def _rules_or_fail(rules_path: Optional[str]) -> Dict[str, Any]:
    try:
        return load_rules(rules_path)
    except Exception as e:
        raise click.UsageError(f"invalid rules file {rules_path}: {e}")

def analyze_file(path: str, rules: Dict[str, Any]) -> Dict[str, Any]:
    text, err = load_pdf_text(path)
    ticket = None
    if not err:
        try:
            ticket = parse_ticket_text(text, rules)
        except Exception as e:
            err = f"parse_error: {e}"
        else:
            if ticket is None:
                err = "missing required fields (pnr, train number, from, to)"
    return {
        "path_in": path,
        "ticket": ticket.to_dict() if ticket else None,
        "errors": err,
        "_ticket": ticket,
    }

@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(verbose):
    """Railway e-ticket extractor (PDF text layer and QR payloads)"""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

@main.command("pdf")
@click.argument("path", type=click.Path(exists=True))
@click.option("--recursive", is_flag=True, help="Recurse into directories")
@click.option("--rules", "rules_path", default=None, type=click.Path(exists=True), help="YAML file overriding extraction patterns")
@click.option("--store", default=None, type=click.Path(), help="JSON ticket store to add parsed tickets to")
@click.option("--report", default=None, type=click.Path(), help="Optional CSV report path")
def pdf_cmd(path, recursive, rules_path, store, report):
    """Parse a ticket PDF or a directory of PDFs."""
    rules = _rules_or_fail(rules_path)
    files: List[str] = []
    if os.path.isdir(path):
        for root, _, names in os.walk(path):
            for n in sorted(names):
                if n.lower().endswith(".pdf"):
                    files.append(os.path.join(root, n))
            if not recursive:
                break
    else:
        files = [path]

    results = []
    for f in files:
        res = analyze_file(f, rules)
        click.echo(json.dumps({k: v for k, v in res.items() if not k.startswith("_")}, ensure_ascii=False))
        results.append(res)

    parsed = [r["_ticket"] for r in results if r["_ticket"]]
    if store and parsed:
        add_tickets(store, parsed)

    if report and results:
        os.makedirs(os.path.dirname(report) or ".", exist_ok=True)
        with open(report, "w", newline="", encoding="utf-8") as csvfile:
            writer = csv.DictWriter(csvfile, fieldnames=REPORT_FIELDS)
            writer.writeheader()
            for r in results:
                row = dict(r["ticket"] or {})
                row["path_in"] = r["path_in"]
                row["errors"] = r["errors"]
                writer.writerow(row)

    if not parsed:
        sys.exit(1)

@main.command("qr")
@click.argument("text", required=False)
@click.option("--file", "file_", default=None, type=click.File("r", encoding="utf-8"), help="Read the payload from a file ('-' for stdin)")
@click.option("--rules", "rules_path", default=None, type=click.Path(exists=True), help="YAML file overriding extraction patterns")
@click.option("--store", default=None, type=click.Path(), help="JSON ticket store to add parsed tickets to")
def qr_cmd(text, file_, rules_path, store):
    """Parse a decoded QR payload (argument, --file, or stdin)."""
    rules = _rules_or_fail(rules_path)
    if text is None:
        text = file_.read() if file_ else sys.stdin.read()

    tickets = parse_qr_data(text, rules)
    if tickets is None:
        click.echo("Failed to parse QR payload", err=True)
        sys.exit(2)
    if not tickets:
        click.echo("No valid ticket data found in QR code", err=True)
        sys.exit(1)

    if store:
        add_tickets(store, tickets)
    click.echo(json.dumps([t.to_dict() for t in tickets], ensure_ascii=False))

@main.command("list")
@click.option("--store", required=True, type=click.Path(), help="JSON ticket store")
def list_cmd(store):
    """Show saved tickets, upcoming journeys first."""
    for t in sort_tickets(load_tickets(store)):
        click.echo(json.dumps(t.to_dict(), ensure_ascii=False))

@main.command("delete")
@click.argument("ticket_id")
@click.option("--store", required=True, type=click.Path(), help="JSON ticket store")
def delete_cmd(ticket_id, store):
    """Remove a saved ticket by id."""
    if not delete_ticket(store, ticket_id):
        click.echo(f"No ticket with id {ticket_id}", err=True)
        sys.exit(1)

if __name__ == "__main__":
    main()
