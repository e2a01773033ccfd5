from .models import Ticket
from .pdf_parser import parse_ticket_text, parse_ticket_pdf, parse_ticket_pdf_async
from .qr_parser import parse_qr_data

__all__ = ["Ticket", "parse_ticket_text", "parse_ticket_pdf", "parse_ticket_pdf_async", "parse_qr_data"]
