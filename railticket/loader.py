import logging
from typing import BinaryIO, Optional, Tuple, Union
from pdfminer.high_level import extract_pages
from pdfminer.layout import LTTextContainer
from pdfminer.pdfparser import PDFSyntaxError

logger = logging.getLogger(__name__)

PdfSource = Union[str, BinaryIO]

def load_pdf_text(source: PdfSource) -> Tuple[str, Optional[str]]:
    """
    Return (text, error). Text fragments of a page are joined with a single
    space; pages are concatenated in order with no separator.
    """
    err = None
    text = ""
    try:
        pages = []
        for i, page in enumerate(extract_pages(source), start=1):
            fragments = [el.get_text() for el in page if isinstance(el, LTTextContainer)]
            logger.debug("page %d: %d text fragments", i, len(fragments))
            pages.append(" ".join(fragments))
        text = "".join(pages)
    except PDFSyntaxError as e:
        err = f"PDFSyntaxError: {e}"
    except Exception as e:
        err = f"pdfminer_error: {e}"
    return text, err
