"""PDF sanity check before upload to the extractor.

Only the page tree is read; text extraction is left to the model.
"""

from __future__ import annotations

import io
import logging

from PyPDF2 import PdfReader
from PyPDF2.errors import PdfReadError

from app.core.config import settings

logger = logging.getLogger(__name__)


def check_pdf(content: bytes, max_pages: int | None = None) -> int:
    """Return the page count of a PDF.

    Raises ValueError if the PDF cannot be opened, is empty or has too many pages.
    """
    if max_pages is None:
        max_pages = settings.MAX_PDF_PAGES
    try:
        reader = PdfReader(io.BytesIO(content))
        page_count = len(reader.pages)
    except PdfReadError as exc:
        raise ValueError(f"Unreadable PDF: {exc}") from exc
    except Exception as exc:
        # Malformed object trees surface as arbitrary errors inside PyPDF2
        raise ValueError(f"Unreadable PDF: {type(exc).__name__}: {exc}") from exc

    if page_count == 0:
        raise ValueError("PDF has no pages")
    if page_count > max_pages:
        raise ValueError(f"PDF has {page_count} pages, maximum is {max_pages}")

    logger.info("PDF check passed: %d pages", page_count)
    return page_count
