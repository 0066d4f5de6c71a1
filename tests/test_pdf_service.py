"""Tests for the PDF sanity check."""

import pytest

from app.services.pdf_service import check_pdf


def test_page_count(pdf_bytes):
    assert check_pdf(pdf_bytes) == 1


def test_too_many_pages(make_pdf):
    with pytest.raises(ValueError, match="maximum is 2"):
        check_pdf(make_pdf(3), max_pages=2)


def test_garbage_bytes():
    with pytest.raises(ValueError, match="Unreadable PDF"):
        check_pdf(b"this is not a pdf at all")


def test_dangling_root_reference():
    """A trailer pointing at an undefined object is reported as unreadable."""
    broken = (
        b"%PDF-1.4\nxref\n0 1\n0000000000 65535 f \n"
        b"trailer\n<< /Root 5 0 R /Size 1 >>\nstartxref\n9\n%%EOF"
    )
    with pytest.raises(ValueError, match="Unreadable PDF"):
        check_pdf(broken)


def test_explicit_zero_page_limit_is_honoured(pdf_bytes):
    with pytest.raises(ValueError, match="maximum is 0"):
        check_pdf(pdf_bytes, max_pages=0)
