"""Shared fixtures for the audit test suite."""

import io

import pytest
from PyPDF2 import PdfWriter


@pytest.fixture
def clean_metrics() -> dict:
    """Metrics for a resume with no traps and fully quantified bullets."""
    return {
        "has_columns_tables": False,
        "has_photo": False,
        "has_graphic_icons": False,
        "has_creative_headers": False,
        "date_format_issues": False,
        "total_bullet_points": 12,
        "bullets_with_numbers": 12,
        "weak_verbs_count": 0,
        "word_count": 520,
    }


@pytest.fixture
def extraction_payload(clean_metrics) -> dict:
    """A complete extractor answer as the model would return it."""
    return {
        "meta_data": {
            "candidate_name": "Jordan Reyes",
            "detected_language": "en",
            "inferred_target_role": "Backend Engineer",
            "years_experience": 6,
        },
        "raw_metrics": clean_metrics,
        "summary_verdict": {
            "headline": "Solid but generic",
            "executive_summary": "Clean layout, thin on outcomes.",
        },
        "structural_audit": {"issues_found": [], "is_parsable": True},
        "keyword_analysis": {
            "hard_skills_found": ["python", "postgresql"],
            "missing_critical_skills": ["kubernetes", "terraform"],
            "buzzwords_to_remove": ["synergy"],
        },
        "action_plan": ["Quantify the migration project", "Add a skills section"],
    }


def _make_pdf(pages: int = 1) -> bytes:
    writer = PdfWriter()
    for _ in range(pages):
        writer.add_blank_page(width=612, height=792)
    buf = io.BytesIO()
    writer.write(buf)
    return buf.getvalue()


@pytest.fixture
def make_pdf():
    """Factory for blank PDFs with a given page count."""
    return _make_pdf


@pytest.fixture
def pdf_bytes() -> bytes:
    return _make_pdf(1)
