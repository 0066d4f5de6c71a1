"""Resume audit endpoints.

The backend handles:
  - file validation (type, size, PDF readability)
  - delegating fact extraction → Gemini via HTTP
  - deterministic scoring of the extracted facts

The backend never parses resume content itself.
"""

from __future__ import annotations

import logging
import mimetypes

from fastapi import APIRouter, File, HTTPException, UploadFile

from prophet.models import AuditScores, ProphetReport, ScoreRequest, ScoreResult
from prophet.scoring import score, score_extraction
from app.core.config import settings
from app.services.gemini_client import ConfigurationError, ExtractionError, extract_facts
from app.services.pdf_service import check_pdf

logger = logging.getLogger(__name__)
router = APIRouter()

ALLOWED_TYPES = ("application/pdf", "image/jpeg", "image/png")
ENGINE_FAILURE = "Forensic engine failed to initialize. Ensure the file is a readable PDF or Image."


def _resolve_content_type(file: UploadFile) -> str:
    content_type = file.content_type
    if not content_type or content_type == "application/octet-stream":
        content_type, _ = mimetypes.guess_type(file.filename or "")
    if content_type not in ALLOWED_TYPES:
        raise HTTPException(
            status_code=400,
            detail=f"Unsupported file type: {content_type}. Use PDF, JPEG or PNG.",
        )
    return content_type


async def _read_content(file: UploadFile, content_type: str) -> bytes:
    content = await file.read()
    if not content:
        raise HTTPException(status_code=400, detail="Uploaded file is empty.")
    if len(content) > settings.MAX_UPLOAD_SIZE_MB * 1024 * 1024:
        raise HTTPException(
            status_code=400,
            detail=f"File too large. Max {settings.MAX_UPLOAD_SIZE_MB} MB.",
        )
    if content_type == "application/pdf":
        try:
            check_pdf(content)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
    return content


@router.post("/audit", response_model=ProphetReport)
async def audit_resume(file: UploadFile = File(...)) -> ProphetReport:
    """Run a forensic audit on an uploaded resume (PDF or image).

    Gemini extracts the raw facts; scores are always computed locally and
    replace anything the model might have volunteered.
    """
    content_type = _resolve_content_type(file)
    content = await _read_content(file, content_type)

    try:
        extraction = await extract_facts(content, content_type)
    except ConfigurationError as exc:
        logger.error("Extractor not configured: %s", exc)
        raise HTTPException(status_code=503, detail="Extraction service not configured")
    except ExtractionError as exc:
        logger.error("Extraction failed for %s: %s", file.filename, exc)
        raise HTTPException(status_code=502, detail=ENGINE_FAILURE)

    result = score_extraction(extraction)
    logger.info(
        "Audited %s: overall=%d ats=%d impact=%d",
        file.filename, result.overall, result.ats_score, result.impact_score,
        extra={
            "overall_score": result.overall,
            "ats_score": result.ats_score,
            "impact_score": result.impact_score,
        },
    )
    return ProphetReport(
        **extraction.model_dump(),
        scores=AuditScores.from_result(result),
    )


@router.post("/score", response_model=ScoreResult)
async def score_metrics(request: ScoreRequest) -> ScoreResult:
    """Re-score already extracted metrics without calling the model."""
    return score(request.raw_metrics, len(request.missing_critical_skills))
