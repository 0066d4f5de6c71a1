"""Pydantic models shared by the scorer, the extractor client and the API."""

from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator


class RawForensicMetrics(BaseModel):
    """Structural and content facts extracted from a resume by the model.

    Every field is required: a missing key fails validation instead of
    silently scoring as zero.
    """
    has_columns_tables: bool
    has_photo: bool
    has_graphic_icons: bool
    has_creative_headers: bool
    date_format_issues: bool
    total_bullet_points: int = Field(..., ge=0)
    bullets_with_numbers: int = Field(..., ge=0)
    weak_verbs_count: int = Field(..., ge=0)
    word_count: int = Field(..., ge=0)

    @model_validator(mode="after")
    def _check_bullet_counts(self) -> "RawForensicMetrics":
        if self.bullets_with_numbers > self.total_bullet_points:
            raise ValueError(
                f"bullets_with_numbers ({self.bullets_with_numbers}) exceeds "
                f"total_bullet_points ({self.total_bullet_points})"
            )
        return self


class ScoreResult(BaseModel):
    """Output of the deterministic scorer."""
    overall: int = Field(..., ge=0, le=100)
    ats_score: int = Field(..., ge=0, le=100)
    impact_score: int = Field(..., ge=0, le=100)


class MetaData(BaseModel):
    candidate_name: str = ""
    detected_language: str = ""
    inferred_target_role: str = ""
    years_experience: float = 0

    @field_validator("years_experience", mode="before")
    @classmethod
    def _lenient_years(cls, value: object) -> float:
        # Display only: "5+" becomes 5, anything unreadable becomes 0
        if isinstance(value, bool) or value is None:
            return 0
        if isinstance(value, (int, float)):
            return value
        match = re.search(r"\d+(?:\.\d+)?", str(value))
        return float(match.group()) if match else 0


class SummaryVerdict(BaseModel):
    headline: str = ""
    executive_summary: str = ""


class StructuralAudit(BaseModel):
    issues_found: list[str] = Field(default_factory=list)
    is_parsable: bool = True


class KeywordAnalysis(BaseModel):
    hard_skills_found: list[str] = Field(default_factory=list)
    missing_critical_skills: list[str] = Field(default_factory=list)
    buzzwords_to_remove: list[str] = Field(default_factory=list)


class ForensicExtraction(BaseModel):
    """Raw facts returned by the extraction model. Contains no scores."""
    meta_data: MetaData = Field(default_factory=MetaData)
    raw_metrics: RawForensicMetrics
    summary_verdict: SummaryVerdict = Field(default_factory=SummaryVerdict)
    structural_audit: StructuralAudit = Field(default_factory=StructuralAudit)
    keyword_analysis: KeywordAnalysis = Field(default_factory=KeywordAnalysis)
    action_plan: list[str] = Field(default_factory=list)


class AuditScores(BaseModel):
    overall_score: int = Field(..., ge=0, le=100)
    ats_compatibility: int = Field(..., ge=0, le=100)
    content_impact: int = Field(..., ge=0, le=100)

    @classmethod
    def from_result(cls, result: ScoreResult) -> "AuditScores":
        return cls(
            overall_score=result.overall,
            ats_compatibility=result.ats_score,
            content_impact=result.impact_score,
        )


class ProphetReport(ForensicExtraction):
    """Extraction merged with locally computed scores, returned to the UI."""
    scores: AuditScores


class ScoreRequest(BaseModel):
    """Body of POST /score: re-score previously extracted facts."""
    raw_metrics: RawForensicMetrics
    missing_critical_skills: list[str] = Field(default_factory=list)


class ApiResponse(BaseModel):
    """Generic status envelope."""
    message: str
    timestamp: str = Field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )
    status: Literal["success", "error"] = "success"
