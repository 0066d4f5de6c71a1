"""Deterministic resume scorer.

Turns the raw facts extracted by the model into ATS-compatibility and
content-impact scores through fixed deductions. No LLM involved: the same
facts always produce the same scores.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any, Union

from prophet.models import ForensicExtraction, RawForensicMetrics, ScoreResult

# ---------------------------------------------------------------------------
# Deduction table
# ---------------------------------------------------------------------------

ATS_PENALTIES: dict[str, int] = {
    "has_columns_tables": 20,
    "has_photo": 15,
    "has_graphic_icons": 10,
    "has_creative_headers": 10,
    "date_format_issues": 10,
}

LOW_RATIO_THRESHOLD = 0.3
LOW_RATIO_PENALTY = 10
NO_NUMBERS_PENALTY = 15
WEAK_VERB_PENALTY = 4
WEAK_VERB_CAP = 20
MISSING_SKILL_PENALTY = 5

ATS_WEIGHT = 0.6
IMPACT_WEIGHT = 0.4

MetricsInput = Union[RawForensicMetrics, Mapping[str, Any]]


def bullet_ratio(metrics: RawForensicMetrics) -> float:
    """Return the share of bullet points that contain a number (0 when there are none)."""
    if metrics.total_bullet_points > 0:
        return metrics.bullets_with_numbers / metrics.total_bullet_points
    return 0.0


def score(metrics: MetricsInput, missing_skills_count: int) -> ScoreResult:
    """Score a resume from its raw forensic metrics.

    *metrics* may be a validated model or a plain mapping (e.g. parsed JSON);
    a mapping with a missing or mistyped field raises pydantic's
    ValidationError before any arithmetic happens.
    """
    if not isinstance(metrics, RawForensicMetrics):
        metrics = RawForensicMetrics.model_validate(metrics)
    if missing_skills_count < 0:
        raise ValueError(f"missing_skills_count must be >= 0, got {missing_skills_count}")

    ats = 100
    impact = 100

    for flag, penalty in ATS_PENALTIES.items():
        if getattr(metrics, flag):
            ats -= penalty

    ratio = bullet_ratio(metrics)
    if ratio < LOW_RATIO_THRESHOLD:
        impact -= LOW_RATIO_PENALTY
    # Stacks with the low-ratio deduction above.
    if ratio == 0 and metrics.total_bullet_points > 0:
        impact -= NO_NUMBERS_PENALTY

    impact -= min(WEAK_VERB_CAP, metrics.weak_verbs_count * WEAK_VERB_PENALTY)
    impact -= missing_skills_count * MISSING_SKILL_PENALTY

    ats = max(0, ats)
    impact = max(0, impact)
    overall = math.floor(ats * ATS_WEIGHT + impact * IMPACT_WEIGHT)

    return ScoreResult(overall=overall, ats_score=ats, impact_score=impact)


def score_extraction(extraction: ForensicExtraction) -> ScoreResult:
    """Score a full extraction using its metrics and missing critical skills."""
    return score(
        extraction.raw_metrics,
        len(extraction.keyword_analysis.missing_critical_skills),
    )
