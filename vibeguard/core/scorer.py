"""
VibeGuard — Quality score calculator.

Weighted deduction model:

    deduction = Σ count[tier] × weight[tier]
    score     = clamp(100 − deduction, 0, 100)

Weights: Critical=25, High=15, Medium=8, Low=3, Info=1. Findings whose
severity is not one of the five tiers are ignored.
"""

from __future__ import annotations

import logging
from typing import Iterable

from vibeguard.models.finding_models import Finding
from vibeguard.models.rule_models import SEVERITY_WEIGHTS, Severity
from vibeguard.models.score_models import GRADE_THRESHOLDS, Grade, ScoreResult, empty_breakdown

logger = logging.getLogger("vibeguard.scorer")


def grade_for(score: int) -> Grade:
    """Map a 0-100 score to its grade tier."""
    for lower_bound, grade in GRADE_THRESHOLDS:
        if score >= lower_bound:
            return grade
    return Grade.CRITICAL_RISK


def tally(findings: Iterable[Finding]) -> dict[Severity, int]:
    """Count findings per severity tier."""
    breakdown = empty_breakdown()
    for finding in findings:
        try:
            severity = Severity(finding.severity)
        except ValueError:
            logger.debug(
                "Ignoring finding %r with unknown severity %r",
                finding.rule_id,
                finding.severity,
            )
            continue
        breakdown[severity] += 1
    return breakdown


def score(findings: Iterable[Finding]) -> ScoreResult:
    """Reduce a findings list to a score, severity breakdown and grade."""
    breakdown = tally(findings)
    deduction = sum(count * SEVERITY_WEIGHTS[severity] for severity, count in breakdown.items())
    final_score = max(0, min(100, 100 - deduction))
    grade = grade_for(final_score)

    total = sum(breakdown.values())
    parts = [f"{count} {severity.value.lower()}" for severity, count in breakdown.items() if count]
    if total:
        summary = (
            f"Quality score {final_score}/100 ({grade.value}) from {total} findings "
            f"({', '.join(parts)})."
        )
    else:
        summary = f"Quality score {final_score}/100 ({grade.value}). No issues found."

    return ScoreResult(
        score=final_score,
        breakdown=breakdown,
        grade=grade,
        deduction=deduction,
        summary=summary,
    )
