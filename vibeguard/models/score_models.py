"""
Score Data Models — Quality score, severity breakdown and grade tier.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from vibeguard.models.rule_models import Severity


class Grade(str, Enum):
    EXCELLENT = "Excellent"
    GOOD = "Good"
    FAIR = "Fair"
    POOR = "Poor"
    DANGEROUS = "Dangerous"
    CRITICAL_RISK = "Critical Risk"


# Inclusive lower bounds, checked from highest to lowest
GRADE_THRESHOLDS: tuple[tuple[int, Grade], ...] = (
    (90, Grade.EXCELLENT),
    (75, Grade.GOOD),
    (60, Grade.FAIR),
    (40, Grade.POOR),
    (20, Grade.DANGEROUS),
)


def empty_breakdown() -> dict[Severity, int]:
    return {severity: 0 for severity in Severity}


class ScoreResult(BaseModel):
    """Result of reducing a findings list to a single score."""

    score: int = Field(..., ge=0, le=100, description="Quality score 0-100")
    breakdown: dict[Severity, int] = Field(default_factory=empty_breakdown)
    grade: Grade
    deduction: int = Field(default=0, ge=0, description="Unclamped weighted deduction")
    formula: str = Field(
        default="score = clamp(100 - Σ(count[tier] × weight[tier]), 0, 100)",
        description="Human-readable formula used",
    )
    summary: str = ""
