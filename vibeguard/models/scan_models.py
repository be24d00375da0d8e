"""
Scan Request/Response Models — API contract schemas.

These are the public-facing Pydantic models used by FastAPI endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from vibeguard.models.finding_models import Finding
from vibeguard.models.rule_models import Severity
from vibeguard.models.score_models import Grade


class ScanRequest(BaseModel):
    """Request body for /scan and /scan/text."""

    code: str = Field(..., min_length=1, description="Source code to scan")
    language: str | None = Field(
        default=None, description="Language tag: javascript | typescript | python"
    )
    filename: str | None = Field(
        default=None, description="Optional file name, used to infer the language"
    )
    ai_audit: bool = Field(default=True, description="Request the AI logic audit pass")


class ScoreRequest(BaseModel):
    """Request body for /score — findings from any producer."""

    findings: list[Finding] = Field(default_factory=list)


class ScanReport(BaseModel):
    """Full scan report."""

    scan_id: str
    timestamp: str
    language: str
    lines: int = 0
    findings: list[Finding] = Field(default_factory=list)
    score: int = Field(default=100, ge=0, le=100)
    breakdown: dict[Severity, int] = Field(default_factory=dict)
    grade: Grade = Grade.EXCELLENT
    ai_enabled: bool = False
    local_findings: int = 0
    ai_findings: int = 0
    duration_ms: float = 0.0
    summary: str = ""


class ScanResponse(BaseModel):
    """Top-level response for scan endpoints."""

    message: str = "scan_complete"
    scan_id: str = ""
    report: ScanReport | None = None
