"""
Finding Data Models — Raw match events and normalised findings.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

LOCAL_SOURCE = "SAST"
AI_AUDIT_SOURCE = "AI Audit"


class MatchEvent(BaseModel):
    """One regex match of a rule against the scanned text."""

    model_config = {"frozen": True}

    rule_id: str
    offset: int = Field(..., ge=0, description="Zero-based character offset of the match start")
    text: str = Field(..., description="Matched text")
    line: int = Field(..., ge=1)
    snippet: str = ""


class Finding(BaseModel):
    """A single reported issue, local or externally supplied."""

    rule_id: str
    name: str
    # Plain string so malformed tiers from external producers survive to the scorer
    severity: str
    category: str = ""
    line: int = Field(default=1, ge=1, description="1-based line, 1 when unknown")
    snippet: str = ""
    description: str = ""
    fix: str = ""
    source: str = LOCAL_SOURCE
