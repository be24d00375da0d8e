"""
LLM Data Models — Schemas for AI audit output validation.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from vibeguard.models.finding_models import AI_AUDIT_SOURCE, Finding

MAX_AI_SNIPPET_LENGTH = 80


class AIAuditEntry(BaseModel):
    """One finding as returned by the model, before normalisation."""

    id: str = Field(..., min_length=1, description="UNIQUE_ID_IN_SNAKE_CASE")
    name: str = Field(..., min_length=1)
    severity: str
    owasp: str = "Logic Error"
    line: Any = 1
    snippet: str = ""
    description: str = ""
    fix: str = ""

    @field_validator("snippet", "description", "fix", "owasp", mode="before")
    @classmethod
    def _none_to_default(cls, value, info):
        if value is None:
            return cls.model_fields[info.field_name].default
        return str(value)

    def to_finding(self) -> Finding:
        """Normalise into a Finding; provenance is always the AI audit."""
        return Finding(
            rule_id=self.id,
            name=self.name,
            severity=self.severity,
            category=self.owasp,
            line=_coerce_line(self.line),
            snippet=self.snippet[:MAX_AI_SNIPPET_LENGTH],
            description=self.description,
            fix=self.fix,
            source=AI_AUDIT_SOURCE,
        )


def _coerce_line(value: Any) -> int:
    """Model-estimated lines are advisory; anything unusable becomes the sentinel 1."""
    try:
        line = int(value)
    except (TypeError, ValueError, OverflowError):
        return 1
    return line if line >= 1 else 1
