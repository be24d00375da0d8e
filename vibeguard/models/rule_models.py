"""
Rule Data Models — Severity tiers, applicability, occurrence policy and rule metadata.

Rules are frozen: once a catalog is built nothing can mutate them, so the
same instances are shared by every scan in the process.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field

from vibeguard.models.finding_models import Finding


class Severity(str, Enum):
    CRITICAL = "Critical"
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"
    INFO = "Info"


# Deduction per finding, applied by the scorer
SEVERITY_WEIGHTS: dict[Severity, int] = {
    Severity.CRITICAL: 25,
    Severity.HIGH: 15,
    Severity.MEDIUM: 8,
    Severity.LOW: 3,
    Severity.INFO: 1,
}

# Display / sort order, most severe first
SEVERITY_ORDER: tuple[Severity, ...] = tuple(Severity)


class OccurrencePolicy(str, Enum):
    SINGLE = "single"
    REPEATABLE = "repeatable"


DEFAULT_MAX_OCCURRENCES = 3


class Applicability(BaseModel):
    """
    Language scope of a rule.

    Exactly one of three modes:
      all     → every language, including unrecognised ones
      only    → just the named languages
      except  → every known language except the named ones
    """

    model_config = {"frozen": True}

    mode: Literal["all", "only", "except"] = "all"
    languages: frozenset[str] = Field(default_factory=frozenset)

    @property
    def is_general(self) -> bool:
        return self.mode == "all"

    def accepts(self, language: str | None) -> bool:
        """Whether a normalised language tag is in scope.

        ``None`` stands for an unrecognised language: only general rules apply.
        """
        if self.mode == "all":
            return True
        if language is None:
            return False
        if self.mode == "only":
            return language in self.languages
        return language not in self.languages


def all_languages() -> Applicability:
    return Applicability(mode="all")


def only(*languages: str) -> Applicability:
    return Applicability(mode="only", languages=frozenset(languages))


def excluding(*languages: str) -> Applicability:
    return Applicability(mode="except", languages=frozenset(languages))


class Rule(BaseModel):
    """A single pattern-based rule definition."""

    model_config = {"frozen": True}

    id: str = Field(..., description="Stable rule identifier, e.g. 'EVAL_USAGE'")
    name: str
    severity: Severity
    category: str = Field(..., description="OWASP-style category label")
    pattern: re.Pattern = Field(..., description="Compiled pattern over raw source")
    description: str
    fix: str = Field(..., description="Remediation guidance, may cover several languages")
    applicability: Applicability = Field(default_factory=all_languages)
    occurrence: OccurrencePolicy = OccurrencePolicy.SINGLE
    max_occurrences: int = Field(default=DEFAULT_MAX_OCCURRENCES, ge=1)


class RuleInfo(BaseModel):
    """Public view of a rule, without the compiled pattern."""

    id: str
    name: str
    severity: Severity
    category: str
    description: str
    fix: str
    applies_to: Literal["all", "only", "except"]
    languages: list[str] = Field(default_factory=list)
    occurrence: OccurrencePolicy
    max_occurrences: int

    @classmethod
    def from_rule(cls, rule: Rule) -> RuleInfo:
        return cls(
            id=rule.id,
            name=rule.name,
            severity=rule.severity,
            category=rule.category,
            description=rule.description,
            fix=rule.fix,
            applies_to=rule.applicability.mode,
            languages=sorted(rule.applicability.languages),
            occurrence=rule.occurrence,
            max_occurrences=rule.max_occurrences,
        )


class RuleResult(BaseModel):
    """Result of running the applicable rules over one block of source."""

    findings: list[Finding] = Field(default_factory=list)
    language: str = Field(default="", description="Normalised language tag, '' if unrecognised")
    rules_executed: list[str] = Field(default_factory=list)
    scan_duration_ms: float = 0.0
