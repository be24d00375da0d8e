"""
Rule Engine — Orchestrates the catalog, scanner and occurrence policy.

No LLM involvement — pure deterministic analysis. Identical inputs always
produce identical findings in identical order.
"""

from __future__ import annotations

import logging
import time

from vibeguard.core.catalog import DEFAULT_CATALOG, RuleCatalog
from vibeguard.core.occurrence import select_occurrences
from vibeguard.core.scanner import Scanner
from vibeguard.models.finding_models import LOCAL_SOURCE, Finding, MatchEvent
from vibeguard.models.rule_models import Rule, RuleResult

logger = logging.getLogger("vibeguard.engine")


class RuleEngine:
    """
    Deterministic rule engine.

    Runs every rule applicable to the declared language against the source,
    in catalog order. Rules are independent: overlapping matches from
    different rules are all reported.
    """

    def __init__(self, catalog: RuleCatalog | None = None) -> None:
        self.catalog = catalog or DEFAULT_CATALOG

    def scan(self, source: str, language: object) -> list[Finding]:
        """Findings for ``source`` under ``language``."""
        return self.run(source, language).findings

    def run(self, source: str, language: object) -> RuleResult:
        """
        Run all applicable rules against one block of source.

        Args:
            source: Raw source text. Non-text input scans as empty.
            language: Declared language tag. Unknown tags get general rules only.

        Returns:
            RuleResult with findings, executed rule ids and timing.
        """
        start = time.monotonic()
        scanner = Scanner(source)
        findings: list[Finding] = []
        rules_executed: list[str] = []

        for rule in self.catalog.applicable_rules(language):
            rules_executed.append(rule.id)
            for event in select_occurrences(rule, scanner.iter_matches(rule)):
                findings.append(_to_finding(rule, event))

        elapsed = (time.monotonic() - start) * 1000
        resolved = self.catalog.resolve_language(language)
        logger.debug(
            "Scanned %d chars as %r: %d rules, %d findings (%.1fms)",
            len(scanner.source),
            resolved or "general",
            len(rules_executed),
            len(findings),
            elapsed,
        )

        return RuleResult(
            findings=findings,
            language=resolved or "",
            rules_executed=rules_executed,
            scan_duration_ms=round(elapsed, 2),
        )


def _to_finding(rule: Rule, event: MatchEvent) -> Finding:
    return Finding(
        rule_id=rule.id,
        name=rule.name,
        severity=rule.severity.value,
        category=rule.category,
        line=event.line,
        snippet=event.snippet,
        description=rule.description,
        fix=rule.fix,
        source=LOCAL_SOURCE,
    )


_default_engine = RuleEngine()


def scan(source: str, language: object) -> list[Finding]:
    """Scan ``source`` with the built-in catalog."""
    return _default_engine.scan(source, language)
