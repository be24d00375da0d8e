"""
Plain-text audit report for a completed scan.
"""

from __future__ import annotations

from typing import Iterable

from vibeguard.models.finding_models import Finding
from vibeguard.models.rule_models import SEVERITY_ORDER
from vibeguard.models.scan_models import ScanReport

_RANK = {severity.value: rank for rank, severity in enumerate(SEVERITY_ORDER)}


def sort_findings(findings: Iterable[Finding]) -> list[Finding]:
    """Most severe first; unknown tiers last. Stable within a tier."""
    return sorted(findings, key=lambda f: _RANK.get(f.severity, len(_RANK)))


def build_text_report(report: ScanReport) -> str:
    rule = "=" * 40
    divider = "-" * 40
    out = [
        "VibeGuard Audit Report",
        rule,
        f"Date: {report.timestamp}",
        f"Language: {report.language or 'unknown'}",
        f"Lines: {report.lines}",
        f"Score: {report.score}/100 ({report.grade.value})",
        f"Issues: {len(report.findings)}",
        "",
        "FINDINGS",
        divider,
    ]
    if not report.findings:
        out.append("No issues found.")
    for i, f in enumerate(sort_findings(report.findings), start=1):
        out.append(f"{i}. [{f.severity}] {f.name} (Line {f.line}) [{f.source}]")
        out.append(f"   {f.description}")
        out.append(f"   Fix: {f.fix}")
        out.append("")
    return "\n".join(out).rstrip() + "\n"
