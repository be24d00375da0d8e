"""
Scan Worker — Async orchestrator running the full analysis pipeline.

Pipeline:
1. Local SAST scan (with content-hash caching)
2. Optional AI logic audit via an external FindingsProducer
3. Concatenate findings (local first, then AI)
4. Compute quality score and grade
5. Assemble the ScanResponse
"""

from __future__ import annotations

import logging
import time
import uuid
from datetime import datetime, timezone

from vibeguard.cache.file_cache import FileCache
from vibeguard.core.languages import normalize_language
from vibeguard.core.rule_engine import RuleEngine
from vibeguard.core.scorer import score
from vibeguard.llm.auditor import FindingsProducer
from vibeguard.models.finding_models import Finding
from vibeguard.models.scan_models import ScanReport, ScanResponse

logger = logging.getLogger("vibeguard.worker")


class ScanWorker:
    """Async scan orchestrator implementing the full analysis pipeline."""

    def __init__(
        self,
        cache: FileCache | None = None,
        auditor: FindingsProducer | None = None,
        engine: RuleEngine | None = None,
    ) -> None:
        self.cache = cache or FileCache()
        self.auditor = auditor
        self.rule_engine = engine or RuleEngine()

    @property
    def ai_available(self) -> bool:
        return self.auditor is not None

    def scan_local(self, code: str, language: str) -> list[Finding]:
        """Deterministic findings, served from cache when the source is unchanged."""
        cached = self.cache.get(language, code)
        if cached:
            return [f.model_copy() for f in cached.findings]
        findings = self.rule_engine.scan(code, language)
        self.cache.put(language, code, findings)
        return findings

    async def run_scan(
        self,
        code: str,
        language: str | None,
        ai_audit: bool = True,
    ) -> ScanResponse:
        """
        Execute the full analysis pipeline.

        Args:
            code: Source code to scan
            language: Declared language tag
            ai_audit: Whether to run the AI audit when one is configured

        Returns:
            Complete ScanResponse with local + optional AI findings
        """
        scan_id = str(uuid.uuid4())[:8]
        start_time = time.monotonic()
        tag = normalize_language(language)

        logger.info(f"[{scan_id}] Starting scan: {len(code)} chars, language={tag or 'unknown'}")

        # ── Step 1: Local SAST ──
        local_findings = self.scan_local(code, tag)
        logger.info(f"[{scan_id}] SAST findings: {len(local_findings)}")

        # ── Step 2: AI audit ──
        ai_findings: list[Finding] = []
        ai_enabled = ai_audit and self.auditor is not None
        if ai_enabled:
            logger.info(f"[{scan_id}] Invoking AI audit")
            ai_findings = await self.auditor.produce_findings(code, tag)
        else:
            logger.info(f"[{scan_id}] AI audit skipped — SAST-only mode")

        # ── Step 3–4: Merge and score ──
        findings = local_findings + ai_findings
        result = score(findings)
        logger.info(f"[{scan_id}] Score: {result.score}/100 ({result.grade.value})")

        elapsed_ms = (time.monotonic() - start_time) * 1000

        report = ScanReport(
            scan_id=scan_id,
            timestamp=datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
            language=tag,
            lines=len(code.split("\n")),
            findings=findings,
            score=result.score,
            breakdown=result.breakdown,
            grade=result.grade,
            ai_enabled=ai_enabled,
            local_findings=len(local_findings),
            ai_findings=len(ai_findings),
            duration_ms=round(elapsed_ms, 2),
            summary=result.summary,
        )

        logger.info(
            f"[{scan_id}] Scan complete in {elapsed_ms:.0f}ms — "
            f"{len(findings)} findings, score={result.score}, "
            f"ai={'yes' if ai_enabled else 'no'}"
        )

        return ScanResponse(
            message="scan_complete",
            scan_id=scan_id,
            report=report,
        )
