"""
Tests for Scan Worker and Scan Cache — caching, merging and report assembly.
"""

import asyncio

from vibeguard.cache.file_cache import FileCache
from vibeguard.core.report import build_text_report, sort_findings
from vibeguard.models.finding_models import Finding
from vibeguard.workers.scan_worker import ScanWorker


class CountingEngine:
    def __init__(self):
        self.calls = 0

    def scan(self, source, language):
        self.calls += 1
        return [Finding(rule_id="EVAL_USAGE", name="eval", severity="High", line=1)]


class FailingAuditor:
    async def produce_findings(self, code, language):
        return []


def test_cache_hit_skips_engine():
    engine = CountingEngine()
    worker = ScanWorker(cache=FileCache(), engine=engine)
    first = worker.scan_local("eval(x)", "javascript")
    second = worker.scan_local("eval(x)", "javascript")
    assert engine.calls == 1
    assert [f.model_dump() for f in first] == [f.model_dump() for f in second]


def test_cache_keyed_by_language():
    engine = CountingEngine()
    worker = ScanWorker(cache=FileCache(), engine=engine)
    worker.scan_local("eval(x)", "javascript")
    worker.scan_local("eval(x)", "python")
    assert engine.calls == 2


def test_cached_findings_are_copies():
    worker = ScanWorker(cache=FileCache())
    worker.scan_local("eval(x)", "javascript")[0].line = 99
    assert worker.scan_local("eval(x)", "javascript")[0].line == 1


def test_expired_entries_evicted():
    cache = FileCache(ttl_seconds=-1)
    cache.put("python", "code", [])
    assert cache.get("python", "code") is None
    assert cache.size == 0


def test_cache_stats_and_clear():
    cache = FileCache()
    cache.put("python", "a", [])
    cache.put("python", "b", [])
    assert cache.stats() == {"total_entries": 2, "expired_entries": 0, "active_entries": 2}
    cache.clear()
    assert cache.size == 0


def test_run_scan_without_auditor(vulnerable_js):
    worker = ScanWorker()
    response = asyncio.run(worker.run_scan(vulnerable_js, " JavaScript "))
    report = response.report
    assert response.scan_id == report.scan_id
    assert report.language == "javascript"
    assert report.ai_enabled is False
    assert report.local_findings == len(report.findings)
    assert sum(report.breakdown.values()) == len(report.findings)


def test_run_scan_with_empty_ai_result():
    worker = ScanWorker(auditor=FailingAuditor())
    report = asyncio.run(worker.run_scan('console.log("x")', "javascript")).report
    assert report.ai_enabled is True
    assert report.ai_findings == 0
    assert report.score == 97


def test_sort_findings_by_severity():
    findings = [
        Finding(rule_id="a", name="a", severity="Info"),
        Finding(rule_id="b", name="b", severity="Odd"),
        Finding(rule_id="c", name="c", severity="Critical"),
        Finding(rule_id="d", name="d", severity="Low"),
    ]
    assert [f.rule_id for f in sort_findings(findings)] == ["c", "d", "a", "b"]


def test_text_report_for_clean_scan(clean_js):
    report = asyncio.run(ScanWorker().run_scan(clean_js, "javascript")).report
    text = build_text_report(report)
    assert "Score: 100/100 (Excellent)" in text
    assert "No issues found." in text


def test_expired_entries_purged_on_write():
    cache = FileCache(ttl_seconds=-1)
    for i in range(50):
        cache.put("python", f"code {i}", [])
    assert cache.size == 1
    assert cache.stats()["total_entries"] == 1


def test_cache_size_bounded_by_lru_eviction():
    cache = FileCache(max_entries=3)
    for i in range(10):
        cache.put("python", f"code {i}", [])
    assert cache.size == 3
    assert cache.get("python", "code 0") is None
    assert cache.get("python", "code 9") is not None


def test_cache_read_refreshes_lru_order():
    cache = FileCache(max_entries=2)
    cache.put("python", "a", [])
    cache.put("python", "b", [])
    cache.get("python", "a")
    cache.put("python", "c", [])
    assert cache.get("python", "a") is not None
    assert cache.get("python", "b") is None


def test_distinct_scans_do_not_grow_cache_unbounded():
    worker = ScanWorker(cache=FileCache(max_entries=16))
    for i in range(100):
        asyncio.run(worker.run_scan(f"let x{i} = {i};", "javascript", ai_audit=False))
    assert worker.cache.size == 16
