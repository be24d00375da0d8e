"""
Tests for FastAPI Scan API — integration tests for the full pipeline.

The scan worker is overridden so no test ever reaches a real LLM provider.
"""

import pytest
from fastapi.testclient import TestClient

from vibeguard.api.dependencies import get_scan_worker
from vibeguard.cache.file_cache import FileCache
from vibeguard.main import app
from vibeguard.models.finding_models import Finding
from vibeguard.workers.scan_worker import ScanWorker


class StubAuditor:
    def __init__(self, findings):
        self.findings = findings
        self.calls = []

    async def produce_findings(self, code, language):
        self.calls.append((code, language))
        return list(self.findings)


AI_FINDING = Finding(
    rule_id="OFF_BY_ONE",
    name="Off-by-one loop bound",
    severity="Medium",
    category="Logic Error",
    line=1,
    description="Loop reads past the end of the array.",
    fix="Use i < arr.length.",
    source="AI Audit",
)


@pytest.fixture
def client():
    worker = ScanWorker(cache=FileCache(), auditor=None)
    app.dependency_overrides[get_scan_worker] = lambda: worker
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def ai_client():
    auditor = StubAuditor([AI_FINDING])
    worker = ScanWorker(cache=FileCache(), auditor=auditor)
    app.dependency_overrides[get_scan_worker] = lambda: worker
    yield TestClient(app), auditor
    app.dependency_overrides.clear()


def test_health_check(client):
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["rules"] == 15
    assert data["ai_audit"] is False


def test_scan_clean_code(client, clean_js):
    response = client.post("/scan", json={"code": clean_js, "language": "javascript"})
    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "scan_complete"
    report = data["report"]
    assert report["findings"] == []
    assert report["score"] == 100
    assert report["grade"] == "Excellent"
    assert report["ai_enabled"] is False
    assert report["breakdown"] == {"Critical": 0, "High": 0, "Medium": 0, "Low": 0, "Info": 0}


def test_scan_vulnerable_code(client, vulnerable_py):
    response = client.post("/scan", json={"code": vulnerable_py, "language": "python"})
    assert response.status_code == 200
    report = response.json()["report"]
    assert report["score"] == 0
    assert report["grade"] == "Critical Risk"
    assert report["language"] == "python"
    assert report["lines"] == len(vulnerable_py.split("\n"))

    finding = report["findings"][0]
    for field in ("rule_id", "name", "severity", "category", "line", "snippet", "description", "fix", "source"):
        assert field in finding
    assert finding["source"] == "SAST"


def test_scan_language_from_filename(client):
    code = 'os.system("cat " + user_input)'
    response = client.post("/scan", json={"code": code, "filename": "tool.py"})
    ids = [f["rule_id"] for f in response.json()["report"]["findings"]]
    assert "OS_SYSTEM" in ids

    response = client.post("/scan", json={"code": code, "filename": "tool.js"})
    ids = [f["rule_id"] for f in response.json()["report"]["findings"]]
    assert "OS_SYSTEM" not in ids


def test_scan_rejects_tiny_input(client):
    response = client.post("/scan", json={"code": "   a  ", "language": "python"})
    assert response.status_code == 400


def test_scan_rejects_oversized_input(client):
    response = client.post("/scan", json={"code": "x" * 60_000, "language": "python"})
    assert response.status_code == 400


def test_scan_missing_code_is_422(client):
    response = client.post("/scan", json={"language": "python"})
    assert response.status_code == 422


def test_scan_merges_ai_findings_after_local(ai_client):
    client, auditor = ai_client
    response = client.post("/scan", json={"code": "eval(userInput);", "language": "javascript"})
    report = response.json()["report"]
    assert [f["source"] for f in report["findings"]] == ["SAST", "AI Audit"]
    assert report["ai_enabled"] is True
    assert report["local_findings"] == 1
    assert report["ai_findings"] == 1
    assert report["score"] == 100 - 15 - 8
    assert auditor.calls == [("eval(userInput);", "javascript")]


def test_scan_ai_audit_opt_out(ai_client):
    client, auditor = ai_client
    response = client.post(
        "/scan", json={"code": "eval(userInput);", "language": "javascript", "ai_audit": False}
    )
    report = response.json()["report"]
    assert report["ai_enabled"] is False
    assert report["ai_findings"] == 0
    assert auditor.calls == []


def test_scan_text_report(client, vulnerable_js):
    response = client.post("/scan/text", json={"code": vulnerable_js, "language": "javascript"})
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    text = response.text
    assert text.startswith("VibeGuard Audit Report")
    assert "Language: javascript" in text
    assert "[Critical] Hardcoded Password" in text


def test_list_rules(client):
    response = client.get("/rules")
    assert response.status_code == 200
    rules = response.json()
    assert len(rules) == 15
    assert "pattern" not in rules[0]

    python_rules = client.get("/rules", params={"language": "python"}).json()
    ids = [r["id"] for r in python_rules]
    assert "OS_SYSTEM" in ids
    assert "CONSOLE_LOG" not in ids


def test_score_endpoint(client):
    findings = [
        {"rule_id": "A", "name": "a", "severity": "Critical"},
        {"rule_id": "B", "name": "b", "severity": "High", "source": "AI Audit"},
        {"rule_id": "C", "name": "c", "severity": "Whatever"},
    ]
    response = client.post("/score", json={"findings": findings})
    assert response.status_code == 200
    data = response.json()
    assert data["score"] == 60
    assert data["grade"] == "Fair"
    assert data["breakdown"]["Critical"] == 1
    assert data["breakdown"]["High"] == 1


def test_score_endpoint_empty(client):
    data = client.post("/score", json={"findings": []}).json()
    assert data["score"] == 100
    assert data["grade"] == "Excellent"
