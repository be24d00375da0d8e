"""
Scan Routes — POST /scan and POST /scan/text

Accepts {"code": str, "language"?: str, "filename"?: str, "ai_audit"?: bool},
runs the local SAST engine, optionally the AI logic audit, and scores the
merged findings.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse

from vibeguard.api.dependencies import get_scan_worker
from vibeguard.config import settings
from vibeguard.core.languages import language_for_filename
from vibeguard.core.report import build_text_report
from vibeguard.models.scan_models import ScanRequest, ScanResponse
from vibeguard.workers.scan_worker import ScanWorker

logger = logging.getLogger("vibeguard.api.scan")
router = APIRouter()


def _resolve_language(req: ScanRequest) -> str:
    return req.language or language_for_filename(req.filename) or ""


def _check_size(code: str) -> None:
    # Input size guard; the engine itself takes any length
    if len(code.strip()) < settings.min_code_length:
        raise HTTPException(status_code=400, detail="Please enter some code first.")
    if len(code) > settings.max_code_length:
        raise HTTPException(
            status_code=400,
            detail=f"Code exceeds maximum length of {settings.max_code_length} characters",
        )


async def _run(req: ScanRequest, worker: ScanWorker) -> ScanResponse:
    _check_size(req.code)
    try:
        return await worker.run_scan(req.code, _resolve_language(req), ai_audit=req.ai_audit)
    except Exception:
        logger.exception("Unexpected scan error")
        raise HTTPException(status_code=500, detail="Scan failed")


@router.post("/scan", response_model=ScanResponse)
async def scan_code(req: ScanRequest, worker: ScanWorker = Depends(get_scan_worker)):
    """Scan a block of source code and return findings, score and grade."""
    return await _run(req, worker)


@router.post("/scan/text", response_class=PlainTextResponse)
async def scan_code_text(req: ScanRequest, worker: ScanWorker = Depends(get_scan_worker)):
    """Same as /scan, rendered as a plain-text audit report."""
    response = await _run(req, worker)
    return PlainTextResponse(build_text_report(response.report))
