"""
Health Check Route — GET /health
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from vibeguard.api.dependencies import get_catalog, get_scan_worker
from vibeguard.config import settings
from vibeguard.core.catalog import RuleCatalog
from vibeguard.workers.scan_worker import ScanWorker

router = APIRouter()


@router.get("/health")
async def health(
    catalog: RuleCatalog = Depends(get_catalog),
    worker: ScanWorker = Depends(get_scan_worker),
):
    """Health check endpoint."""
    return {
        "status": "ok",
        "version": "1.0.0",
        "engine": "deterministic-sast",
        "rules": len(catalog),
        "ai_audit": worker.ai_available,
        "model": settings.vibeguard_model if worker.ai_available else None,
        "cache": worker.cache.stats(),
    }
