"""
FastAPI Dependencies — Shared singletons injected via Depends().
"""

from __future__ import annotations

import logging
from functools import lru_cache

from vibeguard.cache.file_cache import FileCache
from vibeguard.config import settings
from vibeguard.core.catalog import DEFAULT_CATALOG, RuleCatalog
from vibeguard.llm.auditor import AIAuditor
from vibeguard.llm.gateway import LLMGateway
from vibeguard.workers.scan_worker import ScanWorker

logger = logging.getLogger("vibeguard.api")


def get_catalog() -> RuleCatalog:
    """The built-in rule catalog."""
    return DEFAULT_CATALOG


@lru_cache
def get_file_cache() -> FileCache:
    """Shared scan cache singleton."""
    return FileCache()


@lru_cache
def get_ai_auditor() -> AIAuditor | None:
    """Shared AI auditor, or None when no Groq key is configured."""
    if not settings.ai_audit_enabled:
        logger.info("GROQ_API_KEY not set — AI audit disabled")
        return None
    return AIAuditor(LLMGateway())


@lru_cache
def get_scan_worker() -> ScanWorker:
    """Shared scan worker singleton."""
    return ScanWorker(
        cache=get_file_cache(),
        auditor=get_ai_auditor(),
    )
