"""
Scan Cache — SHA-256 hash-based caching of local scan results.

Local findings are a pure function of (language, source), so an identical
resubmission skips the rule engine entirely. AI audit results are never
cached.
"""

from __future__ import annotations

import hashlib
import logging
import time
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Any

from vibeguard.config import settings
from vibeguard.models.finding_models import Finding

logger = logging.getLogger("vibeguard.cache")


@dataclass
class CacheEntry:
    """A cached local scan result for one block of source."""

    content_hash: str
    language: str
    findings: list[Finding]
    timestamp: float = field(default_factory=time.time)
    ttl_seconds: int = field(default_factory=lambda: settings.cache_ttl_seconds)

    @property
    def is_expired(self) -> bool:
        return (time.time() - self.timestamp) > self.ttl_seconds


class FileCache:
    """
    In-memory LRU cache keyed by language and SHA-256 of the source.

    Expired entries are purged on every write, and the least recently used
    entry is evicted once max_entries is reached.
    Upgradeable to Redis/SQLite by swapping the storage backend.
    """

    def __init__(self, ttl_seconds: int | None = None, max_entries: int | None = None) -> None:
        self._store: OrderedDict[str, CacheEntry] = OrderedDict()
        self.ttl_seconds = ttl_seconds if ttl_seconds is not None else settings.cache_ttl_seconds
        self.max_entries = max_entries or settings.cache_max_entries

    @staticmethod
    def hash_content(content: str) -> str:
        """Compute SHA-256 hash of source content."""
        return hashlib.sha256(content.encode("utf-8")).hexdigest()

    def _key(self, language: str, content: str) -> str:
        return f"{language}:{self.hash_content(content)}"

    def get(self, language: str, content: str) -> CacheEntry | None:
        """
        Look up the cached result for a source block.

        Returns None if not cached or expired.
        """
        key = self._key(language, content)
        entry = self._store.get(key)

        if entry is None:
            return None

        if entry.is_expired:
            del self._store[key]
            return None

        self._store.move_to_end(key)
        return entry

    def put(self, language: str, content: str, findings: list[Finding]) -> None:
        """Cache local findings for a source block."""
        self.purge_expired()
        key = self._key(language, content)
        self._store[key] = CacheEntry(
            content_hash=self.hash_content(content),
            language=language,
            findings=[f.model_copy() for f in findings],
            ttl_seconds=self.ttl_seconds,
        )
        self._store.move_to_end(key)

        while len(self._store) > self.max_entries:
            evicted, _ = self._store.popitem(last=False)
            logger.debug(f"Cache full — evicted {evicted}")

    def purge_expired(self) -> int:
        """Drop every expired entry; returns how many were removed."""
        expired = [key for key, entry in self._store.items() if entry.is_expired]
        for key in expired:
            del self._store[key]
        return len(expired)

    def clear(self) -> None:
        """Clear all cached entries."""
        self._store.clear()

    @property
    def size(self) -> int:
        """Number of cached entries."""
        return len(self._store)

    def stats(self) -> dict[str, Any]:
        """Cache statistics."""
        expired = sum(1 for e in self._store.values() if e.is_expired)
        return {
            "total_entries": len(self._store),
            "expired_entries": expired,
            "active_entries": len(self._store) - expired,
        }
