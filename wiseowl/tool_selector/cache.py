"""
In-memory cache for query analysis results.

Live input re-analyzes the same text many times while the user types, so
results are kept by normalized query for a limited time.
"""

import time
from typing import Dict, Optional, Tuple

from .constants import ANALYSIS_CACHE_MAX_ENTRIES, ANALYSIS_CACHE_TTL
from .models import QueryAnalysisResult
from ..utils import normalize_query


class AnalysisCache:
    """TTL cache keyed by the normalized query text."""

    def __init__(self, ttl: float = ANALYSIS_CACHE_TTL, max_entries: int = ANALYSIS_CACHE_MAX_ENTRIES):
        self.ttl = ttl
        self.max_entries = max_entries
        self._entries: Dict[str, Tuple[float, QueryAnalysisResult]] = {}

    @staticmethod
    def key_for(query: str) -> str:
        return normalize_query(query)

    def get(self, query: str) -> Optional[QueryAnalysisResult]:
        """Get a copy of a cached analysis if still valid."""
        key = self.key_for(query)
        if key in self._entries:
            timestamp, result = self._entries[key]
            if time.time() - timestamp < self.ttl:
                return result.copy()
            else:
                del self._entries[key]
        return None

    def put(self, query: str, result: QueryAnalysisResult):
        """Cache a copy of an analysis, so later edits to ``result`` don't leak in."""
        self._entries[self.key_for(query)] = (time.time(), result.copy())
        if len(self._entries) > self.max_entries:
            self.cleanup()

    def cleanup(self) -> int:
        """Drop expired entries and return how many were removed."""
        cutoff = time.time() - self.ttl
        expired = [k for k, (t, _) in self._entries.items() if t < cutoff]
        for k in expired:
            del self._entries[k]
        return len(expired)

    def clear(self):
        self._entries.clear()

    def stats(self) -> Dict[str, float]:
        timestamps = [t for t, _ in self._entries.values()]
        return {
            'size': len(self._entries),
            'oldest_entry': min(timestamps) if timestamps else 0,
            'newest_entry': max(timestamps) if timestamps else 0,
        }

    def __len__(self) -> int:
        return len(self._entries)
