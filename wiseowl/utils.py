"""
WiseOwl Utility Functions
=========================
Logging and small text helpers shared across the WiseOwl package.
"""

from __future__ import annotations

import logging
import os
from typing import List, Optional

# ================================================================================
# LOGGING
# ================================================================================

def setup_logger(name: str = "wiseowl", level: str = "INFO") -> logging.Logger:
    """Set up and return a logger instance."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("[%(levelname)s] %(asctime)s - %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    return logger


log = setup_logger(level=os.environ.get("LOG_LEVEL", "INFO"))


# ================================================================================
# TEXT HELPERS
# ================================================================================

def normalize_query(query: Optional[str]) -> str:
    """Lowercase and strip a raw user query."""
    if not query:
        return ""
    return query.lower().strip()


def truncate_text(text: str, max_length: int = 50, suffix: str = "...") -> str:
    """Truncate text for log lines."""
    if len(text) <= max_length:
        return text
    return text[:max_length - len(suffix)] + suffix


def split_csv(value: Optional[str]) -> List[str]:
    """
    Split a comma separated setting into a clean list.

    Examples:
        >>> split_csv("system, navigation,,")
        ['system', 'navigation']
    """
    if not value:
        return []
    return [part.strip() for part in value.split(",") if part.strip()]
