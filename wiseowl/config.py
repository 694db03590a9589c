"""
WiseOwl Configuration
=====================
Central configuration for the WiseOwl assistant backend, read from
environment variables.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

from .utils import split_csv

TRUE_VALUES = ("1", "true", "yes", "on")


def _env_bool(environ: Mapping[str, str], name: str, default: bool) -> bool:
    value = environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in TRUE_VALUES


def _env_int(environ: Mapping[str, str], name: str, default: int) -> int:
    value = environ.get(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


def _env_float(environ: Mapping[str, str], name: str, default: float) -> float:
    value = environ.get(name)
    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {value!r}") from None


def selection_config_from_env(environ: Optional[Mapping[str, str]] = None):
    """
    Build the selection policy from WISEOWL_* variables.

    Unset variables fall back to the library defaults.
    """
    from .tool_selector.catalog import DEFAULT_SELECTION_CONFIG
    from .tool_selector.models import SelectionConfig

    if environ is None:
        environ = os.environ
    default = DEFAULT_SELECTION_CONFIG

    always = environ.get("WISEOWL_ALWAYS_INCLUDE")
    return SelectionConfig(
        max_tools_per_request=_env_int(environ, "WISEOWL_MAX_TOOLS", default.max_tools_per_request),
        always_include_category_ids=(
            tuple(split_csv(always)) if always is not None else default.always_include_category_ids
        ),
        contextual_selection_enabled=_env_bool(
            environ, "WISEOWL_CONTEXTUAL_SELECTION", default.contextual_selection_enabled
        ),
        preferred_category_ids=tuple(split_csv(environ.get("WISEOWL_PREFERRED_CATEGORIES"))),
        excluded_category_ids=tuple(split_csv(environ.get("WISEOWL_EXCLUDED_CATEGORIES"))),
    )


@dataclass
class Settings:
    """Application settings."""
    LOG_LEVEL: str = "INFO"
    MANIFEST_PATH: Path = Path("wiseOwl.json")
    ANALYSIS_CACHE_TTL: int = 30 * 60
    COMPLETION_API_URL: str = "https://openrouter.ai/api/v1/chat/completions"
    COMPLETION_MODEL: str = "openai/gpt-4o-mini"
    COMPLETION_API_KEY: str = field(default="", repr=False)
    COMPLETION_TIMEOUT: float = 120.0
    MAX_HISTORY_MESSAGES: int = 10

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        if environ is None:
            environ = os.environ
        defaults = cls()
        return cls(
            LOG_LEVEL=environ.get("LOG_LEVEL", defaults.LOG_LEVEL),
            MANIFEST_PATH=Path(environ.get("WISEOWL_MANIFEST_PATH", str(defaults.MANIFEST_PATH))),
            ANALYSIS_CACHE_TTL=_env_int(environ, "WISEOWL_ANALYSIS_CACHE_TTL", defaults.ANALYSIS_CACHE_TTL),
            COMPLETION_API_URL=environ.get("COMPLETION_API_URL", defaults.COMPLETION_API_URL),
            COMPLETION_MODEL=environ.get("COMPLETION_MODEL", defaults.COMPLETION_MODEL),
            COMPLETION_API_KEY=environ.get("COMPLETION_API_KEY", defaults.COMPLETION_API_KEY),
            COMPLETION_TIMEOUT=_env_float(environ, "COMPLETION_TIMEOUT", defaults.COMPLETION_TIMEOUT),
            MAX_HISTORY_MESSAGES=_env_int(environ, "WISEOWL_MAX_HISTORY", defaults.MAX_HISTORY_MESSAGES),
        )


settings = Settings.from_env()
