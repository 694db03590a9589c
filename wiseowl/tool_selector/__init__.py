"""
WiseOwl Tool Selector
=====================

Narrows the library assistant's tool manifest to the tools a chat message
is about, before the request goes to the completion API.

Package Structure:
    models.py           - Data classes and type definitions
    constants.py        - Thresholds, weights and heuristic word lists
    data/               - Category taxonomy
    catalog.py          - Category catalog with tool reverse index
    analyzer.py         - Query scoring and category suggestions
    selector.py         - Filtering, truncation and the ToolSelector facade
    reporter.py         - Usage statistics and summary sentence
    cache.py            - Query analysis cache
    manifest.py         - Tool manifest loading
    commands.py         - Command completion for live input
    integration.py      - Chat request hand-off
"""

from .models import (
    ToolDescriptor,
    Category,
    SelectionConfig,
    QueryAnalysisResult,
    SelectionOutcome,
    UsageStats,
)
from .constants import CategoryPriority, SuggestionRules, DEFAULT_SUGGESTION_RULES
from .catalog import CategoryCatalog, DEFAULT_CATALOG, DEFAULT_SELECTION_CONFIG
from .analyzer import QueryAnalyzer, analyze_query
from .selector import ToolSelector, filter_by_categories, select_tools_for_query
from .reporter import compute_usage_stats, build_selection_summary
from .cache import AnalysisCache
from .manifest import ManifestError, load_tool_manifest, parse_tool_manifest
from .commands import suggest_commands
from .integration import (
    prepare_request_tools,
    send_chat_with_tools,
    build_tools_payload,
    audit_catalog,
    get_default_selector,
)

__all__ = [
    # Data models
    'ToolDescriptor',
    'Category',
    'SelectionConfig',
    'QueryAnalysisResult',
    'SelectionOutcome',
    'UsageStats',

    # Constants
    'CategoryPriority',
    'SuggestionRules',
    'DEFAULT_SUGGESTION_RULES',

    # Catalog
    'CategoryCatalog',
    'DEFAULT_CATALOG',
    'DEFAULT_SELECTION_CONFIG',

    # Pipeline
    'QueryAnalyzer',
    'analyze_query',
    'ToolSelector',
    'filter_by_categories',
    'select_tools_for_query',
    'compute_usage_stats',
    'build_selection_summary',

    # Supporting
    'AnalysisCache',
    'ManifestError',
    'load_tool_manifest',
    'parse_tool_manifest',
    'suggest_commands',

    # Integration
    'prepare_request_tools',
    'send_chat_with_tools',
    'build_tools_payload',
    'audit_catalog',
    'get_default_selector',
]
