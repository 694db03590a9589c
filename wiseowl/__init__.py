"""
WiseOwl Assistant Backend
=========================
Tool selection for the WiseOwl library assistant: narrows the backend tool
manifest to what a chat message needs before calling the completion API.

Usage:
    from wiseowl import select_tools_for_query, load_tool_manifest
    from wiseowl.tool_selector import ToolSelector, analyze_query
    from wiseowl.llm import CompletionClient
"""

__version__ = "1.0.0"

from .utils import setup_logger, log

from .tool_selector import (
    # Data classes
    ToolDescriptor, Category, SelectionConfig,
    QueryAnalysisResult, SelectionOutcome, UsageStats,
    # Catalog
    CategoryCatalog, DEFAULT_CATALOG, DEFAULT_SELECTION_CONFIG,
    # Pipeline
    ToolSelector, analyze_query, filter_by_categories, select_tools_for_query,
    compute_usage_stats, build_selection_summary,
    # Supporting
    ManifestError, load_tool_manifest, suggest_commands,
    # Integration
    prepare_request_tools, send_chat_with_tools,
)

from .config import Settings, settings, selection_config_from_env

from .llm import CompletionClient, get_completion_client

__all__ = [
    # Version
    '__version__',
    # Utils
    'setup_logger', 'log',
    # Tool selector
    'ToolDescriptor', 'Category', 'SelectionConfig',
    'QueryAnalysisResult', 'SelectionOutcome', 'UsageStats',
    'CategoryCatalog', 'DEFAULT_CATALOG', 'DEFAULT_SELECTION_CONFIG',
    'ToolSelector', 'analyze_query', 'filter_by_categories', 'select_tools_for_query',
    'compute_usage_stats', 'build_selection_summary',
    'ManifestError', 'load_tool_manifest', 'suggest_commands',
    'prepare_request_tools', 'send_chat_with_tools',
    # Config
    'Settings', 'settings', 'selection_config_from_env',
    # LLM
    'CompletionClient', 'get_completion_client',
]
