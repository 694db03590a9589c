"""
Tool filter and selector.

Turns a set of target categories (detected or chosen by hand) plus any
explicitly named tools into the bounded list of tool descriptors sent with
one completion request.
"""

from typing import Iterable, List, Optional, Sequence

from .analyzer import QueryAnalyzer, get_default_analyzer
from .cache import AnalysisCache
from .catalog import CategoryCatalog, DEFAULT_CATALOG, DEFAULT_SELECTION_CONFIG
from .constants import (
    DEFAULT_SUGGESTION_RULES,
    DEFAULT_TOOL_RANK,
    EXPLICIT_TOOL_RANK,
    FALLBACK_CATEGORY_IDS,
    SuggestionRules,
)
from .models import (
    QueryAnalysisResult,
    SelectionConfig,
    SelectionOutcome,
    ToolDescriptor,
    UsageStats,
)
from .reporter import build_selection_summary, compute_usage_stats
from ..utils import log


def filter_by_categories(
    all_tools: Sequence[ToolDescriptor],
    selected_category_ids: Iterable[str],
    explicit_tool_names: Iterable[str] = (),
    config: SelectionConfig = DEFAULT_SELECTION_CONFIG,
    catalog: CategoryCatalog = DEFAULT_CATALOG,
) -> List[ToolDescriptor]:
    """
    Select the tools owned by the given categories.

    Always-include categories are added and excluded categories removed
    before collecting tool names. Explicit tool names are kept even when
    their categories were excluded. The result follows ``all_tools`` order
    unless it has to be truncated to ``config.max_tools_per_request``, in
    which case explicit tools come first, then tools by category priority.

    Args:
        all_tools: The full tool manifest (left untouched)
        selected_category_ids: Target category ids
        explicit_tool_names: Tool names the user mentioned directly
        config: Selection policy
        catalog: Category catalog to resolve ids against

    Returns:
        New list of selected ToolDescriptor objects
    """
    explicit = list(explicit_tool_names)

    categories = set(selected_category_ids)
    categories.update(config.always_include_category_ids)
    categories.difference_update(config.excluded_category_ids)

    eligible = set(catalog.tool_names_for(categories))
    eligible.update(explicit)

    filtered = [tool for tool in all_tools if tool.name in eligible]

    limit = config.max_tools_per_request
    if len(filtered) > limit:
        explicit_set = set(explicit)
        # sorted() is stable, so ties keep manifest order
        filtered = sorted(
            filtered,
            key=lambda tool: (
                EXPLICIT_TOOL_RANK if tool.name in explicit_set else DEFAULT_TOOL_RANK,
                catalog.priority_of(tool.name),
            ),
        )[:max(limit, 0)]
        log.debug(f"[SELECTOR] Truncated selection to {len(filtered)} tools")

    return filtered


def _categories_for(analysis: QueryAnalysisResult, config: SelectionConfig) -> List[str]:
    categories = list(analysis.detected_category_ids)

    if not categories:
        log.debug("[SELECTOR] No categories detected, using base set")
        categories = list(FALLBACK_CATEGORY_IDS)

    for category_id in analysis.suggested_category_ids:
        if category_id not in categories:
            categories.append(category_id)

    for category_id in config.preferred_category_ids:
        if category_id not in categories:
            categories.append(category_id)

    return categories


def select_for_analysis(
    analysis: QueryAnalysisResult,
    all_tools: Sequence[ToolDescriptor],
    config: SelectionConfig = DEFAULT_SELECTION_CONFIG,
    catalog: CategoryCatalog = DEFAULT_CATALOG,
) -> SelectionOutcome:
    """Select tools for an analysis that has already been computed."""
    categories = _categories_for(analysis, config)
    selected = filter_by_categories(
        all_tools, categories, analysis.detected_tool_names, config, catalog
    )
    return SelectionOutcome(
        selected_tools=selected,
        analysis=analysis,
        used_category_ids=categories,
    )


def select_tools_for_query(
    query: str,
    all_tools: Sequence[ToolDescriptor],
    config: SelectionConfig = DEFAULT_SELECTION_CONFIG,
    catalog: Optional[CategoryCatalog] = None,
) -> SelectionOutcome:
    """
    Analyze ``query`` and select the matching tools.

    When nothing is detected the users, books and reservations categories
    are used. Suggested and preferred categories are appended after the
    detected ones.

    Example:
        >>> select_tools_for_query("stopAgent", tools).used_category_ids
        ['system']
        >>> select_tools_for_query("", tools).used_category_ids
        ['users', 'books', 'reservations']
    """
    if catalog is None:
        analysis = get_default_analyzer().analyze(query)
        catalog = DEFAULT_CATALOG
    else:
        analysis = QueryAnalyzer(catalog).analyze(query)
    return select_for_analysis(analysis, all_tools, config, catalog)


class ToolSelector:
    """
    Selection engine bound to one catalog and one default policy.

    Optionally caches query analyses, which is what the live input path
    wants since it re-analyzes on every keystroke.
    """

    def __init__(
        self,
        catalog: CategoryCatalog = DEFAULT_CATALOG,
        config: SelectionConfig = DEFAULT_SELECTION_CONFIG,
        rules: SuggestionRules = DEFAULT_SUGGESTION_RULES,
        cache_ttl: Optional[float] = None,
    ):
        self.catalog = catalog
        self.config = config
        self.analyzer = QueryAnalyzer(catalog, rules)
        self.cache = AnalysisCache(ttl=cache_ttl) if cache_ttl else None

    def analyze(self, query: str) -> QueryAnalysisResult:
        if self.cache is None:
            return self.analyzer.analyze(query)

        cached = self.cache.get(query)
        if cached is not None:
            log.debug(f"[CACHE] Analysis hit for {query[:50]!r}")
            return cached

        result = self.analyzer.analyze(query)
        self.cache.put(query, result)
        return result

    def select(
        self,
        query: str,
        all_tools: Sequence[ToolDescriptor],
        config: Optional[SelectionConfig] = None,
    ) -> SelectionOutcome:
        return select_for_analysis(
            self.analyze(query), all_tools, config or self.config, self.catalog
        )

    def filter(
        self,
        all_tools: Sequence[ToolDescriptor],
        category_ids: Iterable[str],
        explicit_tool_names: Iterable[str] = (),
        config: Optional[SelectionConfig] = None,
    ) -> List[ToolDescriptor]:
        return filter_by_categories(
            all_tools, category_ids, explicit_tool_names, config or self.config, self.catalog
        )

    def usage_stats(
        self,
        selected: Sequence[ToolDescriptor],
        all_tools: Sequence[ToolDescriptor],
    ) -> UsageStats:
        return compute_usage_stats(selected, all_tools, self.catalog)

    def summarize(self, outcome: SelectionOutcome, all_tools: Sequence[ToolDescriptor]) -> str:
        """Human-readable summary of a selection."""
        stats = self.usage_stats(outcome.selected_tools, all_tools)
        return build_selection_summary(
            outcome.analysis or QueryAnalysisResult(),
            outcome.used_category_ids,
            stats,
            self.catalog,
        )

    def clear_cache(self):
        if self.cache is not None:
            self.cache.clear()
            log.info("[CACHE] Analysis cache cleared")
