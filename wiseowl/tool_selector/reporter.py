"""
Usage reporting for tool selections.

Diagnostic numbers and the one-line summary shown in expert mode.
"""

import math
from typing import Iterable, Sequence

from .catalog import CategoryCatalog, DEFAULT_CATALOG
from .constants import (
    EFFICIENCY_PER_CATEGORY,
    MAX_EFFICIENCY,
    SUMMARY_DETECTED,
    SUMMARY_EXPLICIT_TOOLS,
    SUMMARY_NOTHING_DETECTED,
    SUMMARY_TAIL,
)
from .models import QueryAnalysisResult, ToolDescriptor, UsageStats


def compute_usage_stats(
    selected: Sequence[ToolDescriptor],
    all_tools: Sequence[ToolDescriptor],
    catalog: CategoryCatalog = DEFAULT_CATALOG,
) -> UsageStats:
    """
    Measure a selection against the full manifest.

    ``categories_used`` is recomputed from the selected names, so it can
    differ from the categories that were requested once truncation dropped
    some tools.
    """
    selected_names = {tool.name for tool in selected}
    categories_used = [
        category.id for category in catalog
        if any(name in selected_names for name in category.tool_names)
    ]

    total = len(all_tools)
    # Half-up rounding: 62.5 reports as 63
    reduction = math.floor((1 - len(selected) / total) * 100 + 0.5) if total > 0 else 0

    return UsageStats(
        total_tools=total,
        selected_count=len(selected),
        reduction_percentage=reduction,
        categories_used=categories_used,
        efficiency_score=min(MAX_EFFICIENCY, reduction + len(categories_used) * EFFICIENCY_PER_CATEGORY),
    )


def _display_names(category_ids: Iterable[str], catalog: CategoryCatalog) -> str:
    names = (catalog.display_name(cid) for cid in category_ids)
    return ", ".join(name for name in names if name)


def build_selection_summary(
    analysis: QueryAnalysisResult,
    used_category_ids: Iterable[str],
    stats: UsageStats,
    catalog: CategoryCatalog = DEFAULT_CATALOG,
) -> str:
    """Compose the human-readable selection summary sentence."""
    if analysis.detected_category_ids:
        detected = SUMMARY_DETECTED.format(
            names=_display_names(analysis.detected_category_ids, catalog)
        )
    else:
        detected = SUMMARY_NOTHING_DETECTED

    explicit = ""
    if analysis.detected_tool_names:
        explicit = SUMMARY_EXPLICIT_TOOLS.format(names=", ".join(analysis.detected_tool_names))

    tail = SUMMARY_TAIL.format(
        selected=stats.selected_count,
        total=stats.total_tools,
        reduction=stats.reduction_percentage,
        categories=_display_names(used_category_ids, catalog),
    )
    return f"{detected}{explicit}{tail}"
