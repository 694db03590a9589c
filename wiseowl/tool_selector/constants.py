"""
Constants and configuration for tool selection.

Centralizes thresholds, weights and the heuristic word lists used by the
query analyzer, so they can be swapped or localized without touching the
algorithms.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple


class CategoryPriority(IntEnum):
    """
    Category priority levels.

    Lower values win when a selection has to be truncated.
    """
    CRITICAL = 1    # Core domain and system control
    HIGH = 2        # Reports and analytics
    MEDIUM = 3      # Roles and permissions
    LOW = 4         # Notifications
    FALLBACK = 5    # History, navigation


# Scoring
DETECTION_THRESHOLD = 0.1   # Confidence must be strictly above this
TOOL_NAME_WEIGHT = 2        # Flat weight for a tool name found in the query
MAX_CONFIDENCE = 1.0

# Truncation ordering
EXPLICIT_TOOL_RANK = -100
DEFAULT_TOOL_RANK = 0
UNOWNED_TOOL_PRIORITY = 999

# Used when nothing in the query matched
FALLBACK_CATEGORY_IDS = ("users", "books", "reservations")


@dataclass(frozen=True)
class SuggestionRules:
    """Word lists behind the cross-category suggestion heuristics."""

    role_terms: Tuple[str, ...] = ("роль", "права", "администратор")
    question_words: Tuple[str, ...] = (
        "сколько", "какой", "какая", "какие", "где", "когда",
        "статистика", "отчет", "график",
    )


DEFAULT_SUGGESTION_RULES = SuggestionRules()


# Summary sentence templates
SUMMARY_DETECTED = "Обнаружены категории: {names}"
SUMMARY_NOTHING_DETECTED = "Категории не обнаружены, используется базовый набор"
SUMMARY_EXPLICIT_TOOLS = " (включая конкретные инструменты: {names})"
SUMMARY_TAIL = (
    ". Отправлено {selected} из {total} инструментов "
    "({reduction}% экономии). Активные категории: {categories}."
)

# Efficiency score
EFFICIENCY_PER_CATEGORY = 5
MAX_EFFICIENCY = 100

# Analysis cache
ANALYSIS_CACHE_TTL = 30 * 60  # Seconds (30 minutes)
ANALYSIS_CACHE_MAX_ENTRIES = 100

# Command completion
MAX_COMMAND_SUGGESTIONS = 5
