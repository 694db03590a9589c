"""
Query analyzer.

Scores a free-text query against the category catalog: keyword phrases
weigh by their word count, tool names found verbatim weigh a flat 2, and
the total is normalized by the size of the category. A few fixed rules then
propose related categories the query did not name directly.
"""

from typing import Dict, List, Tuple

from .catalog import CategoryCatalog, DEFAULT_CATALOG
from .constants import (
    DEFAULT_SUGGESTION_RULES,
    DETECTION_THRESHOLD,
    MAX_CONFIDENCE,
    TOOL_NAME_WEIGHT,
    SuggestionRules,
)
from .models import Category, QueryAnalysisResult
from ..utils import normalize_query


class QueryAnalyzer:
    """Scores queries against one catalog with one set of suggestion rules."""

    def __init__(
        self,
        catalog: CategoryCatalog = DEFAULT_CATALOG,
        rules: SuggestionRules = DEFAULT_SUGGESTION_RULES,
    ):
        self.catalog = catalog
        self.rules = rules
        # (lowercased phrase, weight) and (lowercased name, name) per category
        self._keywords: Dict[str, List[Tuple[str, int]]] = {}
        self._tools: Dict[str, List[Tuple[str, str]]] = {}
        for category in catalog:
            self._keywords[category.id] = [
                (keyword.lower(), len(keyword.split(" ")))
                for keyword in category.keywords
            ]
            self._tools[category.id] = [
                (tool_name.lower(), tool_name) for tool_name in category.tool_names
            ]

    def analyze(self, query: str) -> QueryAnalysisResult:
        """
        Analyze a query.

        Args:
            query: Raw user input

        Returns:
            QueryAnalysisResult with detected categories sorted by
            confidence (highest first), explicitly named tools, the
            confidence map and heuristic suggestions

        Example:
            >>> QueryAnalyzer().analyze("stopAgent").detected_category_ids
            ['system']
        """
        normalized = normalize_query(query)
        result = QueryAnalysisResult()
        if not normalized:
            return result

        for category in self.catalog:
            self._score_category(category, normalized, result)

        # Stable sort keeps catalog order between equal confidences
        confidence = result.confidence_by_category
        result.detected_category_ids.sort(key=lambda cid: -confidence.get(cid, 0.0))

        result.suggested_category_ids = self._suggest_categories(
            result.detected_category_ids, normalized
        )
        return result

    def _score_category(self, category: Category, normalized: str, result: QueryAnalysisResult):
        score = 0
        match_count = 0

        for phrase, weight in self._keywords[category.id]:
            if phrase in normalized:
                score += weight
                match_count += 1

        for lowered, tool_name in self._tools[category.id]:
            if lowered in normalized:
                score += TOOL_NAME_WEIGHT
                match_count += 1
                if tool_name not in result.detected_tool_names:
                    result.detected_tool_names.append(tool_name)

        if match_count == 0:
            return

        size = len(category.keywords) + len(category.tool_names)
        confidence = min(score / size, MAX_CONFIDENCE)
        result.confidence_by_category[category.id] = confidence
        if confidence > DETECTION_THRESHOLD:
            result.detected_category_ids.append(category.id)

    def _suggest_categories(self, detected: List[str], normalized: str) -> List[str]:
        """Propose related categories from fixed cross-category rules."""
        suggestions: List[str] = []

        def suggest(category_id: str):
            if category_id not in detected and category_id not in suggestions:
                suggestions.append(category_id)

        # Reservations always involve a reader and a book
        if "reservations" in detected:
            suggest("users")
            suggest("books")

        if "users" in detected and any(term in normalized for term in self.rules.role_terms):
            suggest("roles")

        if any(word in normalized for word in self.rules.question_words):
            suggest("reports")

        return suggestions


_default_analyzer = None


def get_default_analyzer() -> QueryAnalyzer:
    """Analyzer bound to the library catalog, created on first use."""
    global _default_analyzer
    if _default_analyzer is None:
        _default_analyzer = QueryAnalyzer()
    return _default_analyzer


def analyze_query(
    query: str,
    catalog: CategoryCatalog = None,
    rules: SuggestionRules = None,
) -> QueryAnalysisResult:
    """
    Analyze ``query`` against ``catalog`` (the library catalog by default).

    Builds a throwaway analyzer when a non-default catalog or rule set is
    passed in.
    """
    if catalog is None and rules is None:
        return get_default_analyzer().analyze(query)
    analyzer = QueryAnalyzer(
        catalog if catalog is not None else DEFAULT_CATALOG,
        rules if rules is not None else DEFAULT_SUGGESTION_RULES,
    )
    return analyzer.analyze(query)
