"""
Data models for tool selection.

Defines the records that flow through the selection pipeline. Tool and
category records are immutable; per-query results are built fresh on
every call.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

HTTP_METHODS = ("GET", "POST", "PUT", "DELETE")


@dataclass(frozen=True)
class ToolDescriptor:
    """One invocable backend capability offered to the completion API."""

    name: str
    description: str = ""
    parameters: Any = field(default=None, compare=False)
    http_method: Optional[str] = None
    http_endpoint: Optional[str] = None

    def to_completion_tool(self) -> Dict[str, Any]:
        """Render as an OpenAI-style function tool."""
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.parameters if self.parameters is not None else {
                    "type": "object",
                    "properties": {},
                },
            },
        }


@dataclass(frozen=True)
class Category:
    """A named grouping of tools with trigger keywords and a priority."""

    id: str
    display_name: str
    icon: str
    description: str
    keywords: Tuple[str, ...]
    priority: int  # 1 (highest) .. 5 (lowest)
    tool_names: Tuple[str, ...]

    def __repr__(self) -> str:
        return (
            f"Category(id={self.id}, priority={self.priority}, "
            f"keywords={len(self.keywords)}, tools={len(self.tool_names)})"
        )


@dataclass(frozen=True)
class SelectionConfig:
    """
    Run-time selection policy.

    Never mutated in place; derive overrides with ``dataclasses.replace``.
    ``contextual_selection_enabled`` is carried through but gates nothing.
    """

    max_tools_per_request: int = 15
    always_include_category_ids: Tuple[str, ...] = ("system",)
    contextual_selection_enabled: bool = True
    preferred_category_ids: Tuple[str, ...] = ()
    excluded_category_ids: Tuple[str, ...] = ()


@dataclass
class QueryAnalysisResult:
    """Result of scoring one query against the catalog."""

    detected_category_ids: List[str] = field(default_factory=list)
    detected_tool_names: List[str] = field(default_factory=list)
    confidence_by_category: Dict[str, float] = field(default_factory=dict)
    suggested_category_ids: List[str] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not (self.detected_category_ids or self.detected_tool_names
                    or self.confidence_by_category or self.suggested_category_ids)

    def copy(self) -> "QueryAnalysisResult":
        """Independent copy; the lists and the confidence map are not shared."""
        return QueryAnalysisResult(
            detected_category_ids=list(self.detected_category_ids),
            detected_tool_names=list(self.detected_tool_names),
            confidence_by_category=dict(self.confidence_by_category),
            suggested_category_ids=list(self.suggested_category_ids),
        )

    def __repr__(self) -> str:
        return (
            f"QueryAnalysisResult(detected={self.detected_category_ids}, "
            f"tools={self.detected_tool_names}, "
            f"suggested={self.suggested_category_ids})"
        )


@dataclass
class SelectionOutcome:
    """Tools chosen for one query plus the analysis behind them."""

    selected_tools: List[ToolDescriptor]
    analysis: Optional[QueryAnalysisResult]
    used_category_ids: List[str]

    @property
    def selected_names(self) -> List[str]:
        return [tool.name for tool in self.selected_tools]

    def __repr__(self) -> str:
        return (
            f"SelectionOutcome(selected={len(self.selected_tools)}, "
            f"categories={self.used_category_ids})"
        )


@dataclass
class UsageStats:
    """How much of the tool universe a selection kept."""

    total_tools: int
    selected_count: int
    reduction_percentage: int
    categories_used: List[str]
    efficiency_score: int = 0
