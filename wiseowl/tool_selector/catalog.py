"""
Category catalog.

Holds the fixed category taxonomy together with a reverse index from tool
name to owning categories. Built once and shared read-only by the analyzer,
selector and reporter.
"""

from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from .constants import UNOWNED_TOOL_PRIORITY
from .data.library_categories import LIBRARY_CATEGORIES
from .models import Category, SelectionConfig, ToolDescriptor


class CategoryCatalog:
    """
    Ordered, read-only collection of categories.

    A tool may belong to several categories; the reverse index keeps every
    owner in catalog order and the best (numerically lowest) owner priority.
    """

    def __init__(self, categories: Iterable[Category]):
        self._categories: Tuple[Category, ...] = tuple(categories)
        self._by_id: Dict[str, Category] = {c.id: c for c in self._categories}
        self._owners: Dict[str, Tuple[str, ...]] = {}
        self._priority: Dict[str, int] = {}
        self._build_reverse_index()

    def _build_reverse_index(self):
        owners: Dict[str, List[str]] = {}
        for category in self._categories:
            for tool_name in category.tool_names:
                owners.setdefault(tool_name, []).append(category.id)
                best = self._priority.get(tool_name)
                if best is None or category.priority < best:
                    self._priority[tool_name] = int(category.priority)
        self._owners = {name: tuple(ids) for name, ids in owners.items()}

    def __iter__(self) -> Iterator[Category]:
        return iter(self._categories)

    def __len__(self) -> int:
        return len(self._categories)

    def __contains__(self, category_id: str) -> bool:
        return category_id in self._by_id

    @property
    def categories(self) -> Tuple[Category, ...]:
        return self._categories

    @property
    def ids(self) -> List[str]:
        return [c.id for c in self._categories]

    def get(self, category_id: str) -> Optional[Category]:
        """Get category by id."""
        return self._by_id.get(category_id)

    def display_name(self, category_id: str) -> Optional[str]:
        category = self._by_id.get(category_id)
        return category.display_name if category else None

    def owners_of(self, tool_name: str) -> Tuple[str, ...]:
        """Ids of every category owning ``tool_name``, in catalog order."""
        return self._owners.get(tool_name, ())

    def priority_of(self, tool_name: str) -> int:
        """Best priority among the tool's owners, 999 when it has none."""
        return self._priority.get(tool_name, UNOWNED_TOOL_PRIORITY)

    def tool_names_for(self, category_ids: Iterable[str]) -> List[str]:
        """Union of tool names owned by the given categories, catalog order."""
        wanted = set(category_ids)
        names: List[str] = []
        seen = set()
        for category in self._categories:
            if category.id not in wanted:
                continue
            for tool_name in category.tool_names:
                if tool_name not in seen:
                    seen.add(tool_name)
                    names.append(tool_name)
        return names

    # Drift audit between the catalog and a live tool manifest

    def unknown_tool_names(self, all_tools: Iterable[ToolDescriptor]) -> List[str]:
        """Catalog tool names that the manifest does not provide."""
        available = {tool.name for tool in all_tools}
        return [
            name for name in self.tool_names_for(self.ids)
            if name not in available
        ]

    def uncategorized_tools(self, all_tools: Iterable[ToolDescriptor]) -> List[str]:
        """Manifest tool names that no category owns."""
        return [tool.name for tool in all_tools if tool.name not in self._owners]


DEFAULT_CATALOG = CategoryCatalog(LIBRARY_CATEGORIES)

DEFAULT_SELECTION_CONFIG = SelectionConfig(
    max_tools_per_request=15,
    always_include_category_ids=("system",),
    contextual_selection_enabled=True,
    preferred_category_ids=(),
    excluded_category_ids=(),
)
