"""
Shared fixtures for tool selector tests.
"""

import pytest

from wiseowl.tool_selector import Category, CategoryCatalog, DEFAULT_CATALOG, ToolDescriptor


def make_tools(*names):
    """Build bare descriptors for the given tool names."""
    return [ToolDescriptor(name=name, description=f"{name} tool") for name in names]


def make_category(category_id, keywords=(), tools=(), priority=1, display_name=None):
    return Category(
        id=category_id,
        display_name=display_name or category_id.title(),
        icon="",
        description="",
        keywords=tuple(keywords),
        priority=priority,
        tool_names=tuple(tools),
    )


@pytest.fixture
def library_tools():
    """One descriptor per tool the library catalog knows about, catalog order."""
    return make_tools(*DEFAULT_CATALOG.tool_names_for(DEFAULT_CATALOG.ids))


@pytest.fixture
def small_catalog():
    """Five single-keyword categories; a keyword hit scores 0.5."""
    return CategoryCatalog([
        make_category("users", ["читатель"], ["getAllUsers"]),
        make_category("books", ["книга"], ["getAllBooks"]),
        make_category("reservations", ["бронь"], ["getAllReservations"]),
        make_category("roles", ["роль"], ["getAllRoles"], priority=3),
        make_category("reports", ["отчет"], ["getUserStatistics"], priority=2),
    ])
