"""Filter State — the three criteria of the catalog filter panel.

Invariants:
    - Every combination of (query, user, category) is valid
    - Transitions return a new FilterState; the original is never mutated
    - reset_all() == FilterState(); clear_query() touches only the query
    - Highlighting uses the same case-insensitive rule as filter_products

Design Decisions:
    - Frozen dataclass + dataclasses.replace: pure, deterministic, testable without mocks
    - No terminal state: the panel is a continuously re-evaluated projection
"""

from dataclasses import dataclass, replace

from catalog.core.domain_types import ALL


@dataclass(frozen=True)
class FilterState:
    """Current filter criteria — owned by the presentation layer."""

    query: str = ""
    user: str = ALL
    category: str = ALL

    @property
    def has_active_constraints(self) -> bool:
        return bool(self.query) or self.user != ALL or (
            bool(self.category) and self.category != ALL
        )

    def with_query(self, text: str) -> "FilterState":
        return replace(self, query=text)

    def clear_query(self) -> "FilterState":
        """Search field's clear button — user and category survive."""
        return replace(self, query="")

    def select_user(self, name: str) -> "FilterState":
        return replace(self, user=name)

    def select_category(self, title: str) -> "FilterState":
        return replace(self, category=title)

    def reset_all(self) -> "FilterState":
        return FilterState()

    def is_user_selected(self, name: str) -> bool:
        """Case-insensitive, like the owner filter; only the exact ALL is inactive."""
        if name == ALL or self.user == ALL:
            return self.user == name
        return self.user.lower() == name.lower()

    def is_category_selected(self, title: str) -> bool:
        category_inactive = not self.category or self.category == ALL
        if title == ALL:
            return category_inactive
        if category_inactive:
            return False
        return self.category.lower() == title.lower()
