"""Filter Products — multi-predicate narrowing of the enriched product list.

Invariants:
    - No active constraint → the input object itself is returned (no copy)
    - Active constraints combine with AND; relative order is preserved
    - Comparisons are case-insensitive per pair; no trimming of query or names
    - Total: never raises for any string and any collection, empty included

Design Decisions:
    - Criteria passed as explicit arguments, not read from shared state
    - "All" and "" both mean "no constraint" for category (category panel may send
      nothing); user filter only treats "All" as inactive, matching the tabs
"""

from collections.abc import Sequence

from catalog.core.domain_types import ALL, EnrichedProduct
from catalog.core.filter_state import FilterState


def is_active_constraint(value: str | None) -> bool:
    """True when value narrows the result (not empty, not the ALL sentinel)."""
    return bool(value) and value != ALL


def filter_products(
    items: Sequence[EnrichedProduct],
    query: str,
    user_filter: str,
    category_filter: str | None = ALL,
) -> Sequence[EnrichedProduct]:
    """Return items matching query, owner name and category title."""
    query_active = bool(query)
    user_active = user_filter != ALL
    category_active = is_active_constraint(category_filter)

    if not (query_active or user_active or category_active):
        return items

    prepared_query = query.lower()
    prepared_user = user_filter.lower()
    prepared_category = category_filter.lower() if category_active else None

    return [
        item for item in items
        if (not query_active or prepared_query in item.name.lower())
        and (not user_active or item.user.name.lower() == prepared_user)
        and (prepared_category is None
             or item.category.title.lower() == prepared_category)
    ]


def filter_with_state(
    items: Sequence[EnrichedProduct], state: FilterState,
) -> Sequence[EnrichedProduct]:
    return filter_products(items, state.query, state.user, state.category)
