"""Catalog View — pure projection of enriched products and filter state for display.

Invariants:
    - Rows appear in the order produced by the filter (no sorting)
    - Filter panel lists "All" first, then users/categories in source order
    - Exactly one user tab and at most one category button are active
    - Empty result carries NO_MATCH_MESSAGE instead of an empty table

Design Decisions:
    - Pure functions returning dicts: routes serialize them directly
    - SORTABLE_COLUMNS is metadata for the client's sort icons; no comparator
"""

from catalog.core.domain_types import ALL, EnrichedProduct, Sex
from catalog.core.filter_products import filter_with_state
from catalog.core.filter_state import FilterState
from catalog.core.join_catalog import CatalogIndex

NO_MATCH_MESSAGE = "No products matching selected criteria"
SORTABLE_COLUMNS = ("ID", "Product", "Category", "User")


def category_label(item: EnrichedProduct) -> str:
    return f"{item.category.icon} - {item.category.title}"


def user_tone(item: EnrichedProduct) -> str:
    """Colour hint for the owner's name: link for men, danger otherwise."""
    return "link" if item.user.sex == Sex.MALE else "danger"


def product_row(item: EnrichedProduct) -> dict:
    return {
        "id": item.id,
        "name": item.name,
        "category_label": category_label(item),
        "user_name": item.user.name,
        "user_tone": user_tone(item),
    }


def filter_panel(index: CatalogIndex, state: FilterState) -> dict:
    """Tabs and buttons of the filter panel with their highlight flags."""
    return {
        "query": state.query,
        "users": [
            {"name": name, "active": state.is_user_selected(name)}
            for name in [ALL, *index.user_names]
        ],
        "categories": [
            {"title": title, "active": state.is_category_selected(title)}
            for title in [ALL, *index.category_titles]
        ],
        "has_active_constraints": state.has_active_constraints,
    }


def render_catalog(index: CatalogIndex, state: FilterState) -> dict:
    """Full page payload: filters, visible rows and the no-match message."""
    visible = filter_with_state(index.enriched, state)
    return {
        "filters": filter_panel(index, state),
        "columns": list(SORTABLE_COLUMNS),
        "products": [product_row(item) for item in visible],
        "total": len(visible),
        "message": None if visible else NO_MATCH_MESSAGE,
    }
