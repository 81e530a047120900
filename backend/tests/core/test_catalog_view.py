"""Catalog View — verifies display rows, filter panel and the no-match path."""

from catalog.core.catalog_view import (
    NO_MATCH_MESSAGE, SORTABLE_COLUMNS, filter_panel, product_row, render_catalog,
)
from catalog.core.filter_state import FilterState


def test_product_row_labels(catalog_index):
    milk = catalog_index.enriched[0]
    assert product_row(milk) == {
        "id": 1,
        "name": "Milk",
        "category_label": "🍺 - Drinks",
        "user_name": "Roma",
        "user_tone": "link",
    }


def test_female_owner_gets_danger_tone(catalog_index):
    bread = catalog_index.enriched[1]
    assert product_row(bread)["user_tone"] == "danger"


def test_filter_panel_lists_all_first(catalog_index):
    panel = filter_panel(catalog_index, FilterState())
    assert [u["name"] for u in panel["users"]] == ["All", "Roma", "Anna", "Max"]
    assert [c["title"] for c in panel["categories"]] == [
        "All", "Grocery", "Drinks", "Fruits",
    ]
    assert [u["active"] for u in panel["users"]] == [True, False, False, False]
    assert [c["active"] for c in panel["categories"]] == [True, False, False, False]


def test_filter_panel_highlights_selected_category(catalog_index):
    panel = filter_panel(catalog_index, FilterState(category="Fruits"))
    active = [c["title"] for c in panel["categories"] if c["active"]]
    assert active == ["Fruits"]
    assert panel["has_active_constraints"] is True


def test_render_catalog_without_filters_shows_everything(catalog_index):
    page = render_catalog(catalog_index, FilterState())
    assert page["total"] == 5
    assert page["message"] is None
    assert page["columns"] == list(SORTABLE_COLUMNS)


def test_render_catalog_filters_rows(catalog_index):
    page = render_catalog(catalog_index, FilterState(category="Grocery"))
    assert [p["name"] for p in page["products"]] == ["Bread", "Sugar"]


def test_render_catalog_no_match_message(catalog_index):
    page = render_catalog(catalog_index, FilterState(query="zzz"))
    assert page["products"] == []
    assert page["total"] == 0
    assert page["message"] == NO_MATCH_MESSAGE


def test_lowercase_selection_highlights_matching_tab_and_button(catalog_index):
    """Highlighting follows the filter's case-insensitive match."""
    page = render_catalog(catalog_index, FilterState(user="max", category="fruits"))
    panel = page["filters"]
    assert [p["name"] for p in page["products"]] == ["Apple", "Banana"]
    assert [u["name"] for u in panel["users"] if u["active"]] == ["Max"]
    assert [c["title"] for c in panel["categories"] if c["active"]] == ["Fruits"]
