"""Products — filtered catalog view and single-product lookup.

Invariants:
    - Filter criteria arrive as query parameters; nothing is stored server-side
    - Defaults (query="", user="All", category="All") return the full catalog
    - Unknown product id → 404 via ResourceNotFoundError
"""

import logging

from fastapi import APIRouter, Depends, Query

from catalog.core.catalog_view import render_catalog
from catalog.core.domain_types import ALL, ProductId
from catalog.core.errors import ResourceNotFoundError
from catalog.core.filter_state import FilterState
from catalog.core.join_catalog import CatalogIndex
from catalog.infrastructure.catalog_loader import get_catalog
from catalog.schemas.catalog import EnrichedProductResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/products", tags=["products"])


@router.get("")
async def list_products(
    query: str = Query("", description="Case-insensitive name substring"),
    user: str = Query(ALL, description="Owner name or 'All'"),
    category: str = Query(ALL, description="Category title or 'All'"),
    index: CatalogIndex = Depends(get_catalog),
):
    """Visible products for the given criteria, plus the filter panel state."""
    state = FilterState(query=query, user=user, category=category)
    page = render_catalog(index, state)
    logger.debug(
        "Catalog filtered",
        extra={
            "query": query, "user_filter": user,
            "category_filter": category, "result_count": page["total"],
        },
    )
    return page


@router.get("/{product_id}", response_model=EnrichedProductResponse)
async def get_product(
    product_id: int, index: CatalogIndex = Depends(get_catalog),
):
    """One enriched product with its category and owner embedded."""
    item = index.find_product(ProductId(product_id))
    if item is None:
        raise ResourceNotFoundError("Product", str(product_id))
    return EnrichedProductResponse.from_domain(item)
