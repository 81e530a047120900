"""Categories — buttons of the category filter, in source order."""

from fastapi import APIRouter, Depends

from catalog.core.join_catalog import CatalogIndex
from catalog.infrastructure.catalog_loader import get_catalog
from catalog.schemas.catalog import CategoryResponse

router = APIRouter(prefix="/api/v1/categories", tags=["categories"])


@router.get("", response_model=list[CategoryResponse])
async def list_categories(index: CatalogIndex = Depends(get_catalog)):
    return [CategoryResponse.model_validate(c) for c in index.categories]
