"""Users — owners listed in the filter tabs, in source order."""

from fastapi import APIRouter, Depends

from catalog.core.join_catalog import CatalogIndex
from catalog.infrastructure.catalog_loader import get_catalog
from catalog.schemas.catalog import UserResponse

router = APIRouter(prefix="/api/v1/users", tags=["users"])


@router.get("", response_model=list[UserResponse])
async def list_users(index: CatalogIndex = Depends(get_catalog)):
    return [UserResponse.model_validate(u) for u in index.users]
