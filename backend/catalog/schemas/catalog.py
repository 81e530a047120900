"""Catalog Schemas — Pydantic models for the static collections and API responses.

Invariants:
    - Record schemas accept the camelCase keys of the source files (categoryId, ownerId)
    - Names and titles are non-empty; ids are positive ints
    - to_domain() is the only way records cross into core/

Design Decisions:
    - Field aliases over renaming the files: source data stays as delivered
    - extra="forbid" on records: a typo in a key fails loading instead of being dropped
"""

from pydantic import BaseModel, ConfigDict, Field

from catalog.core.domain_types import (
    Category, CategoryId, EnrichedProduct, Product, ProductId, Sex, User, UserId,
)


class UserRecord(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: int = Field(gt=0)
    name: str = Field(min_length=1)
    sex: Sex

    def to_domain(self) -> User:
        return User(id=UserId(self.id), name=self.name, sex=self.sex)


class CategoryRecord(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    id: int = Field(gt=0)
    title: str = Field(min_length=1)
    icon: str = ""
    owner_id: int = Field(alias="ownerId")

    def to_domain(self) -> Category:
        return Category(
            id=CategoryId(self.id), title=self.title,
            icon=self.icon, owner_id=UserId(self.owner_id),
        )


class ProductRecord(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    id: int = Field(gt=0)
    name: str = Field(min_length=1)
    category_id: int = Field(alias="categoryId")

    def to_domain(self) -> Product:
        return Product(
            id=ProductId(self.id), name=self.name,
            category_id=CategoryId(self.category_id),
        )


# --- Responses ---------------------------------------------------------------

class UserResponse(BaseModel):
    """Public user data for the filter tabs."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    sex: Sex


class CategoryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    icon: str
    owner_id: int


class EnrichedProductResponse(BaseModel):
    """Product with category and owner embedded, as produced by the join."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    category_id: int
    category: CategoryResponse
    user: UserResponse

    @classmethod
    def from_domain(cls, item: EnrichedProduct) -> "EnrichedProductResponse":
        return cls.model_validate(item)
