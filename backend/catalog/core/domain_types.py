"""Domain Types — catalog records and rich types that replace bare primitives.

Invariants:
    - UserId, CategoryId, ProductId wrap ints — foreign keys compare by identity value
    - Records are frozen: base collections and enriched products are never mutated
    - EnrichedProduct embeds Category and User by value (snapshot, not a live link)
    - ALL is the single "no constraint" sentinel for user and category filters

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - Frozen dataclasses over pydantic in core: no IO, no validation at this layer
      (validation happens once at the boundary, see schemas/catalog.py)
    - str Enum for Sex: serializes to JSON without custom encoders
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)
CategoryId = NewType("CategoryId", int)
ProductId = NewType("ProductId", int)


# ─── Constants ───────────────────────────────────────────────────

ALL = "All"


# ─── Enums ───────────────────────────────────────────────────────

class Sex(str, Enum):
    """Binary display attribute of a user — drives the name colour only."""
    MALE = "m"
    FEMALE = "f"


class RecordKind(str, Enum):
    """Collections that take part in the join — named in integrity errors."""
    USER = "user"
    CATEGORY = "category"
    PRODUCT = "product"


# ─── Records ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class User:
    id: UserId
    name: str
    sex: Sex


@dataclass(frozen=True)
class Category:
    id: CategoryId
    title: str
    icon: str
    owner_id: UserId


@dataclass(frozen=True)
class Product:
    id: ProductId
    name: str
    category_id: CategoryId


@dataclass(frozen=True)
class EnrichedProduct:
    """Product with its category and owning user embedded at join time."""
    id: ProductId
    name: str
    category_id: CategoryId
    category: Category
    user: User
