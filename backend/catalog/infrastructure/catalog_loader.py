"""Catalog Loader — reads the static collections and runs the join once.

Invariants:
    - users.json, categories.json, products.json are read once per load
    - Every record is validated by its Pydantic schema before reaching core/
    - IO and validation failures → CatalogLoadError naming the file
    - Integrity failures from the join propagate unchanged (fail-fast)

Design Decisions:
    - TypeAdapter(list[...]) over manual loops: one validation call per file,
      error locations include the record index
    - Module-level _catalog holder set by the lifespan: single-process uvicorn,
      written once at startup, read-only afterwards
"""

import json
import logging
from pathlib import Path

from pydantic import BaseModel, TypeAdapter, ValidationError

from catalog.core.errors import CatalogLoadError, CatalogUnavailableError
from catalog.core.join_catalog import CatalogIndex
from catalog.schemas.catalog import CategoryRecord, ProductRecord, UserRecord

logger = logging.getLogger(__name__)

USERS_FILE = "users.json"
CATEGORIES_FILE = "categories.json"
PRODUCTS_FILE = "products.json"

_catalog: CatalogIndex | None = None


def read_records(path: Path, schema: type[BaseModel]) -> list:
    """Read a JSON array file and validate every element against schema."""
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise CatalogLoadError(str(e), path.name) from e
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise CatalogLoadError(f"invalid JSON ({e.msg} at line {e.lineno})", path.name) from e
    try:
        records = TypeAdapter(list[schema]).validate_python(data)
    except ValidationError as e:
        raise CatalogLoadError(
            f"{e.error_count()} invalid record(s): {e.errors()[0]['msg']}", path.name,
        ) from e
    return [r.to_domain() for r in records]


def load_catalog(data_dir: str | Path) -> CatalogIndex:
    """Load the three collections from data_dir and build the enriched index."""
    base = Path(data_dir)
    users = read_records(base / USERS_FILE, UserRecord)
    categories = read_records(base / CATEGORIES_FILE, CategoryRecord)
    products = read_records(base / PRODUCTS_FILE, ProductRecord)
    index = CatalogIndex.build(products, categories, users)
    logger.info(
        f"Catalog loaded: {len(users)} users, {len(categories)} categories, "
        f"{len(products)} products",
        extra={"source": str(base)},
    )
    return index


def init_catalog(data_dir: str | Path) -> CatalogIndex:
    """Load the catalog and publish it for get_catalog. Called from lifespan."""
    global _catalog
    _catalog = load_catalog(data_dir)
    return _catalog


def get_catalog() -> CatalogIndex:
    """FastAPI dependency — the catalog loaded at startup."""
    if _catalog is None:
        raise CatalogUnavailableError()
    return _catalog


def is_catalog_loaded() -> bool:
    return _catalog is not None
