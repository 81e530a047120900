"""Error Handlers — verifies catalog-specific log fields on handled errors.

Tests:
    - Integrity errors carry record_kind / missing_key into the log record
    - Lookup errors carry resource_type / resource_id and the request path
    - Unset fields are omitted (JSONFormatter only prints what is present)
"""

import logging

from catalog.api.error_handlers import catalog_log_extra
from catalog.core.errors import (
    CatalogLoadError, ReferentialIntegrityError, ResourceNotFoundError,
)


def test_integrity_error_extra_names_missing_reference():
    exc = ReferentialIntegrityError("category", 42, "product id=9")
    assert catalog_log_extra(exc) == {
        "error_code": "REFERENTIAL_INTEGRITY",
        "record_kind": "category",
        "missing_key": 42,
    }


def test_load_error_extra_names_source_file():
    exc = CatalogLoadError("invalid JSON", "users.json")
    extra = catalog_log_extra(exc)
    assert extra["source"] == "users.json"
    assert "record_kind" not in extra


def test_not_found_extra_includes_path_and_resource():
    exc = ResourceNotFoundError("Product", "9999")
    extra = catalog_log_extra(exc, "/api/v1/products/9999")
    assert extra == {
        "error_code": "RESOURCE_NOT_FOUND",
        "path": "/api/v1/products/9999",
        "resource_type": "Product",
        "resource_id": "9999",
    }


async def test_handled_404_logs_resource_fields(client, caplog):
    with caplog.at_level(logging.WARNING, logger="catalog.api.error_handlers"):
        res = await client.get("/api/v1/products/9999")
    assert res.status_code == 404
    record = next(
        r for r in caplog.records if r.name == "catalog.api.error_handlers"
    )
    assert record.levelno == logging.WARNING
    assert record.resource_type == "Product"
    assert record.resource_id == "9999"
    assert record.path == "/api/v1/products/9999"
