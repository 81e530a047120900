"""API test fixtures — FastAPI test client over the bundled catalog.

Invariants:
    - get_catalog dependency overridden (ASGITransport does not run lifespan)
    - Overrides cleared after each test
"""

import pytest
from httpx import ASGITransport, AsyncClient

from catalog.config import DEFAULT_DATA_DIR
from catalog.infrastructure.catalog_loader import get_catalog, load_catalog
from catalog.main import app


@pytest.fixture
def bundled_index():
    return load_catalog(DEFAULT_DATA_DIR)


@pytest.fixture
async def client(bundled_index):
    """FastAPI test client with the catalog dependency overridden."""
    app.dependency_overrides[get_catalog] = lambda: bundled_index

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
