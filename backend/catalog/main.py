"""Catalog Browser API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CatalogError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Catalog loaded and joined once on startup via lifespan context manager
    - A catalog that fails to load or join aborts startup (never serve a partial table)

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - Three error handler layers: CatalogError (domain), RequestValidationError
      (Pydantic), Exception (catch-all) — never leaks internal details
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from catalog.api.error_handlers import catalog_log_extra, register_error_handlers
from catalog.api.routes import categories, health, products, users
from catalog.config import get_settings
from catalog.core.errors import CatalogError
from catalog.infrastructure.catalog_loader import init_catalog
from catalog.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    try:
        init_catalog(settings.catalog_data_dir)
    except CatalogError as e:
        logger.critical(
            f"Catalog failed to load: {e.message}",
            extra=catalog_log_extra(e),
        )
        raise
    logger.info("Catalog Browser API started")
    yield
    logger.info("Catalog Browser API shutting down")


app = FastAPI(
    title="Catalog Browser API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(products.router)
app.include_router(users.router)
app.include_router(categories.router)

register_error_handlers(app)
