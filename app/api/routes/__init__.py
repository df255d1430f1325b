"""API routes module."""

from app.api.routes.attributes import router as attributes_router
from app.api.routes.brands import router as brands_router
from app.api.routes.bulk import router as bulk_router
from app.api.routes.catalog import router as catalog_router
from app.api.routes.categories import router as categories_router
from app.api.routes.health import router as health_router
from app.api.routes.settings import router as settings_router

__all__ = [
    "attributes_router",
    "brands_router",
    "bulk_router",
    "catalog_router",
    "categories_router",
    "health_router",
    "settings_router",
]
