"""FastAPI application entry point.

VUFS taxonomy service: category and brand trees, flat vocabularies,
attribute matrix, bulk import and global settings.
"""

import time
from contextlib import asynccontextmanager
from http import HTTPStatus
from typing import Any, AsyncGenerator
from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app import __version__
from app.config import settings
from app.core.errors import TaxonomyError
from app.infra.database import close_db_engine, create_schema, verify_db_connection
from app.infra.logging import (
    bind_request_context,
    clear_request_context,
    get_logger,
    setup_logging,
)
from app.schemas.common import ErrorResponse

# Import routers
from app.api.routes import (
    attributes_router,
    brands_router,
    bulk_router,
    catalog_router,
    categories_router,
    health_router,
    settings_router,
)

# Setup logging first
setup_logging()
logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

# Documented on every taxonomy route; bodies are always the error envelope
ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    status_code: {"model": ErrorResponse} for status_code in (400, 404, 409, 500)
}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler.

    Startup:
    - Create missing tables (when enabled)
    - Verify database connection

    Shutdown:
    - Close database connections
    """
    logger.info(
        "VUFS taxonomy service starting",
        environment=settings.environment,
        api_prefix=settings.api_prefix,
    )

    if settings.create_schema_on_startup:
        try:
            await create_schema()
        except Exception as e:
            logger.warning("Schema creation failed", error=str(e))

    db_ok = await verify_db_connection()
    if not db_ok:
        logger.warning("Database connection failed - will retry on first request")

    yield

    logger.info("VUFS taxonomy service shutting down")
    await close_db_engine()
    logger.info("Cleanup complete")


# Create FastAPI app
app = FastAPI(
    title="VUFS Taxonomy Service",
    description="Hierarchical fashion taxonomy: categories, brands, attributes and vocabularies",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs" if settings.environment == "dev" else None,
    redoc_url=None,
)

# CORS middleware (mainly for local development)
if settings.environment == "dev":
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Bind a request id to every log line and log the request outcome."""
    request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex
    bind_request_context(
        request_id=request_id,
        method=request.method,
        path=request.url.path,
    )

    start_time = time.perf_counter()
    try:
        try:
            response = await call_next(request)
        except Exception as exc:
            # Rendered here rather than by the outer error middleware so the
            # 500 still carries the request id
            response = await global_exception_handler(request, exc)

        response.headers[REQUEST_ID_HEADER] = request_id
        logger.info(
            "Request completed",
            status_code=response.status_code,
            duration_ms=int((time.perf_counter() - start_time) * 1000),
        )
        return response
    finally:
        clear_request_context()


# =============================================================================
# Exception Handlers
# =============================================================================


def _error_response(status_code: int, code: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": {"code": code, "message": message}},
    )


@app.exception_handler(TaxonomyError)
async def taxonomy_error_handler(request: Request, exc: TaxonomyError) -> JSONResponse:
    """Render domain errors with their own status and code."""
    log = logger.error if exc.status_code >= 500 else logger.info
    log(
        "Request failed",
        error_code=exc.code,
        error=exc.message,
        status_code=exc.status_code,
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """Schema failures answer 400; absent required input is MISSING_FIELDS."""
    errors = exc.errors()
    code = (
        "MISSING_FIELDS"
        if errors and all(err.get("type") == "missing" for err in errors)
        else "VALIDATION_ERROR"
    )
    message = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()) if part != 'body')}: {err.get('msg')}"
        for err in errors
    )
    logger.info("Request validation failed", error_code=code, errors=len(errors))
    return _error_response(400, code, message or "Invalid request")


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException,
) -> JSONResponse:
    try:
        code = HTTPStatus(exc.status_code).name
    except ValueError:
        code = "HTTP_ERROR"
    return _error_response(exc.status_code, code, str(exc.detail))


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle uncaught exceptions.

    The client gets a generic message; the raw error is only logged.
    """
    logger.error(
        "Unhandled exception",
        error=str(exc),
        error_type=type(exc).__name__,
        path=request.url.path,
        exc_info=True,
    )
    return _error_response(500, "INTERNAL_SERVER_ERROR", "An unexpected error occurred")


# =============================================================================
# Include Routers
# =============================================================================

app.include_router(health_router, tags=["Health"])

for _router, _path, _tags in (
    (categories_router, "/categories", ["Categories"]),
    (brands_router, "/brands", ["Brands"]),
    (catalog_router, "", None),
    (attributes_router, "", ["Attributes"]),
    (bulk_router, "", ["Bulk"]),
    (settings_router, "/settings", ["Settings"]),
):
    app.include_router(
        _router,
        prefix=f"{settings.api_prefix}{_path}",
        tags=_tags,
        responses=ERROR_RESPONSES,
    )


# =============================================================================
# Root Endpoint
# =============================================================================


@app.get("/")
async def root() -> dict:
    """Root endpoint - basic service info."""
    return {
        "service": "VUFS Taxonomy Service",
        "version": __version__,
        "environment": settings.environment,
    }
