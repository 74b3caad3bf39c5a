"""
FastAPI Application Entry Point

This module creates and configures the HTTP binding of the bookstore
services.

Key Concepts:
=============

1. Application Factory Pattern
   - create_app() function returns configured app
   - Tests create their own instance with a test database

2. Exception Handlers
   - Domain errors from bookstore.exceptions become HTTP responses:
     NotFound -> 404, ConstraintViolation -> 422 (409 for duplicates),
     IntegrityError -> 409, InsufficientStock -> 409
   - Unexpected database errors become 500 without internal details
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from bookstore import __version__
from bookstore.config import get_settings
from bookstore.exceptions import (
    BookstoreError,
    ConstraintViolation,
    InsufficientStock,
    IntegrityError,
    NotFound,
)
from bookstore.routers import (
    authors_router,
    books_router,
    categories_router,
    customers_router,
    orders_router,
    publishers_router,
    reports_router,
    reviews_router,
)

# =============================================================================
# Logging Configuration
# =============================================================================
settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def error_status(exc: BookstoreError) -> int:
    """HTTP status code for a domain error."""
    if isinstance(exc, NotFound):
        return 404
    if isinstance(exc, (InsufficientStock, IntegrityError)):
        return 409
    if isinstance(exc, ConstraintViolation) and exc.conflict:
        return 409
    return 422


# =============================================================================
# Lifespan Events
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    # ----- STARTUP -----
    logger.info(f"Starting {settings.app_name}...")
    logger.info(f"Debug mode: {settings.debug}")
    logger.info(f"Order status transitions enforced: {settings.enforce_status_transitions}")

    yield  # Application runs here

    # ----- SHUTDOWN -----
    logger.info(f"Shutting down {settings.app_name}...")


# =============================================================================
# Application Factory
# =============================================================================
def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.app_name,
        description="""
## Bookstore API

Catalog, customers, orders and reviews of an online bookstore.

### Consistency rules
- Adding an order line takes copies out of stock and grows the order
  total in the same transaction
- An order line is refused when there are not enough copies in stock
- Books referenced by order lines cannot be deleted
        """,
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # -------------------------------------------------------------------------
    # CORS Middleware
    # -------------------------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------
    @app.exception_handler(BookstoreError)
    async def bookstore_exception_handler(
        request: Request,
        exc: BookstoreError,
    ) -> JSONResponse:
        """Convert domain errors raised by the services to HTTP responses."""
        status_code = error_status(exc)
        if status_code >= 409:
            logger.info(f"{request.method} {request.url.path} -> {status_code}: {exc.message}")
        content = {"detail": exc.message}
        if exc.details is not None:
            content["errors"] = jsonable_encoder(exc.details)
        return JSONResponse(status_code=status_code, content=content)

    @app.exception_handler(SQLAlchemyError)
    async def sqlalchemy_exception_handler(
        request: Request,
        exc: SQLAlchemyError,
    ) -> JSONResponse:
        """
        Handle SQLAlchemy database errors.

        Logs the actual error for debugging while hiding details from users.
        """
        logger.error(f"Database error: {exc}")
        return JSONResponse(
            status_code=500,
            content={
                "detail": "A database error occurred. Please try again later."
            },
        )

    # -------------------------------------------------------------------------
    # Register Routers
    # -------------------------------------------------------------------------
    api_prefix = f"/api/{settings.api_version}"

    app.include_router(publishers_router, prefix=api_prefix)
    app.include_router(authors_router, prefix=api_prefix)
    app.include_router(categories_router, prefix=api_prefix)
    app.include_router(books_router, prefix=api_prefix)
    app.include_router(customers_router, prefix=api_prefix)
    app.include_router(orders_router, prefix=api_prefix)
    app.include_router(reviews_router, prefix=api_prefix)
    app.include_router(reports_router, prefix=api_prefix)

    # -------------------------------------------------------------------------
    # Health Check Endpoint
    # -------------------------------------------------------------------------
    @app.get(
        "/health",
        tags=["Health"],
        summary="Health check",
        description="Check if the API is running and healthy.",
    )
    async def health_check() -> dict:
        return {
            "status": "healthy",
            "app": settings.app_name,
            "version": __version__,
            "environment": settings.environment,
        }

    @app.get("/", tags=["Root"], summary="API root")
    async def root() -> dict:
        """Root endpoint with API information."""
        return {
            "message": f"Welcome to {settings.app_name}",
            "version": settings.api_version,
            "docs": "/docs",
            "health": "/health",
        }

    return app


# =============================================================================
# Application Instance
# =============================================================================
# This is what uvicorn imports: uvicorn bookstore.main:app

app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "bookstore.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
