# src/inkwell/main.py
"""Main entry point for the Inkwell application."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from inkwell.api.v1 import (
    categories_router,
    comments_router,
    posts_router,
    search_router,
    tags_router,
)
from inkwell.core.settings import settings
from inkwell.services.errors import DataIntegrityError

logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="Inkwell API",
    description="Blog publishing API with threaded comments",
    version=settings.app_version,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

# Add GZip middleware for compression
app.add_middleware(GZipMiddleware)

# Include API routers
app.include_router(categories_router, prefix="/api/v1")
app.include_router(tags_router, prefix="/api/v1")
app.include_router(posts_router, prefix="/api/v1")
app.include_router(comments_router, prefix="/api/v1")
app.include_router(search_router, prefix="/api/v1")


@app.exception_handler(DataIntegrityError)
async def data_integrity_handler(request: Request, exc: DataIntegrityError) -> JSONResponse:
    """Report unrenderable posts as server errors instead of partial data."""
    logger.error("Data integrity error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Stored data is inconsistent"},
    )


@app.on_event("startup")
async def on_startup() -> None:
    logging.basicConfig(level=settings.log_level.upper())
    if settings.seed_on_startup:
        from inkwell.db.session import SessionLocal, create_tables
        from inkwell.scripts.seed import seed_database

        create_tables()
        with SessionLocal() as db:
            seed_database(db)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the service is running."""
    return {"status": "ok"}


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint with basic information about the API."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "description": "Blog publishing API with threaded comments",
        "docs": "/docs",
        "redoc": "/redoc",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("inkwell.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
