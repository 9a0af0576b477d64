"""FastAPI application entry point for Storefront."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from storefront import __version__
from storefront.config import settings
from storefront.database import close_db, init_db

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    await init_db()
    logger.info("Connected to MongoDB database %s", settings.mongodb_database)

    yield

    await close_db()


app = FastAPI(
    title=settings.app_name,
    description="Product catalog back office with bulk CSV/JSON import",
    version=__version__,
    lifespan=lifespan,
)

# Only allow origins from the whitelist; empty list means same-origin only
if settings.cors_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["Authorization", "Content-Type"],
        max_age=600,
    )


@app.get("/health", tags=["Health"])
async def health_check() -> JSONResponse:
    """Health check endpoint."""
    return JSONResponse(
        content={
            "status": "healthy",
            "version": __version__,
            "app_name": settings.app_name,
        }
    )


from storefront.routers import import_router  # noqa: E402

app.include_router(import_router.router, prefix="/api/admin/products/import", tags=["Product Import"])
