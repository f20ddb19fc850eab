# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from intranet import __version__
from intranet.config import get_settings
from intranet.database import SessionLocal
from intranet.schemas.common import HealthResponse
from intranet.services import auth_service, seed_service
from intranet.store import (
    DocumentNotFoundError,
    SqlDocumentStore,
    StoreError,
    change_feed,
)

logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown events."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    if settings.run_bootstrap_on_startup:
        logger.info("Running bootstrap...")
        db = SessionLocal()
        try:
            store = SqlDocumentStore(db, change_feed)
            seed_service.run_bootstrap(store)
            removed = auth_service.cleanup_expired_sessions(store)
            logger.info(f"Removed {removed} expired sessions")
        except StoreError:
            logger.exception("Session cleanup failed")
        finally:
            db.close()

    yield

    logger.info("Shutting down...")


app = FastAPI(
    title=settings.app_name,
    description="Intranet of the federal police department",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(DocumentNotFoundError)
async def document_not_found_handler(
    request: Request, exc: DocumentNotFoundError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": str(exc)},
    )


@app.exception_handler(StoreError)
async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    """Storage failures leave no partial state; the client may retry."""
    logger.error(f"Store error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Speichern fehlgeschlagen, bitte erneut versuchen."},
    )


@app.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(status="healthy")


# Import and include API router after app is created
from intranet.api.v1.router import api_router  # noqa: E402

app.include_router(api_router, prefix="/api/v1")
