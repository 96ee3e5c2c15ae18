"""FastAPI application entrypoint — lifespan, routers, middleware."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from app.config import get_settings
from app.middleware.logging import RequestLoggingMiddleware, configure_structured_logging
from app.routes import crops, rotation
from app.services.record_store import RotationRecordStore
from app.services.seed_loader import load_seed_records

logger = logging.getLogger("farmrotation")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application startup / shutdown lifecycle.

    Startup:
      1. Initialize structured logging
      2. Load the seed dataset into the in-memory record store

    The store lives only for the lifetime of the process; nothing is written
    back to the seed file.
    """
    configure_structured_logging()
    settings = get_settings()
    logger.info(
        "FarmRotation starting",
        extra={
            "log_level": settings.log_level,
            "seed_data_path": str(settings.seed_data_path),
        },
    )

    try:
        records = load_seed_records(settings.seed_data_path)
    except Exception as exc:
        logger.exception("startup failure", extra={"error": str(exc)})
        raise
    app.state.record_store = RotationRecordStore(records)

    yield

    logger.info("FarmRotation shutting down")


app = FastAPI(
    title="FarmRotation API",
    description=(
        "Farm operations record keeper — crop records, crop-rotation plans, "
        "and soil-health / yield analytics over harvested history."
    ),
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# ── CORS ────────────────────────────────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)


# ── Health check ────────────────────────────────────────────────────────────
@app.get("/health", tags=["system"])
async def health_check(request: Request) -> dict[str, Any]:
    """Basic health check — verifies the API process is alive."""
    store = getattr(request.app.state, "record_store", None)
    return {
        "status": "ok",
        "service": "farmrotation",
        "version": "0.1.0",
        "records": len(store) if store is not None else None,
    }


# ── Router registration ────────────────────────────────────────────────────
app.include_router(crops.router, prefix="/api/v1")
app.include_router(rotation.router, prefix="/api/v1")
