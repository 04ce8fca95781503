"""FastAPI application with lifespan, error mapping and router mounting.

Run with ``uvicorn stocktake.api.app:create_app --factory``.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from stocktake.api.routes import health, inventory
from stocktake.core.config import AppSettings
from stocktake.core.exceptions import CsvReadError, ParseError, ReportNotFoundError, StoreError
from stocktake.core.logging_config import configure_logging, get_logger
from stocktake.core.protocols import IReportStore
from stocktake.persistence import create_store

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging for the serving process."""
    settings: AppSettings = app.state.settings
    configure_logging(settings.log_level, json=settings.log_json)
    logger.info("app_started", environment=settings.environment, storage=settings.storage.backend)
    yield


async def _parse_error_handler(request: Request, exc: ParseError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"detail": str(exc), "line": exc.line, "reason": exc.reason},
    )


async def _csv_error_handler(request: Request, exc: CsvReadError) -> JSONResponse:
    return JSONResponse(status_code=422, content={"detail": str(exc)})


async def _not_found_handler(request: Request, exc: ReportNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": "File not found"})


async def _store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    logger.error("store_failed", error=str(exc))
    return JSONResponse(status_code=500, content={"detail": str(exc)})


def create_app(
    settings: AppSettings | None = None, store: IReportStore | None = None
) -> FastAPI:
    """Create and configure the FastAPI application.

    Settings and the report store are resolved once here and shared with
    handlers through ``app.state``.
    """
    settings = settings or AppSettings()
    app = FastAPI(
        title="Stocktake Inventory Summarizer",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store if store is not None else create_store(settings)

    app.add_exception_handler(ParseError, _parse_error_handler)
    app.add_exception_handler(CsvReadError, _csv_error_handler)
    app.add_exception_handler(ReportNotFoundError, _not_found_handler)
    app.add_exception_handler(StoreError, _store_error_handler)

    app.include_router(health.router)
    app.include_router(inventory.router)
    return app
