"""Inventory upload form, upload and report download endpoints."""

from __future__ import annotations

import io
from typing import Any

from fastapi import APIRouter, Depends, File, HTTPException, Response, UploadFile
from fastapi.responses import HTMLResponse
from starlette.concurrency import run_in_threadpool

from stocktake.api.dependencies import get_pipeline, get_settings, get_store
from stocktake.core.config import AppSettings
from stocktake.core.logging_config import get_logger
from stocktake.core.protocols import IReportStore
from stocktake.ingest.csv_io import write_products
from stocktake.ingest.pipeline import InventoryPipeline
from stocktake.models.report import InventoryReport

logger = get_logger(__name__)

router = APIRouter(tags=["inventory"])

UPLOAD_FORM = """<!DOCTYPE html>
<html>
<head><title>Stocktake</title></head>
<body>
<h1>Upload inventory CSV</h1>
<form action="/upload" method="post" enctype="multipart/form-data">
<input type="file" name="csvfile" accept=".csv,text/csv" required>
<button type="submit">Summarize</button>
</form>
<p><a href="/download">Download last summary</a></p>
</body>
</html>
"""


def _summarize_and_store(
    data: bytes, pipeline: InventoryPipeline, store: IReportStore, settings: AppSettings
) -> InventoryReport:
    """Run the pipeline over uploaded bytes and persist the CSV report."""
    report = pipeline.process_stream(io.BytesIO(data))
    name = settings.storage.report_filename
    location = store.write(name, write_products(report.products, delimiter=settings.ingest.delimiter))
    logger.info("report_stored", location=location, products=len(report.products))
    return report


@router.get("/", response_class=HTMLResponse)
async def home() -> str:
    """Render the upload form."""
    return UPLOAD_FORM


@router.post("/upload")
async def upload(
    csvfile: UploadFile = File(...),
    settings: AppSettings = Depends(get_settings),
    store: IReportStore = Depends(get_store),
    pipeline: InventoryPipeline = Depends(get_pipeline),
) -> dict[str, Any]:
    """Summarize an uploaded inventory CSV and store the sorted report."""
    limit = settings.api.max_upload_bytes
    try:
        data = await csvfile.read(limit + 1)
    finally:
        await csvfile.close()
    if len(data) > limit:
        raise HTTPException(status_code=413, detail=f"Upload exceeds {limit} bytes")

    # parsing is CPU-bound and the local store writes to disk
    report = await run_in_threadpool(_summarize_and_store, data, pipeline, store, settings)

    return {
        "products": [p.model_dump() for p in report.products],
        "skipped": [s.model_dump() for s in report.skipped],
        "rows_read": report.rows_read,
        "total_quantity": report.total_quantity,
    }


@router.get("/download")
async def download(
    settings: AppSettings = Depends(get_settings),
    store: IReportStore = Depends(get_store),
) -> Response:
    """Serve the most recent summary report as a CSV attachment."""
    name = settings.storage.report_filename
    content = await run_in_threadpool(store.read, name)
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": f"attachment; filename={name}"},
    )
