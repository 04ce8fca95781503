"""API tests for the upload form, upload, download and health endpoints."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile

from stocktake.api.app import create_app
from stocktake.core.config import ApiConfig, AppSettings, StorageConfig
from tests.fakes import MemoryReportStore

SAMPLE = (
    b"Code,Quantity,Location\n"
    b"A1,3,B1 2\n"
    b"A1,5,B1 2\n"
    b"???\n"
    b"B2,1,A1 9\n"
)


@pytest.fixture
def store():
    return MemoryReportStore()


@pytest.fixture
def settings():
    return AppSettings(storage=StorageConfig(backend="memory"))


@pytest.fixture
def client(settings, store):
    with TestClient(create_app(settings=settings, store=store)) as c:
        yield c


def _upload(client, data: bytes):
    return client.post("/upload", files={"csvfile": ("stock.csv", data, "text/csv")})


@pytest.fixture
def events(monkeypatch):
    """Record upload closes and work handed to the thread pool, in order."""
    seen: list[str] = []
    original_close = UploadFile.close

    async def close(self):
        seen.append("close")
        await original_close(self)

    async def in_threadpool(func, *args, **kwargs):
        seen.append(f"threadpool:{func.__name__}")
        return await run_in_threadpool(func, *args, **kwargs)

    monkeypatch.setattr(UploadFile, "close", close)
    monkeypatch.setattr("stocktake.api.routes.inventory.run_in_threadpool", in_threadpool)
    return seen


class TestHealth:
    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}

    def test_ready_reports_storage(self, client):
        assert client.get("/ready").json() == {"status": "ready", "storage": "memory"}


class TestUpload:
    def test_returns_summary(self, client):
        resp = _upload(client, SAMPLE)
        assert resp.status_code == 200
        body = resp.json()
        assert body["products"] == [
            {"code": "B2", "quantity": 1, "bay": "A1", "shelf": 9},
            {"code": "A1", "quantity": 8, "bay": "B1", "shelf": 2},
        ]
        assert body["total_quantity"] == 9
        assert body["rows_read"] == 4
        assert [s["line"] for s in body["skipped"]] == [4]

    def test_stores_report(self, client, store):
        _upload(client, SAMPLE)
        assert store.read("sorted_products.csv") == (
            b"Code,Quantity,Location\nB2,1,A1 9\nA1,8,B1 2\n"
        )

    def test_parse_error_is_actionable(self, client, store):
        resp = _upload(client, b"Code,Quantity,Location\nA1,abc,B1 2\n")
        assert resp.status_code == 422
        body = resp.json()
        assert body["line"] == 2
        assert body["reason"] == "quantity"
        assert "line 2" in body["detail"]
        assert not store.exists("sorted_products.csv")

    def test_undecodable_upload(self, client):
        resp = _upload(client, b"\xff\xfe\x00bad")
        assert resp.status_code == 422

    def test_missing_file(self, client):
        assert client.post("/upload").status_code == 422

    def test_oversized_upload(self, store):
        settings = AppSettings(
            storage=StorageConfig(backend="memory"), api=ApiConfig(max_upload_bytes=16)
        )
        with TestClient(create_app(settings=settings, store=store)) as c:
            resp = _upload(c, SAMPLE)
        assert resp.status_code == 413


class TestDownload:
    def test_not_found_before_upload(self, client):
        resp = client.get("/download")
        assert resp.status_code == 404

    def test_serves_csv_attachment(self, client):
        _upload(client, SAMPLE)
        resp = client.get("/download")
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/csv")
        assert resp.headers["content-disposition"] == "attachment; filename=sorted_products.csv"
        assert resp.content.startswith(b"Code,Quantity,Location\n")


class TestHome:
    def test_renders_upload_form(self, client):
        resp = client.get("/")
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/html")
        assert 'action="/upload"' in resp.text
        assert 'name="csvfile"' in resp.text


class TestUploadResources:
    def test_upload_closed_before_processing(self, client, events):
        assert _upload(client, SAMPLE).status_code == 200
        assert events[0] == "close"
        assert "threadpool:_summarize_and_store" in events

    def test_upload_closed_on_parse_failure(self, client, events, store):
        resp = _upload(client, b"Code,Quantity,Location\nA1,abc,B1 2\n")
        assert resp.status_code == 422
        assert events[0] == "close"
        assert events[1] == "threadpool:_summarize_and_store"
        assert not store.exists("sorted_products.csv")

    def test_upload_closed_when_oversized(self, events, store):
        settings = AppSettings(
            storage=StorageConfig(backend="memory"), api=ApiConfig(max_upload_bytes=16)
        )
        with TestClient(create_app(settings=settings, store=store)) as c:
            assert _upload(c, SAMPLE).status_code == 413
        assert events[0] == "close"
        assert not any(e.startswith("threadpool:") for e in events)

    def test_download_reads_store_off_the_event_loop(self, client, events):
        _upload(client, SAMPLE)
        assert client.get("/download").status_code == 200
        assert "threadpool:read" in events
