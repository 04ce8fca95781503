"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class IngestConfig(BaseSettings):
    """Inventory file decoding and header handling."""

    model_config = {"env_prefix": "STOCKTAKE_INGEST_"}

    has_header: bool = True
    encoding: str = "utf-8-sig"  # tolerates a BOM from spreadsheet exports
    delimiter: str = ","


class StorageConfig(BaseSettings):
    """Summary report storage configuration."""

    model_config = {"env_prefix": "STOCKTAKE_STORAGE_"}

    backend: Literal["local", "memory"] = "local"
    output_dir: str = "."
    report_filename: str = "sorted_products.csv"


class ApiConfig(BaseSettings):
    """HTTP upload limits."""

    model_config = {"env_prefix": "STOCKTAKE_API_"}

    max_upload_bytes: int = 10 << 20


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "STOCKTAKE_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"
    log_json: bool = False

    ingest: IngestConfig = IngestConfig()
    storage: StorageConfig = StorageConfig()
    api: ApiConfig = ApiConfig()
