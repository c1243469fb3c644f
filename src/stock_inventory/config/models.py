"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field


class SentinelConfig(BaseModel):
    """Operand values the recommendation stage always rejects."""

    penny_id: int = Field(default=999, ge=1)
    update_id: int = Field(default=888, ge=1)
    price_update_id: int = Field(default=777, ge=1)
    delete_id: int = Field(default=666, ge=1)
    penny_symbol: str = Field(default="PENNY", min_length=1)
    test_symbol: str = Field(default="TEST", min_length=1)


class PipelineConfig(BaseModel):
    """Configuration for the staged validation pipeline."""

    bulk_failure_probability: float = Field(default=0.10, ge=0, le=1)
    random_seed: Optional[int] = Field(default=None)
    sentinels: SentinelConfig = Field(default_factory=SentinelConfig)


class ApiConfig(BaseModel):
    """HTTP layer settings."""

    title: str = "Stock Inventory"
    host: str = "127.0.0.1"
    port: int = Field(default=8000, ge=1, le=65535)
    top_n: int = Field(default=10, ge=1)


class LoggingConfig(BaseModel):
    """Structured logging settings."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    use_json: bool = False


class StorageConfig(BaseModel):
    """In-memory storage settings."""

    seed_file: Optional[str] = Field(
        default=None, description="YAML list of stock records loaded at startup"
    )


class InventoryConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    pipeline: PipelineConfig = Field(default_factory=PipelineConfig)
    api: ApiConfig = Field(default_factory=ApiConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
