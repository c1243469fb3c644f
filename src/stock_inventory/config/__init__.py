"""
Configuration Package - Models and Loaders.

Configuration Structure:
    - InventoryConfig: Root configuration object
    - PipelineConfig: Bulk failure probability, random seed, sentinels
    - ApiConfig: HTTP title, bind address, top-N size
    - LoggingConfig: Log level and renderer
    - StorageConfig: Optional seed file

Design Principles:
    - Type-safe via Pydantic
    - Validation on load (fail fast)
    - Support for profiles (e.g. a deterministic profile for demos)
    - Environment variable selects the config file
"""

from stock_inventory.config.loader import ConfigLoader, load_config, resolve_config
from stock_inventory.config.models import (
    ApiConfig,
    InventoryConfig,
    LoggingConfig,
    PipelineConfig,
    SentinelConfig,
    StorageConfig,
)

__all__ = [
    "ConfigLoader",
    "load_config",
    "resolve_config",
    "ApiConfig",
    "InventoryConfig",
    "LoggingConfig",
    "PipelineConfig",
    "SentinelConfig",
    "StorageConfig",
]
