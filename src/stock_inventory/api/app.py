"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
import structlog

from stock_inventory import __version__
from stock_inventory.adapters.memory_repository import InMemoryStockRepository
from stock_inventory.api.errors import register_error_handlers
from stock_inventory.config.loader import ConfigLoader, resolve_config
from stock_inventory.config.models import InventoryConfig
from stock_inventory.observability.observability_manager import ObservabilityManager
from stock_inventory.pipeline.failure_injection import RandomSource
from stock_inventory.pipeline.staged_pipeline import build_pipeline
from stock_inventory.service.stock_service import StockService

logger = structlog.get_logger()


def create_observability(config: InventoryConfig) -> ObservabilityManager:
    """Observability manager configured from the logging section."""
    return ObservabilityManager(
        use_json=config.logging.use_json,
        log_level=getattr(logging, config.logging.level),
    )


def create_service(
    config: InventoryConfig,
    observability: Optional[ObservabilityManager] = None,
    random_source: Optional[RandomSource] = None,
) -> StockService:
    """
    Wire repository, pipeline and service from configuration.

    Args:
        config: Root configuration
        observability: Audit logger and metrics collector (built when None)
        random_source: Overrides the bulk rule's random source

    Returns:
        StockService with seeded storage
    """
    observability = observability or create_observability(config)
    pipeline = build_pipeline(
        config.pipeline,
        audit_logger=observability,
        metrics_collector=observability,
        random_source=random_source,
    )
    repository = InMemoryStockRepository()
    if config.storage.seed_file:
        records = ConfigLoader().load_seed_records(config.storage.seed_file)
        repository.seed(records)
        logger.info("storage_seeded", records=len(records))
    return StockService(repository, pipeline, top_n=config.api.top_n)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info("api_starting", stocks=len(app.state.stock_service.repository))

    yield

    logger.info("api_stopping")


def create_app(
    config: Optional[InventoryConfig] = None,
    service: Optional[StockService] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        config: Root configuration (resolved from the environment when None)
        service: Pre-built service, e.g. with a pinned random source
    """
    config = config or resolve_config()
    service = service or create_service(config)

    app = FastAPI(
        title=config.api.title,
        description="In-memory stock records behind a staged validation pipeline",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.stock_service = service
    app.state.config = config

    register_error_handlers(app)

    from stock_inventory.api.routes import health, stocks

    app.include_router(health.router, tags=["Health"])
    app.include_router(stocks.router, prefix="/api/v1/stocks", tags=["Stocks"])

    return app
