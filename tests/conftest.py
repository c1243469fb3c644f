"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import List

import pytest

from stock_inventory.adapters.memory_repository import InMemoryStockRepository
from stock_inventory.config.models import InventoryConfig, PipelineConfig
from stock_inventory.domain.entities import StockCreateRequest
from stock_inventory.observability.observability_manager import ObservabilityManager
from stock_inventory.pipeline.staged_pipeline import (
    StagedValidationPipeline,
    build_pipeline,
)
from stock_inventory.service.stock_service import StockService
from tests.fixtures import SequenceRandomSource


@pytest.fixture(autouse=True)
def set_random_seed():
    """Ensure all tests are deterministic."""
    random.seed(42)
    yield


@pytest.fixture
def sample_config_path() -> Path:
    """Path to sample configuration file."""
    return Path(__file__).parent / "fixtures" / "sample_config.yaml"


@pytest.fixture
def observability() -> ObservabilityManager:
    """Observability manager with console output kept quiet."""
    return ObservabilityManager(use_json=False, log_level=logging.WARNING)


@pytest.fixture
def default_config() -> InventoryConfig:
    """Default inventory configuration."""
    return InventoryConfig()


@pytest.fixture
def passing_source() -> SequenceRandomSource:
    """Random source whose bulk draws never trigger a failure."""
    return SequenceRandomSource([0.99])


@pytest.fixture
def pipeline(
    observability: ObservabilityManager,
    passing_source: SequenceRandomSource,
) -> StagedValidationPipeline:
    """Standard pipeline whose bulk rule never fires."""
    return build_pipeline(
        PipelineConfig(),
        observability,
        observability,
        random_source=passing_source,
    )


@pytest.fixture
def sample_requests() -> List[StockCreateRequest]:
    """A handful of create requests across sectors."""
    return [
        StockCreateRequest(
            symbol="AAPL",
            company_name="Apple Inc",
            current_price=190.0,
            previous_price=185.0,
            volume=52_000_000,
            market_cap=2_950_000_000_000.0,
            sector="Technology",
        ),
        StockCreateRequest(
            symbol="MSFT",
            company_name="Microsoft Corporation",
            current_price=410.0,
            previous_price=420.0,
            volume=21_000_000,
            market_cap=3_050_000_000_000.0,
            sector="Technology",
        ),
        StockCreateRequest(
            symbol="JPM",
            company_name="JPMorgan Chase & Co",
            current_price=198.0,
            previous_price=180.0,
            volume=9_000_000,
            market_cap=570_000_000_000.0,
            sector="Financials",
        ),
        # No prices or market cap
        StockCreateRequest(
            symbol="NEWCO",
            company_name="Newco Holdings",
            sector="Industrials",
        ),
    ]


@pytest.fixture
def repository(sample_requests: List[StockCreateRequest]) -> InMemoryStockRepository:
    """Repository seeded with the sample requests (ids 1..4)."""
    repo = InMemoryStockRepository()
    repo.seed(sample_requests)
    return repo


@pytest.fixture
def service(
    repository: InMemoryStockRepository,
    pipeline: StagedValidationPipeline,
) -> StockService:
    """Service over the seeded repository and the non-failing pipeline."""
    return StockService(repository, pipeline, top_n=2)
