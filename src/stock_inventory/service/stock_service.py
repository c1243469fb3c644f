"""
Stock Service - Operation Entry Points.

Each CRUD verb maps to exactly one operation kind and one operand:

    | Verb                     | Operation kind           | Operand             |
    |--------------------------|--------------------------|---------------------|
    | list / sector / search   | BULK_LOOKUP              | BulkMarker          |
    | top gainers / market cap | BULK_LOOKUP              | BulkMarker          |
    | get by id                | LOOKUP_BY_ID             | EntityId(lookup)    |
    | get by symbol            | LOOKUP_BY_SYMBOL         | SymbolOperand       |
    | create                   | CREATE_VALIDATION        | CreationPayload     |
    | update                   | UPDATE_VALIDATION        | EntityId(update)    |
    | price update             | PRICE_UPDATE_VALIDATION  | EntityId(price)     |
    | delete                   | DELETE_VALIDATION        | EntityId(delete)    |

The pipeline runs before any storage access. A rejection raises
PipelineRejectedError and storage is never touched.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Protocol

from stock_inventory.adapters.memory_repository import InMemoryStockRepository
from stock_inventory.domain.entities import (
    Stock,
    StockCreateRequest,
    StockPriceUpdateRequest,
    StockUpdateRequest,
)
from stock_inventory.domain.exceptions import PipelineRejectedError, StockNotFoundError
from stock_inventory.domain.value_objects import (
    Operand,
    OperationKind,
    PipelineResult,
    Rejected,
)
from stock_inventory.pipeline.staged_pipeline import build_operand

logger = logging.getLogger(__name__)


class ValidationPipelineProtocol(Protocol):
    """Protocol for the validation pipeline."""

    def evaluate(self, operation_kind: OperationKind, operand: Operand) -> PipelineResult:
        ...


class StockService:
    """Runs the validation pipeline, then the storage operation."""

    def __init__(
        self,
        repository: InMemoryStockRepository,
        pipeline: ValidationPipelineProtocol,
        top_n: int = 10,
    ) -> None:
        """
        Initialize service.

        Args:
            repository: Stock storage
            pipeline: Validation pipeline run before every storage access
            top_n: Size of top-gainers and top-market-cap lists
        """
        self.repository = repository
        self.pipeline = pipeline
        self.top_n = top_n

    def _guard(self, operation_kind: OperationKind, value: Any = None) -> None:
        """Run the pipeline; raise on rejection."""
        result = self.pipeline.evaluate(
            operation_kind, build_operand(operation_kind, value)
        )
        if isinstance(result, Rejected):
            logger.info(
                f"{operation_kind.value} rejected at stage {result.stage_rank} "
                f"({result.failure_kind.value}): {result.message}"
            )
            raise PipelineRejectedError(result)

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    def list_stocks(self) -> List[Stock]:
        self._guard(OperationKind.BULK_LOOKUP)
        return self.repository.list_all()

    def get_stock(self, stock_id: Optional[int]) -> Stock:
        self._guard(OperationKind.LOOKUP_BY_ID, stock_id)
        stock = self.repository.get(stock_id)
        if stock is None:
            raise StockNotFoundError(f"No stock with id {stock_id}", stock_id=stock_id)
        return stock

    def get_stock_by_symbol(self, symbol: Optional[str]) -> Stock:
        self._guard(OperationKind.LOOKUP_BY_SYMBOL, symbol)
        stock = self.repository.find_by_symbol(symbol)
        if stock is None:
            raise StockNotFoundError(f"No stock with symbol {symbol}", symbol=symbol)
        return stock

    def list_by_sector(self, sector: str) -> List[Stock]:
        self._guard(OperationKind.BULK_LOOKUP)
        return self.repository.find_by_sector(sector)

    def search(self, keyword: str) -> List[Stock]:
        self._guard(OperationKind.BULK_LOOKUP)
        return self.repository.search(keyword)

    def top_gainers(self) -> List[Stock]:
        self._guard(OperationKind.BULK_LOOKUP)
        return self.repository.top_gainers(self.top_n)

    def top_by_market_cap(self) -> List[Stock]:
        self._guard(OperationKind.BULK_LOOKUP)
        return self.repository.top_by_market_cap(self.top_n)

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    def create_stock(self, request: Optional[StockCreateRequest]) -> Stock:
        self._guard(OperationKind.CREATE_VALIDATION, request)
        return self.repository.add(request)

    def update_stock(self, stock_id: Optional[int], request: StockUpdateRequest) -> Stock:
        self._guard(OperationKind.UPDATE_VALIDATION, stock_id)
        stock = self.repository.update(stock_id, request)
        if stock is None:
            raise StockNotFoundError(f"No stock with id {stock_id}", stock_id=stock_id)
        return stock

    def update_stock_price(
        self,
        stock_id: Optional[int],
        request: StockPriceUpdateRequest,
    ) -> Stock:
        self._guard(OperationKind.PRICE_UPDATE_VALIDATION, stock_id)
        stock = self.repository.update_price(stock_id, request.new_price, request.volume)
        if stock is None:
            raise StockNotFoundError(f"No stock with id {stock_id}", stock_id=stock_id)
        return stock

    def delete_stock(self, stock_id: Optional[int]) -> None:
        self._guard(OperationKind.DELETE_VALIDATION, stock_id)
        if not self.repository.remove(stock_id):
            raise StockNotFoundError(f"No stock with id {stock_id}", stock_id=stock_id)
