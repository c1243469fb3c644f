"""
Domain Layer - Stock Records, Operands and Pipeline Results.

Entities:
    - Stock: A stock record held in memory
    - StockCreateRequest / StockUpdateRequest / StockPriceUpdateRequest

Value Objects:
    - EntityId, SymbolOperand, CreationPayload, BulkMarker: pipeline operands
    - Proceed / Rejected: pipeline results
    - OperationKind, IdContext, FailureKind: enums

Design Principles:
    - Immutable (frozen pydantic models)
    - No infrastructure dependencies
"""

from stock_inventory.domain.entities import (
    Stock,
    StockCreateRequest,
    StockPriceUpdateRequest,
    StockUpdateRequest,
)
from stock_inventory.domain.exceptions import (
    PipelineRejectedError,
    StockInventoryError,
    StockNotFoundError,
)
from stock_inventory.domain.value_objects import (
    PROCEED,
    BulkMarker,
    CreationPayload,
    EntityId,
    FailureKind,
    IdContext,
    Operand,
    OperationKind,
    PipelineResult,
    Proceed,
    Rejected,
    SymbolOperand,
)

__all__ = [
    "Stock",
    "StockCreateRequest",
    "StockPriceUpdateRequest",
    "StockUpdateRequest",
    "PipelineRejectedError",
    "StockInventoryError",
    "StockNotFoundError",
    "PROCEED",
    "BulkMarker",
    "CreationPayload",
    "EntityId",
    "FailureKind",
    "IdContext",
    "Operand",
    "OperationKind",
    "PipelineResult",
    "Proceed",
    "Rejected",
    "SymbolOperand",
]
