"""
Domain Exceptions.

Raised by the operation entry points. The HTTP layer maps them to status
codes; nothing below the entry points catches them.
"""

from __future__ import annotations

from typing import Optional

from stock_inventory.domain.value_objects import FailureKind, Rejected


class StockInventoryError(Exception):
    """Base class for inventory errors."""


class StockNotFoundError(StockInventoryError):
    """Raised when no record matches an id or symbol."""

    def __init__(
        self,
        message: str,
        stock_id: Optional[int] = None,
        symbol: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.stock_id = stock_id
        self.symbol = symbol


class PipelineRejectedError(StockInventoryError):
    """Raised when the validation pipeline rejects a request."""

    def __init__(self, result: Rejected) -> None:
        super().__init__(result.message)
        self.result = result

    @property
    def failure_kind(self) -> FailureKind:
        return self.result.failure_kind

    @property
    def stage_rank(self) -> int:
        return self.result.stage_rank

    @property
    def stage_name(self) -> str:
        return self.result.stage_name
