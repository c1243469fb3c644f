"""
In-Memory Stock Repository.

Thread-safe storage for stock records. Ids are assigned sequentially
starting at 1. Records are immutable; updates replace them with a copy.
"""

from __future__ import annotations

import logging
from datetime import datetime
from threading import RLock
from typing import Any, Dict, Iterable, List, Optional, Union

from stock_inventory.domain.entities import (
    Stock,
    StockCreateRequest,
    StockUpdateRequest,
)

logger = logging.getLogger(__name__)


class InMemoryStockRepository:
    """Dict-backed stock storage guarded by a re-entrant lock."""

    def __init__(self) -> None:
        self._stocks: Dict[int, Stock] = {}
        self._next_id = 1
        self._lock = RLock()

    def add(self, request: StockCreateRequest) -> Stock:
        """
        Insert a new record built from a create request.

        Args:
            request: Validated create request (symbol and company name set)

        Returns:
            The stored record with its assigned id
        """
        with self._lock:
            stock = Stock(
                id=self._next_id,
                symbol=request.symbol,
                company_name=request.company_name,
                current_price=request.current_price,
                previous_price=request.previous_price,
                volume=request.volume,
                market_cap=request.market_cap,
                sector=request.sector,
                created_at=datetime.now(),
            )
            self._stocks[stock.id] = stock
            self._next_id += 1

        logger.info(f"Stored stock {stock.symbol} as id {stock.id}")
        return stock

    def seed(
        self, records: Iterable[Union[StockCreateRequest, Dict[str, Any]]]
    ) -> List[Stock]:
        """Bulk-insert records; dicts are parsed as create requests."""
        stored = []
        for record in records:
            if not isinstance(record, StockCreateRequest):
                record = StockCreateRequest.model_validate(record)
            stored.append(self.add(record))
        return stored

    def get(self, stock_id: int) -> Optional[Stock]:
        with self._lock:
            return self._stocks.get(stock_id)

    def find_by_symbol(self, symbol: str) -> Optional[Stock]:
        """First record whose symbol matches exactly."""
        with self._lock:
            return next(
                (s for s in self._stocks.values() if s.symbol == symbol), None
            )

    def list_all(self) -> List[Stock]:
        """All records in insertion order."""
        with self._lock:
            return list(self._stocks.values())

    def find_by_sector(self, sector: str) -> List[Stock]:
        with self._lock:
            return [s for s in self._stocks.values() if s.sector == sector]

    def search(self, keyword: str) -> List[Stock]:
        """Records whose company name or symbol contains the keyword."""
        with self._lock:
            return [
                s
                for s in self._stocks.values()
                if keyword in s.company_name or keyword in s.symbol
            ]

    def top_gainers(self, limit: int) -> List[Stock]:
        """Highest change rate first; records without one sort last."""
        with self._lock:
            stocks = list(self._stocks.values())
        stocks.sort(
            key=lambda s: (s.change_rate is None, -(s.change_rate or 0.0))
        )
        return stocks[:limit]

    def top_by_market_cap(self, limit: int) -> List[Stock]:
        """Largest market cap first; records without one sort last."""
        with self._lock:
            stocks = list(self._stocks.values())
        stocks.sort(key=lambda s: (s.market_cap is None, -(s.market_cap or 0.0)))
        return stocks[:limit]

    def update(self, stock_id: int, request: StockUpdateRequest) -> Optional[Stock]:
        """
        Apply the non-null fields of an update request.

        Returns:
            Updated record, or None if the id is unknown
        """
        changes = request.model_dump(exclude_none=True)
        with self._lock:
            stock = self._stocks.get(stock_id)
            if stock is None:
                return None
            updated = stock.model_copy(
                update={**changes, "updated_at": datetime.now()}
            )
            self._stocks[stock_id] = updated
        return updated

    def update_price(
        self,
        stock_id: int,
        new_price: float,
        volume: Optional[int] = None,
    ) -> Optional[Stock]:
        """
        Set a new current price, moving the old one to previous price.

        Returns:
            Updated record, or None if the id is unknown
        """
        with self._lock:
            stock = self._stocks.get(stock_id)
            if stock is None:
                return None
            changes: Dict[str, Any] = {
                "previous_price": stock.current_price,
                "current_price": new_price,
                "updated_at": datetime.now(),
            }
            if volume is not None:
                changes["volume"] = volume
            updated = stock.model_copy(update=changes)
            self._stocks[stock_id] = updated
        return updated

    def remove(self, stock_id: int) -> bool:
        """Delete a record; False if the id is unknown."""
        with self._lock:
            removed = self._stocks.pop(stock_id, None)
        if removed is not None:
            logger.info(f"Removed stock {removed.symbol} (id {stock_id})")
        return removed is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._stocks)
