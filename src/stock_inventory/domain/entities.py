"""
Core Domain Entities.

This module defines the stock record and the request bodies that create or
change it. Field names serialize as camelCase (``companyName``,
``currentPrice``) and accept snake_case on input.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import AliasChoices, BaseModel, Field
from pydantic.alias_generators import to_camel


_CAMEL_MODEL_CONFIG = {
    "alias_generator": to_camel,
    "populate_by_name": True,
}


class Stock(BaseModel):
    """A stock record held by the inventory."""

    id: int = Field(..., ge=1, description="Inventory identifier")
    symbol: str = Field(..., description="Ticker symbol")
    company_name: str = Field(..., description="Full company name")
    current_price: Optional[float] = Field(default=None, ge=0)
    previous_price: Optional[float] = Field(default=None, ge=0)
    volume: Optional[int] = Field(default=None, ge=0)
    market_cap: Optional[float] = Field(default=None, ge=0)
    sector: Optional[str] = Field(default=None, description="Industry sector")
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = {**_CAMEL_MODEL_CONFIG, "frozen": True}

    @property
    def change_rate(self) -> Optional[float]:
        """Relative change from previous to current price."""
        if self.current_price is None or not self.previous_price:
            return None
        return (self.current_price - self.previous_price) / self.previous_price


class StockCreateRequest(BaseModel):
    """
    Body of a create request.

    symbol and company_name are required by the validation pipeline, not by
    the schema, so a missing field is reported as a stage rejection.
    """

    symbol: Optional[str] = None
    company_name: Optional[str] = None
    current_price: Optional[float] = Field(default=None, ge=0)
    previous_price: Optional[float] = Field(default=None, ge=0)
    volume: Optional[int] = Field(default=None, ge=0)
    market_cap: Optional[float] = Field(default=None, ge=0)
    sector: Optional[str] = None

    model_config = {**_CAMEL_MODEL_CONFIG, "frozen": True}


class StockUpdateRequest(BaseModel):
    """Body of a full update; only non-null fields are applied."""

    symbol: Optional[str] = None
    company_name: Optional[str] = None
    current_price: Optional[float] = Field(default=None, ge=0)
    previous_price: Optional[float] = Field(default=None, ge=0)
    volume: Optional[int] = Field(default=None, ge=0)
    market_cap: Optional[float] = Field(default=None, ge=0)
    sector: Optional[str] = None

    model_config = {**_CAMEL_MODEL_CONFIG, "frozen": True}


class StockPriceUpdateRequest(BaseModel):
    """Body of a partial price update.

    The new price is read from `newPrice`; `currentPrice` is accepted too so
    the same field name works for create, update and price update bodies.
    """

    new_price: float = Field(
        ...,
        gt=0,
        validation_alias=AliasChoices("newPrice", "new_price", "currentPrice"),
        description="New current price",
    )
    volume: Optional[int] = Field(default=None, ge=0)

    model_config = {**_CAMEL_MODEL_CONFIG, "frozen": True}
