"""Stock endpoints under /api/v1/stocks.

Static paths (search, top lists, symbol, sector) are declared before the
``/{stock_id}`` routes so they are matched first.
"""

from typing import List, Optional

from fastapi import APIRouter, Body, Depends, Query, Request, Response

from stock_inventory.domain.entities import (
    Stock,
    StockCreateRequest,
    StockPriceUpdateRequest,
    StockUpdateRequest,
)
from stock_inventory.service.stock_service import StockService

router = APIRouter()


def get_service(request: Request) -> StockService:
    """Service instance attached to the app at startup."""
    return request.app.state.stock_service


@router.get("", response_model=List[Stock])
def list_stocks(service: StockService = Depends(get_service)):
    """All stocks."""
    return service.list_stocks()


@router.get("/search", response_model=List[Stock])
def search_stocks(
    keyword: str = Query(..., description="Substring of company name or symbol"),
    service: StockService = Depends(get_service),
):
    """Stocks whose company name or symbol contains the keyword."""
    return service.search(keyword)


@router.get("/top-gainers", response_model=List[Stock])
def top_gainers(service: StockService = Depends(get_service)):
    """Stocks with the highest price change rate."""
    return service.top_gainers()


@router.get("/top-market-cap", response_model=List[Stock])
def top_by_market_cap(service: StockService = Depends(get_service)):
    """Stocks with the largest market cap."""
    return service.top_by_market_cap()


@router.get("/symbol/{symbol}", response_model=Stock)
def get_stock_by_symbol(symbol: str, service: StockService = Depends(get_service)):
    return service.get_stock_by_symbol(symbol)


@router.get("/sector/{sector}", response_model=List[Stock])
def list_by_sector(sector: str, service: StockService = Depends(get_service)):
    return service.list_by_sector(sector)


@router.post("", response_model=Stock, status_code=201)
def create_stock(
    request: Optional[StockCreateRequest] = Body(default=None),
    service: StockService = Depends(get_service),
):
    """Create a stock; symbol and companyName are required."""
    return service.create_stock(request)


@router.get("/{stock_id}", response_model=Stock)
def get_stock(stock_id: int, service: StockService = Depends(get_service)):
    return service.get_stock(stock_id)


@router.put("/{stock_id}", response_model=Stock)
def update_stock(
    stock_id: int,
    request: StockUpdateRequest,
    service: StockService = Depends(get_service),
):
    """Apply the non-null fields of the body."""
    return service.update_stock(stock_id, request)


@router.patch("/{stock_id}/price", response_model=Stock)
def update_stock_price(
    stock_id: int,
    request: StockPriceUpdateRequest,
    service: StockService = Depends(get_service),
):
    """Set a new current price; the old one becomes the previous price."""
    return service.update_stock_price(stock_id, request)


@router.delete("/{stock_id}", status_code=204)
def delete_stock(stock_id: int, service: StockService = Depends(get_service)):
    service.delete_stock(stock_id)
    return Response(status_code=204)
