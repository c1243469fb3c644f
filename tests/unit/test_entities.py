"""
Unit Tests for Domain Entities and Value Objects.

Test Aspects Covered:
    ✅ Business Logic: Change rate, camelCase serialization
    ✅ Edge Cases: Missing or zero previous price
    ✅ Immutability: Frozen records and results
"""

from __future__ import annotations

from datetime import datetime

import pytest
from pydantic import ValidationError

from stock_inventory.domain.entities import (
    Stock,
    StockCreateRequest,
    StockPriceUpdateRequest,
)
from stock_inventory.domain.exceptions import PipelineRejectedError
from stock_inventory.domain.value_objects import PROCEED, FailureKind, Rejected


def make_stock(**overrides) -> Stock:
    """Helper to create a stock record."""
    fields = {
        "id": 1,
        "symbol": "AAPL",
        "company_name": "Apple Inc",
        "current_price": 110.0,
        "previous_price": 100.0,
        "created_at": datetime(2024, 1, 2),
    }
    fields.update(overrides)
    return Stock(**fields)


class TestStock:
    """Test cases for the stock record."""

    def test_change_rate(self) -> None:
        """
        SCENARIO: 100 -> 110
        EXPECTED: 10% change rate
        """
        assert make_stock().change_rate == pytest.approx(0.10)

    @pytest.mark.parametrize(
        "current,previous",
        [(None, 100.0), (110.0, None), (110.0, 0.0)],
    )
    def test_change_rate_undefined(self, current, previous) -> None:
        """
        SCENARIO: Missing current price, missing or zero previous price
        EXPECTED: No change rate
        """
        stock = make_stock(current_price=current, previous_price=previous)

        assert stock.change_rate is None

    def test_serializes_camel_case(self) -> None:
        """
        SCENARIO: Dump by alias
        EXPECTED: camelCase keys
        """
        data = make_stock().model_dump(by_alias=True)

        assert data["companyName"] == "Apple Inc"
        assert "currentPrice" in data
        assert "company_name" not in data

    def test_frozen(self) -> None:
        """
        SCENARIO: Assign to a field
        EXPECTED: ValidationError raised
        """
        stock = make_stock()

        with pytest.raises(ValidationError):
            stock.symbol = "MSFT"  # type: ignore[misc]

    def test_id_must_be_positive(self) -> None:
        """
        SCENARIO: Record with id 0
        EXPECTED: ValidationError raised
        """
        with pytest.raises(ValidationError):
            make_stock(id=0)


class TestRequests:
    """Test cases for request bodies."""

    def test_create_accepts_both_spellings(self) -> None:
        """
        SCENARIO: camelCase and snake_case input
        EXPECTED: Same request
        """
        camel = StockCreateRequest.model_validate({"symbol": "A", "companyName": "A Co"})
        snake = StockCreateRequest.model_validate({"symbol": "A", "company_name": "A Co"})

        assert camel == snake

    def test_create_fields_optional(self) -> None:
        """
        SCENARIO: Empty create body
        EXPECTED: Parses; completeness is checked by the pipeline
        """
        assert StockCreateRequest().symbol is None

    @pytest.mark.parametrize("price", [0, -5.0])
    def test_price_update_must_be_positive(self, price: float) -> None:
        """
        SCENARIO: New price zero or negative
        EXPECTED: ValidationError raised
        """
        with pytest.raises(ValidationError):
            StockPriceUpdateRequest(new_price=price)

    @pytest.mark.parametrize("key", ["newPrice", "new_price", "currentPrice"])
    def test_price_update_accepted_spellings(self, key: str) -> None:
        """
        SCENARIO: New price sent as newPrice, new_price or currentPrice
        EXPECTED: Same parsed price
        """
        request = StockPriceUpdateRequest.model_validate({key: 5.0, "volume": 10})

        assert request.new_price == 5.0
        assert request.volume == 10

    def test_price_update_serializes_new_price(self) -> None:
        """
        SCENARIO: Dump a price update parsed from currentPrice
        EXPECTED: Emitted as newPrice
        """
        request = StockPriceUpdateRequest.model_validate({"currentPrice": 5.0})

        assert request.model_dump(by_alias=True) == {"newPrice": 5.0, "volume": None}

    def test_price_update_without_price(self) -> None:
        """
        SCENARIO: Body with volume only
        EXPECTED: ValidationError raised
        """
        with pytest.raises(ValidationError):
            StockPriceUpdateRequest.model_validate({"volume": 10})


class TestResults:
    """Test cases for pipeline results and the rejection error."""

    def test_proceed_not_rejected(self) -> None:
        """
        SCENARIO: Proceed singleton
        EXPECTED: is_rejected False
        """
        assert PROCEED.is_rejected is False

    def test_rejected_rank_at_least_one(self) -> None:
        """
        SCENARIO: Rejected with rank 0
        EXPECTED: ValidationError raised
        """
        with pytest.raises(ValidationError):
            Rejected(
                stage_rank=0,
                stage_name="x",
                failure_kind=FailureKind.VALIDATION_ERROR,
                message="m",
            )

    def test_error_exposes_result(self) -> None:
        """
        SCENARIO: Wrap a rejection in PipelineRejectedError
        EXPECTED: Kind, rank and name exposed; message as str
        """
        result = Rejected(
            stage_rank=9,
            stage_name="recommendation",
            failure_kind=FailureKind.TRANSIENT_REJECTION,
            message="bulk recommendation error",
        )

        error = PipelineRejectedError(result)

        assert error.failure_kind == FailureKind.TRANSIENT_REJECTION
        assert error.stage_rank == 9
        assert error.stage_name == "recommendation"
        assert str(error) == "bulk recommendation error"
