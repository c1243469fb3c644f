"""
Unit Tests for OperandValidator.

Test Aspects Covered:
    ✅ Business Logic: Basic validity per operand kind
    ✅ Edge Cases: Zero and negative ids, blank symbols, missing payloads
    ✅ Error Handling: Unknown operand types
"""

from __future__ import annotations

import pytest

from stock_inventory.domain.entities import StockCreateRequest
from stock_inventory.domain.value_objects import (
    BulkMarker,
    CreationPayload,
    EntityId,
    IdContext,
    SymbolOperand,
)
from stock_inventory.validation.operand_validator import OperandValidator


@pytest.fixture
def validator() -> OperandValidator:
    """Create operand validator."""
    return OperandValidator()


class TestEntityIdValidity:
    """Test cases for entity id checks."""

    def test_positive_id_is_valid(self, validator: OperandValidator) -> None:
        """
        SCENARIO: Id is 1
        EXPECTED: No problem reported
        """
        assert validator.check(EntityId(value=1), "price analysis") is None

    @pytest.mark.parametrize("value", [None, 0, -1, -999])
    def test_missing_or_non_positive_id(
        self,
        validator: OperandValidator,
        value,
    ) -> None:
        """
        SCENARIO: Id is absent, zero or negative
        EXPECTED: Problem names the checking stage's subject
        """
        problem = validator.check(EntityId(value=value), "risk analysis")

        assert problem == "invalid id for risk analysis"

    def test_context_does_not_affect_validity(self, validator: OperandValidator) -> None:
        """
        SCENARIO: Sentinel-looking id in a delete context
        EXPECTED: Still valid; sentinels are not a validity concern
        """
        operand = EntityId(value=666, context=IdContext.DELETE)

        assert validator.check(operand, "trend analysis") is None


class TestSymbolValidity:
    """Test cases for symbol checks."""

    def test_symbol_is_valid(self, validator: OperandValidator) -> None:
        """
        SCENARIO: Non-empty symbol
        EXPECTED: No problem reported
        """
        assert validator.check(SymbolOperand(value="AAPL"), "market analysis") is None

    @pytest.mark.parametrize("value", [None, "", "   ", "\t\n"])
    def test_blank_symbol(self, validator: OperandValidator, value) -> None:
        """
        SCENARIO: Symbol absent or only whitespace
        EXPECTED: Invalid symbol problem
        """
        problem = validator.check(SymbolOperand(value=value), "data processing")

        assert problem == "invalid symbol for data processing"

    def test_padded_symbol_is_valid(self, validator: OperandValidator) -> None:
        """
        SCENARIO: Symbol has surrounding whitespace but content
        EXPECTED: Valid (only emptiness after trimming counts)
        """
        assert validator.check(SymbolOperand(value=" MSFT "), "prediction") is None


class TestCreationPayloadValidity:
    """Test cases for create request checks."""

    def test_complete_request_is_valid(self, validator: OperandValidator) -> None:
        """
        SCENARIO: Symbol and company name present
        EXPECTED: No problem reported
        """
        operand = CreationPayload(
            request=StockCreateRequest(symbol="NVDA", company_name="NVIDIA Corp")
        )

        assert validator.check(operand, "volume analysis") is None

    def test_missing_request(self, validator: OperandValidator) -> None:
        """
        SCENARIO: No request body at all
        EXPECTED: Missing request problem
        """
        problem = validator.check(CreationPayload(request=None), "volume analysis")

        assert problem == "missing create request for volume analysis"

    @pytest.mark.parametrize(
        "symbol,company_name",
        [
            (None, "NVIDIA Corp"),
            ("NVDA", None),
            ("", "NVIDIA Corp"),
            ("NVDA", "  "),
        ],
    )
    def test_incomplete_request(
        self,
        validator: OperandValidator,
        symbol,
        company_name,
    ) -> None:
        """
        SCENARIO: Symbol or company name absent or blank
        EXPECTED: Invalid request problem
        """
        operand = CreationPayload(
            request=StockCreateRequest(symbol=symbol, company_name=company_name)
        )

        problem = validator.check(operand, "performance analysis")

        assert problem == "invalid create request for performance analysis"


class TestBulkAndUnknownOperands:
    """Test cases for the bulk marker and unsupported operands."""

    def test_bulk_marker_always_valid(self, validator: OperandValidator) -> None:
        """
        SCENARIO: Bulk marker
        EXPECTED: No problem reported
        """
        assert validator.check(BulkMarker(), "recommendation") is None

    def test_unknown_operand_raises(self, validator: OperandValidator) -> None:
        """
        SCENARIO: Operand is not one of the four operand kinds
        EXPECTED: TypeError raised
        """
        with pytest.raises(TypeError, match="Unsupported operand type"):
            validator.check("AAPL", "recommendation")  # type: ignore[arg-type]
