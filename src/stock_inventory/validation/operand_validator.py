"""
Operand Validator - Basic Validity of Pipeline Operands.

Every pipeline stage re-runs the same basic-validity predicate on its
operand:
    - EntityId: present and > 0
    - SymbolOperand: present and non-blank after trimming
    - CreationPayload: request present, symbol and company name present
    - BulkMarker: always valid

Design Notes:
    - Returns a problem message instead of raising, so a stage can turn it
      into a Rejected result
    - Messages name the checking stage's subject
"""

from __future__ import annotations

from typing import Optional

from stock_inventory.domain.value_objects import (
    BulkMarker,
    CreationPayload,
    EntityId,
    Operand,
    SymbolOperand,
)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


class OperandValidator:
    """Basic-validity predicate shared by all stages."""

    def check(self, operand: Operand, subject: str) -> Optional[str]:
        """
        Check basic validity of an operand.

        Args:
            operand: Operand under validation
            subject: Subject phrase of the checking stage

        Returns:
            Problem message, or None if the operand is valid

        Raises:
            TypeError: If the operand is not a known operand kind
        """
        if isinstance(operand, EntityId):
            return self._check_id(operand, subject)
        if isinstance(operand, SymbolOperand):
            return self._check_symbol(operand, subject)
        if isinstance(operand, CreationPayload):
            return self._check_payload(operand, subject)
        if isinstance(operand, BulkMarker):
            return None
        raise TypeError(f"Unsupported operand type: {type(operand).__name__}")

    def _check_id(self, operand: EntityId, subject: str) -> Optional[str]:
        if operand.value is None or operand.value <= 0:
            return f"invalid id for {subject}"
        return None

    def _check_symbol(self, operand: SymbolOperand, subject: str) -> Optional[str]:
        if _is_blank(operand.value):
            return f"invalid symbol for {subject}"
        return None

    def _check_payload(self, operand: CreationPayload, subject: str) -> Optional[str]:
        request = operand.request
        if request is None:
            return f"missing create request for {subject}"
        if _is_blank(request.symbol) or _is_blank(request.company_name):
            return f"invalid create request for {subject}"
        return None

