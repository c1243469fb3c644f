"""
Validation Package - Basic Validity of Pipeline Operands.

    - OperandValidator: predicate every pipeline stage re-runs

Design Principles:
    - Fail fast on invalid input
    - Clear, actionable error messages
"""

from stock_inventory.validation.operand_validator import OperandValidator

__all__ = ["OperandValidator"]
