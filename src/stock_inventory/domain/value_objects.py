"""
Value Objects for the Validation Pipeline.

Operands are the single input a pipeline run validates: an entity id, a
symbol, a creation payload or the bulk marker. Results are either
``Proceed`` or ``Rejected`` carrying the failing stage and failure kind.
All value objects are immutable.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Literal, Optional, Union

from pydantic import BaseModel, Field

from stock_inventory.domain.entities import StockCreateRequest


class OperationKind(str, Enum):
    """Kind of request a pipeline run guards."""

    LOOKUP_BY_ID = "lookup_by_id"
    LOOKUP_BY_SYMBOL = "lookup_by_symbol"
    BULK_LOOKUP = "bulk_lookup"
    CREATE_VALIDATION = "create_validation"
    UPDATE_VALIDATION = "update_validation"
    PRICE_UPDATE_VALIDATION = "price_update_validation"
    DELETE_VALIDATION = "delete_validation"


class IdContext(str, Enum):
    """Request context of an entity id; selects the terminal sentinel."""

    LOOKUP = "lookup"
    UPDATE = "update"
    PRICE_UPDATE = "price_update"
    DELETE = "delete"


class FailureKind(str, Enum):
    """Failure taxonomy of a rejected pipeline run."""

    # Malformed or missing operand, fixable by the caller
    VALIDATION_ERROR = "validation_error"
    # Sentinel-matched business rejection, deterministic
    DOMAIN_REJECTION = "domain_rejection"
    # Randomized bulk rejection, not reproducible
    TRANSIENT_REJECTION = "transient_rejection"


# =============================================================================
# Operands
# =============================================================================


class EntityId(BaseModel):
    """Numeric stock identifier (must be > 0)."""

    kind: Literal["entity_id"] = "entity_id"
    value: Optional[int] = None
    context: IdContext = IdContext.LOOKUP

    model_config = {"frozen": True}

    def describe(self) -> Dict[str, Any]:
        return {"operand": self.kind, "id": self.value, "context": self.context.value}


class SymbolOperand(BaseModel):
    """Ticker symbol (non-empty after trimming)."""

    kind: Literal["symbol"] = "symbol"
    value: Optional[str] = None

    model_config = {"frozen": True}

    def describe(self) -> Dict[str, Any]:
        return {"operand": self.kind, "symbol": self.value}


class CreationPayload(BaseModel):
    """Payload of a create request; the request itself may be absent."""

    kind: Literal["creation_payload"] = "creation_payload"
    request: Optional[StockCreateRequest] = None

    model_config = {"frozen": True}

    @property
    def symbol(self) -> Optional[str]:
        return self.request.symbol if self.request is not None else None

    def describe(self) -> Dict[str, Any]:
        return {"operand": self.kind, "symbol": self.symbol}


class BulkMarker(BaseModel):
    """Marker operand for whole-collection reads; carries no payload."""

    kind: Literal["bulk"] = "bulk"

    model_config = {"frozen": True}

    def describe(self) -> Dict[str, Any]:
        return {"operand": self.kind}


Operand = Union[EntityId, SymbolOperand, CreationPayload, BulkMarker]


# =============================================================================
# Results
# =============================================================================


class Proceed(BaseModel):
    """Every stage passed; the caller may touch storage."""

    model_config = {"frozen": True}

    @property
    def is_rejected(self) -> bool:
        return False


class Rejected(BaseModel):
    """First failing stage of a run."""

    stage_rank: int = Field(..., ge=1, description="Rank of the failing stage")
    stage_name: str = Field(..., description="Name of the failing stage")
    failure_kind: FailureKind
    message: str

    model_config = {"frozen": True}

    @property
    def is_rejected(self) -> bool:
        return True


PipelineResult = Union[Proceed, Rejected]

PROCEED = Proceed()
