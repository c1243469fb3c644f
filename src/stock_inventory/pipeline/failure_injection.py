"""
Failure Injection - Terminal Rules of the Recommendation Stage.

The recommendation stage rejects specific sentinel operands and, for bulk
reads, fails at random with a configurable probability:

    | Operand                   | Condition            | Failure kind |
    |---------------------------|----------------------|--------------|
    | EntityId (lookup)         | id == penny_id       | DOMAIN       |
    | EntityId (update)         | id == update_id      | DOMAIN       |
    | EntityId (price update)   | id == price_update_id| DOMAIN       |
    | EntityId (delete)         | id == delete_id      | DOMAIN       |
    | SymbolOperand             | symbol == "PENNY"    | DOMAIN       |
    | CreationPayload           | symbol == "TEST"     | DOMAIN       |
    | BulkMarker                | draw < probability   | TRANSIENT    |

Design Notes:
    - Random source is pluggable: a seed, or any object with random()
    - Draws are serialized with a lock so concurrent bulk runs are safe
    - Symbol sentinels compare exactly (case-sensitive, untrimmed)
"""

from __future__ import annotations

import logging
import random
import threading
from dataclasses import dataclass
from typing import Dict, Optional, Protocol, Tuple

from stock_inventory.config.models import SentinelConfig
from stock_inventory.domain.value_objects import (
    BulkMarker,
    CreationPayload,
    EntityId,
    FailureKind,
    IdContext,
    Operand,
    SymbolOperand,
)

logger = logging.getLogger(__name__)

DEFAULT_BULK_FAILURE_PROBABILITY = 0.10


class RandomSource(Protocol):
    """Anything that yields floats in [0.0, 1.0)."""

    def random(self) -> float:
        ...


@dataclass(frozen=True)
class RuleViolation:
    """Outcome of a terminal rule that fired."""

    failure_kind: FailureKind
    message: str


class RandomFailureInjector:
    """Thread-safe, seedable random failure source for bulk reads."""

    def __init__(
        self,
        probability: float = DEFAULT_BULK_FAILURE_PROBABILITY,
        source: Optional[RandomSource] = None,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize injector.

        Args:
            probability: Failure probability in [0.0, 1.0]
            source: Random source; overrides seed when given
            seed: Seed for a private random.Random

        Raises:
            ValueError: If probability is outside [0.0, 1.0]
        """
        if not 0.0 <= probability <= 1.0:
            raise ValueError(
                f"probability must be between 0 and 1, got {probability}"
            )
        self.probability = probability
        self._source: RandomSource = source if source is not None else random.Random(seed)
        self._lock = threading.Lock()

    def should_fail(self) -> bool:
        """Draw once; True when the draw falls below the probability."""
        with self._lock:
            draw = self._source.random()
        return draw < self.probability


class RecommendationRule:
    """Sentinel and random-failure rules of the final stage."""

    _ID_MESSAGES: Dict[IdContext, str] = {
        IdContext.LOOKUP: "penny stock not recommended",
        IdContext.UPDATE: "update recommendation error",
        IdContext.PRICE_UPDATE: "price-update recommendation error",
        IdContext.DELETE: "delete recommendation error",
    }

    def __init__(
        self,
        sentinels: Optional[SentinelConfig] = None,
        injector: Optional[RandomFailureInjector] = None,
    ) -> None:
        self.sentinels = sentinels or SentinelConfig()
        self.injector = injector or RandomFailureInjector()
        self._id_sentinels: Dict[IdContext, int] = {
            IdContext.LOOKUP: self.sentinels.penny_id,
            IdContext.UPDATE: self.sentinels.update_id,
            IdContext.PRICE_UPDATE: self.sentinels.price_update_id,
            IdContext.DELETE: self.sentinels.delete_id,
        }

    def evaluate(self, operand: Operand) -> Optional[RuleViolation]:
        """
        Evaluate the terminal rule for an operand that passed basic validity.

        Returns:
            RuleViolation if a rule fired, else None
        """
        if isinstance(operand, EntityId):
            return self._evaluate_id(operand)
        if isinstance(operand, SymbolOperand):
            if operand.value == self.sentinels.penny_symbol:
                return _domain("penny stock not recommended")
            return None
        if isinstance(operand, CreationPayload):
            if operand.symbol == self.sentinels.test_symbol:
                return _domain("test stock not recommended")
            return None
        if isinstance(operand, BulkMarker):
            if self.injector.should_fail():
                logger.info("Injected bulk recommendation failure")
                return RuleViolation(
                    FailureKind.TRANSIENT_REJECTION, "bulk recommendation error"
                )
            return None
        return None

    def _evaluate_id(self, operand: EntityId) -> Optional[RuleViolation]:
        if operand.value == self._id_sentinels[operand.context]:
            return _domain(self._ID_MESSAGES[operand.context])
        return None

    def sentinel_table(self) -> Tuple[Tuple[str, str], ...]:
        """Human-readable (condition, message) pairs, for CLI listing."""
        return (
            (f"id == {self.sentinels.penny_id} (lookup)", self._ID_MESSAGES[IdContext.LOOKUP]),
            (f"id == {self.sentinels.update_id} (update)", self._ID_MESSAGES[IdContext.UPDATE]),
            (
                f"id == {self.sentinels.price_update_id} (price update)",
                self._ID_MESSAGES[IdContext.PRICE_UPDATE],
            ),
            (f"id == {self.sentinels.delete_id} (delete)", self._ID_MESSAGES[IdContext.DELETE]),
            (f"symbol == {self.sentinels.penny_symbol!r}", "penny stock not recommended"),
            (f"create symbol == {self.sentinels.test_symbol!r}", "test stock not recommended"),
            (f"bulk draw < {self.injector.probability}", "bulk recommendation error"),
        )


def _domain(message: str) -> RuleViolation:
    return RuleViolation(FailureKind.DOMAIN_REJECTION, message)
