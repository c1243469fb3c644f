"""
Analysis Stages - The Fixed Stage Table.

Nine stages run in rank order on every request:

    1 data_processing   4 volume        7 trend
    2 price             5 risk          8 prediction
    3 market            6 performance   9 recommendation

Each stage re-checks basic validity of the operand and, if it has one,
evaluates its terminal rule. Only the recommendation stage carries a
terminal rule.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Protocol, Tuple

from stock_inventory.domain.value_objects import (
    PROCEED,
    FailureKind,
    Operand,
    PipelineResult,
    Rejected,
)
from stock_inventory.pipeline.failure_injection import RuleViolation
from stock_inventory.validation.operand_validator import OperandValidator

# (name, subject used in failure messages), in rank order
STAGE_DEFINITIONS: Tuple[Tuple[str, str], ...] = (
    ("data_processing", "data processing"),
    ("price", "price analysis"),
    ("market", "market analysis"),
    ("volume", "volume analysis"),
    ("risk", "risk analysis"),
    ("performance", "performance analysis"),
    ("trend", "trend analysis"),
    ("prediction", "prediction"),
    ("recommendation", "recommendation"),
)

STAGE_COUNT = len(STAGE_DEFINITIONS)


class TerminalRule(Protocol):
    """Rule evaluated after basic validity passes."""

    def evaluate(self, operand: Operand) -> Optional[RuleViolation]:
        ...


@dataclass(frozen=True)
class AnalysisStage:
    """One ranked step of the validation pipeline."""

    rank: int
    name: str
    subject: str
    terminal_rule: Optional[TerminalRule] = None
    validator: OperandValidator = field(default_factory=OperandValidator)

    def run(self, operand: Operand) -> PipelineResult:
        """
        Validate the operand at this stage.

        Returns:
            PROCEED to hand over to the next stage, or Rejected
        """
        problem = self.validator.check(operand, self.subject)
        if problem is not None:
            return Rejected(
                stage_rank=self.rank,
                stage_name=self.name,
                failure_kind=FailureKind.VALIDATION_ERROR,
                message=problem,
            )

        if self.terminal_rule is not None:
            violation = self.terminal_rule.evaluate(operand)
            if violation is not None:
                return Rejected(
                    stage_rank=self.rank,
                    stage_name=self.name,
                    failure_kind=violation.failure_kind,
                    message=violation.message,
                )

        return PROCEED


def build_stage_table(
    recommendation_rule: Optional[TerminalRule] = None,
) -> Tuple[AnalysisStage, ...]:
    """
    Build the nine-stage table.

    Args:
        recommendation_rule: Terminal rule of the final stage

    Returns:
        Immutable tuple of stages in rank order
    """
    stages = []
    for rank, (name, subject) in enumerate(STAGE_DEFINITIONS, start=1):
        rule = recommendation_rule if rank == STAGE_COUNT else None
        stages.append(
            AnalysisStage(rank=rank, name=name, subject=subject, terminal_rule=rule)
        )
    return tuple(stages)
