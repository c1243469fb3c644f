"""
Staged Validation Pipeline - Main Driver.

The StagedValidationPipeline threads one operand through the fixed stage
table in rank order and stops at the first rejection. It never retries,
parallelizes or reorders stages, and it knows nothing about storage.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Dict, Optional, Protocol, Sequence, Tuple, Type

from stock_inventory.config.models import PipelineConfig
from stock_inventory.domain.value_objects import (
    PROCEED,
    BulkMarker,
    CreationPayload,
    EntityId,
    IdContext,
    Operand,
    OperationKind,
    PipelineResult,
    Rejected,
    SymbolOperand,
)
from stock_inventory.pipeline.failure_injection import (
    RandomFailureInjector,
    RandomSource,
    RecommendationRule,
)
from stock_inventory.pipeline.stages import STAGE_COUNT, AnalysisStage, build_stage_table

logger = logging.getLogger(__name__)


# Operand type (and id context, for id-based kinds) each operation expects
_EXPECTED_OPERANDS: Dict[OperationKind, Tuple[Type[Any], Optional[IdContext]]] = {
    OperationKind.LOOKUP_BY_ID: (EntityId, IdContext.LOOKUP),
    OperationKind.LOOKUP_BY_SYMBOL: (SymbolOperand, None),
    OperationKind.BULK_LOOKUP: (BulkMarker, None),
    OperationKind.CREATE_VALIDATION: (CreationPayload, None),
    OperationKind.UPDATE_VALIDATION: (EntityId, IdContext.UPDATE),
    OperationKind.PRICE_UPDATE_VALIDATION: (EntityId, IdContext.PRICE_UPDATE),
    OperationKind.DELETE_VALIDATION: (EntityId, IdContext.DELETE),
}


class AuditLoggerProtocol(Protocol):
    """Protocol for pipeline audit loggers."""

    def generate_correlation_id(self) -> str:
        ...

    def log_pipeline_start(self, operation_kind: str, operand: Dict[str, Any]) -> None:
        ...

    def log_stage_passed(self, stage_name: str, stage_rank: int) -> None:
        ...

    def log_stage_rejected(
        self, stage_name: str, stage_rank: int, failure_kind: str, message: str
    ) -> None:
        ...

    def log_pipeline_end(
        self, operation_kind: str, outcome: str, duration_seconds: float
    ) -> None:
        ...


class MetricsCollectorProtocol(Protocol):
    """Protocol for metrics collectors."""

    def record_timing(
        self, name: str, duration_seconds: float, tags: Optional[Dict] = None
    ) -> None:
        ...

    def record_count(
        self, name: str, value: int, tags: Optional[Dict] = None
    ) -> None:
        ...


def build_operand(operation_kind: OperationKind, value: Any = None) -> Operand:
    """
    Build the operand an operation kind expects from a raw value.

    Args:
        operation_kind: Operation to guard
        value: Raw id, symbol, or StockCreateRequest (ignored for bulk)

    Returns:
        Operand matching the operation kind
    """
    operand_type, context = _EXPECTED_OPERANDS[operation_kind]
    if operand_type is EntityId:
        return EntityId(value=value, context=context)
    if operand_type is SymbolOperand:
        return SymbolOperand(value=value)
    if operand_type is CreationPayload:
        return CreationPayload(request=value)
    return BulkMarker()


class StagedValidationPipeline:
    """Runs the fixed stage table against one operand per request."""

    def __init__(
        self,
        stages: Sequence[AnalysisStage],
        audit_logger: AuditLoggerProtocol,
        metrics_collector: MetricsCollectorProtocol,
    ) -> None:
        """
        Initialize pipeline with all dependencies.

        Args:
            stages: Stage table, ranks 1..9 in order
            audit_logger: For the per-run audit trail
            metrics_collector: For run counters and timings

        Raises:
            ValueError: If the stage table is not ranked 1..9 in order
        """
        ranks = [stage.rank for stage in stages]
        if ranks != list(range(1, STAGE_COUNT + 1)):
            raise ValueError(
                f"Stage table must be ranked 1..{STAGE_COUNT} in order, got {ranks}"
            )
        self.stages: Tuple[AnalysisStage, ...] = tuple(stages)
        self.audit_logger = audit_logger
        self.metrics_collector = metrics_collector

    def evaluate(
        self,
        operation_kind: OperationKind,
        operand: Operand,
    ) -> PipelineResult:
        """
        Run every stage in rank order until one rejects.

        Args:
            operation_kind: Operation being guarded
            operand: Operand matching the operation kind

        Returns:
            PROCEED, or the first stage's Rejected result

        Raises:
            TypeError: If the operand does not match the operation kind
        """
        self._check_operand(operation_kind, operand)

        start_time = time.perf_counter()
        self.audit_logger.generate_correlation_id()
        self.audit_logger.log_pipeline_start(operation_kind.value, operand.describe())

        result: PipelineResult = PROCEED
        for stage in self.stages:
            outcome = stage.run(operand)
            if isinstance(outcome, Rejected):
                self.audit_logger.log_stage_rejected(
                    stage.name,
                    stage.rank,
                    outcome.failure_kind.value,
                    outcome.message,
                )
                result = outcome
                break
            self.audit_logger.log_stage_passed(stage.name, stage.rank)

        duration = time.perf_counter() - start_time
        self._record(operation_kind, result, duration)
        return result

    def _check_operand(self, operation_kind: OperationKind, operand: Operand) -> None:
        """Operand kind must match the operation kind."""
        operand_type, context = _EXPECTED_OPERANDS[operation_kind]
        if not isinstance(operand, operand_type):
            raise TypeError(
                f"{operation_kind.value} expects {operand_type.__name__}, "
                f"got {type(operand).__name__}"
            )
        if context is not None and operand.context != context:
            raise TypeError(
                f"{operation_kind.value} expects id context {context.value}, "
                f"got {operand.context.value}"
            )

    def _record(
        self,
        operation_kind: OperationKind,
        result: PipelineResult,
        duration: float,
    ) -> None:
        """Record run metrics and the closing audit entry."""
        tags = {"operation_kind": operation_kind.value}
        outcome = "proceed"

        self.metrics_collector.record_count("pipeline_runs_total", 1, tags)
        if isinstance(result, Rejected):
            outcome = result.failure_kind.value
            self.metrics_collector.record_count(
                "pipeline_rejections_total",
                1,
                {
                    **tags,
                    "failure_kind": result.failure_kind.value,
                    "stage": result.stage_name,
                },
            )
        self.metrics_collector.record_timing("pipeline_duration_seconds", duration, tags)
        self.audit_logger.log_pipeline_end(operation_kind.value, outcome, duration)

        logger.debug(f"Pipeline {operation_kind.value} finished: {outcome}")


def build_pipeline(
    config: Optional[PipelineConfig],
    audit_logger: AuditLoggerProtocol,
    metrics_collector: MetricsCollectorProtocol,
    random_source: Optional[RandomSource] = None,
) -> StagedValidationPipeline:
    """
    Assemble the standard nine-stage pipeline from configuration.

    Args:
        config: Pipeline configuration (defaults when None)
        audit_logger: For the per-run audit trail
        metrics_collector: For run counters and timings
        random_source: Overrides the seeded source of the bulk rule

    Returns:
        Ready-to-use StagedValidationPipeline
    """
    config = config or PipelineConfig()
    injector = RandomFailureInjector(
        probability=config.bulk_failure_probability,
        source=random_source,
        seed=config.random_seed,
    )
    rule = RecommendationRule(sentinels=config.sentinels, injector=injector)
    return StagedValidationPipeline(
        stages=build_stage_table(rule),
        audit_logger=audit_logger,
        metrics_collector=metrics_collector,
    )
