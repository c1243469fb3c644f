"""
Pipeline Package - Staged Validation of Request Operands.

Components:
    - AnalysisStage / build_stage_table: the nine ranked stages
    - RecommendationRule / RandomFailureInjector: terminal failure rules
    - StagedValidationPipeline: driver running stages in rank order

Design Principles:
    - Stage table is immutable and shared across requests
    - First rejection ends the run; nothing is retried
    - Storage-agnostic
"""

from stock_inventory.pipeline.failure_injection import (
    RandomFailureInjector,
    RecommendationRule,
    RuleViolation,
)
from stock_inventory.pipeline.staged_pipeline import (
    StagedValidationPipeline,
    build_operand,
    build_pipeline,
)
from stock_inventory.pipeline.stages import (
    STAGE_COUNT,
    STAGE_DEFINITIONS,
    AnalysisStage,
    build_stage_table,
)

__all__ = [
    "RandomFailureInjector",
    "RecommendationRule",
    "RuleViolation",
    "StagedValidationPipeline",
    "build_operand",
    "build_pipeline",
    "STAGE_COUNT",
    "STAGE_DEFINITIONS",
    "AnalysisStage",
    "build_stage_table",
]
