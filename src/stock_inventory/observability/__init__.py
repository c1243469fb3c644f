"""
Observability Package - Structured Logging and Metrics.

    - ObservabilityManager: structlog logging with correlation IDs, plus
      in-memory events and metrics

Design Principles:
    - Structured logging via structlog
    - Correlation ID propagation for end-to-end tracing
"""

from stock_inventory.observability.observability_manager import (
    ObservabilityManager,
    get_correlation_id,
    set_correlation_id,
)

__all__ = [
    "ObservabilityManager",
    "get_correlation_id",
    "set_correlation_id",
]
