"""
Observability Manager - Structured Logging and Metrics for Pipeline Runs.

Provides:
    - Structured logging via structlog (JSON or console renderer)
    - Correlation ID propagation per pipeline run
    - In-memory event and metric recording

Design Notes:
    - Correlation ID lives in a ContextVar, so concurrent requests on
      different threads or tasks do not see each other's IDs
    - Event and metric stores are guarded by a lock
    - Implements both the audit-logger and metrics-collector protocols
      used by StagedValidationPipeline
"""

from __future__ import annotations

import logging
import threading
import uuid
from collections import deque
from contextvars import ContextVar
from datetime import datetime
from typing import Any, Deque, Dict, List, Optional

import structlog

_correlation_id: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)


def get_correlation_id() -> Optional[str]:
    """Get current correlation ID from context."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> None:
    """Set correlation ID in context."""
    _correlation_id.set(correlation_id)


class ObservabilityManager:
    """
    Unified observability: structured logging and metrics.

    Events are logged through structlog and kept in memory so tests and
    the CLI can inspect what a run did.
    """

    def __init__(
        self,
        service_name: str = "stock_inventory",
        use_json: bool = True,
        log_level: int = logging.INFO,
        max_events: int = 10_000,
    ) -> None:
        """
        Initialize observability manager.

        Args:
            service_name: Service name for log entries
            use_json: Render JSON lines instead of console output
            log_level: Logging level
            max_events: Oldest events, and oldest entries per metric, are
                dropped beyond this count
        """
        self.service_name = service_name
        self.use_json = use_json
        self.log_level = log_level
        self.max_events = max_events
        self._metrics: Dict[str, Deque[Dict[str, Any]]] = {}
        self._events: Deque[Dict[str, Any]] = deque(maxlen=max_events)
        self._lock = threading.Lock()

        self._configure_structlog()
        self._logger = structlog.get_logger(service_name)

    def _configure_structlog(self) -> None:
        """Configure structlog for structured logging."""
        processors = [
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]

        if self.use_json:
            processors.append(structlog.processors.JSONRenderer())
        else:
            processors.append(structlog.dev.ConsoleRenderer())

        structlog.configure(
            processors=processors,
            wrapper_class=structlog.make_filtering_bound_logger(self.log_level),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(),
            cache_logger_on_first_use=False,
        )

    def set_correlation_id(self, correlation_id: str) -> None:
        """
        Set correlation ID for current context.

        Args:
            correlation_id: Unique ID for request tracing
        """
        set_correlation_id(correlation_id)
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(correlation_id=correlation_id)

    def generate_correlation_id(self) -> str:
        """Generate and set a new correlation ID."""
        correlation_id = str(uuid.uuid4())
        self.set_correlation_id(correlation_id)
        return correlation_id

    def log_event(
        self,
        event_type: str,
        data: Optional[Dict[str, Any]] = None,
        level: str = "info",
    ) -> None:
        """
        Log a structured event.

        Args:
            event_type: Type of event (e.g., "pipeline_start", "stage_rejected")
            data: Additional event data
            level: Log level (debug, info, warning, error)
        """
        event_data = {
            "event_type": event_type,
            "recorded_at": datetime.now().isoformat(),
            "correlation_id": get_correlation_id(),
            **(data or {}),
        }

        with self._lock:
            self._events.append(event_data)

        log_method = getattr(self._logger, level.lower(), self._logger.info)
        payload = {k: v for k, v in event_data.items() if k != "correlation_id"}
        log_method(event_type, **payload)

    def record_metric(
        self,
        name: str,
        value: float,
        tags: Optional[Dict[str, str]] = None,
        metric_type: str = "gauge",
    ) -> None:
        """
        Record a metric value.

        Args:
            name: Metric name
            value: Metric value
            tags: Additional tags/labels
            metric_type: Type (gauge, counter, histogram)
        """
        metric_entry = {
            "timestamp": datetime.now().isoformat(),
            "value": value,
            "tags": tags or {},
            "type": metric_type,
            "correlation_id": get_correlation_id(),
        }

        with self._lock:
            self._metrics.setdefault(
                name, deque(maxlen=self.max_events)
            ).append(metric_entry)

    def get_trace_context(self) -> Dict[str, Any]:
        """Current correlation ID and service info."""
        return {
            "correlation_id": get_correlation_id(),
            "service_name": self.service_name,
            "timestamp": datetime.now().isoformat(),
        }

    def get_metrics(self) -> Dict[str, List[Dict[str, Any]]]:
        """Get all recorded metrics."""
        with self._lock:
            return {name: list(entries) for name, entries in self._metrics.items()}

    def metric_total(self, name: str, **tags: str) -> float:
        """Sum of a metric's values, optionally restricted to matching tags."""
        with self._lock:
            entries = list(self._metrics.get(name, []))
        return sum(
            e["value"]
            for e in entries
            if all(e["tags"].get(k) == v for k, v in tags.items())
        )

    def get_events(self, event_type: Optional[str] = None) -> List[Dict[str, Any]]:
        """Get recorded events, optionally of one type."""
        with self._lock:
            events = list(self._events)
        if event_type is None:
            return events
        return [e for e in events if e["event_type"] == event_type]

    def clear(self) -> None:
        """Clear all recorded metrics and events."""
        with self._lock:
            self._metrics.clear()
            self._events.clear()

    # =========================================================================
    # AuditLogger Protocol
    # =========================================================================

    def log_pipeline_start(
        self,
        operation_kind: str,
        operand: Dict[str, Any],
    ) -> None:
        """Log the start of a pipeline run."""
        self.log_event(
            "pipeline_start",
            {"operation_kind": operation_kind, **operand},
        )

    def log_stage_passed(self, stage_name: str, stage_rank: int) -> None:
        """Log a stage that handed over to the next one."""
        self.log_event(
            "stage_passed",
            {"stage_name": stage_name, "stage_rank": stage_rank},
            level="debug",
        )

    def log_stage_rejected(
        self,
        stage_name: str,
        stage_rank: int,
        failure_kind: str,
        message: str,
    ) -> None:
        """Log the stage that rejected the run."""
        level = "info" if failure_kind == "transient_rejection" else "warning"
        self.log_event(
            "stage_rejected",
            {
                "stage_name": stage_name,
                "stage_rank": stage_rank,
                "failure_kind": failure_kind,
                "message": message,
            },
            level=level,
        )

    def log_pipeline_end(
        self,
        operation_kind: str,
        outcome: str,
        duration_seconds: float,
    ) -> None:
        """Log the end of a pipeline run."""
        self.log_event(
            "pipeline_end",
            {
                "operation_kind": operation_kind,
                "outcome": outcome,
                "duration_seconds": duration_seconds,
            },
        )

    # =========================================================================
    # MetricsCollector Protocol
    # =========================================================================

    def record_timing(
        self,
        name: str,
        duration_seconds: float,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        """Record timing metric."""
        self.record_metric(name, duration_seconds, tags, metric_type="histogram")

    def record_count(
        self,
        name: str,
        value: int,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        """Record count metric."""
        self.record_metric(name, float(value), tags, metric_type="counter")
