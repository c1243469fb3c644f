"""
Stock Inventory - In-Memory Stock Records Behind a Staged Validation Pipeline.

A small HTTP service that keeps stock records in memory and exposes the
usual list, lookup, search, top-N and CRUD operations. Every request first
runs a fixed chain of nine analysis stages which re-validate the request
operand and may reject it with a typed failure before storage is touched.

Architecture:
    - Hexagonal Architecture (Ports & Adapters)
    - Dependency Injection for testability
    - Immutable stage table driven by a single pipeline driver
    - Configuration-driven behavior via YAML

Main Components:
    - domain: Stock records, operands and pipeline results
    - validation: Basic-validity predicates per operand kind
    - pipeline: Stage table, failure injection and the pipeline driver
    - service: Operation entry points (one per CRUD verb)
    - adapters: In-memory stock repository
    - api: FastAPI application and routes
    - config: Configuration models and loaders

Example:
    >>> from stock_inventory.config import InventoryConfig
    >>> from stock_inventory.domain import EntityId, OperationKind
    >>> from stock_inventory.pipeline.staged_pipeline import build_pipeline
    >>> from stock_inventory.observability import ObservabilityManager
    >>> obs = ObservabilityManager()
    >>> pipeline = build_pipeline(InventoryConfig().pipeline, obs, obs)
    >>> pipeline.evaluate(OperationKind.LOOKUP_BY_ID, EntityId(value=1))
    Proceed()

"""

import logging

__version__ = "0.1.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for Stock Inventory.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import stock_inventory
        >>> stock_inventory.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("stock_inventory").setLevel(level)
