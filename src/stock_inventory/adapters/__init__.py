"""
Adapters Package - Infrastructure Implementations.

Storage:
    - InMemoryStockRepository: Thread-safe dict-backed stock storage

Design Principles:
    - No business logic in adapters
    - Easily swappable via Dependency Injection
"""

from stock_inventory.adapters.memory_repository import InMemoryStockRepository

__all__ = ["InMemoryStockRepository"]
