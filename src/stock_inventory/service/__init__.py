"""
Service Package - Operation Entry Points.

    - StockService: one method per CRUD verb, each guarded by the
      validation pipeline
"""

from stock_inventory.service.stock_service import StockService

__all__ = ["StockService"]
