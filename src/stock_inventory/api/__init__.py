"""
API Package - HTTP Boundary.

    - create_app: FastAPI application factory
    - routes.stocks: /api/v1/stocks endpoints
    - routes.health: liveness and readiness
    - errors: failure kind to status code mapping
"""

from stock_inventory.api.app import create_app, create_service

__all__ = ["create_app", "create_service"]
