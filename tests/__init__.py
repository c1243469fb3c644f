"""
Test Suite for Stock Inventory.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: HTTP API and CLI end to end
    - performance/: Bulk failure statistics and throughput
    - fixtures/: Shared test fixtures and sample data

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest -m "not performance"             # Skip statistical runs
"""
