"""
Integration Tests - End-to-End Request Tests.

These tests verify that the pipeline, service, storage and HTTP layer
work together. Bulk failures are pinned with SequenceRandomSource so
every run is reproducible.

Test Files:
    - test_stock_api.py: HTTP endpoints and status mapping
    - test_cli.py: serve / check / rules commands
"""
