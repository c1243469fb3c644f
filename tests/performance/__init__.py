"""
Performance Tests.

Statistical and timing checks for the validation pipeline:
    - Bulk failure rate near the configured probability over 10,000 runs
    - 10,000 lookups < 5 seconds
"""
