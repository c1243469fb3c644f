"""
Unit Tests - Testing Individual Components in Isolation.

Each component is tested in isolation with test doubles where needed.
Unit tests should be fast, deterministic, and focused.

Test Files:
    - test_operand_validator.py: Basic validity per operand
    - test_stages.py: Stage table and single stage runs
    - test_failure_injection.py: Sentinel rules and random failures
    - test_staged_pipeline.py: Pipeline driver
    - test_config_loader.py: Configuration loading/validation
"""
