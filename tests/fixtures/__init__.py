"""
Test Fixtures - Shared Test Data and Helpers.

This package contains reusable test fixtures:
    - sample_config.yaml: Sample configuration for testing
    - seed_stocks.yaml: Sample seed records
    - SequenceRandomSource: Replays fixed draws for the bulk rule

Usage:
    Import fixtures in test files via pytest fixtures or direct import.
"""

from __future__ import annotations

from typing import Iterable


class SequenceRandomSource:
    """Random source replaying fixed draws, cycling when exhausted."""

    def __init__(self, draws: Iterable[float]) -> None:
        self.draws = list(draws)
        self.calls = 0

    def random(self) -> float:
        draw = self.draws[self.calls % len(self.draws)]
        self.calls += 1
        return draw
