"""Test-layer conftest: marker registration."""

from __future__ import annotations


def pytest_configure(config):
    """Register custom markers so --strict-markers does not complain."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, no browser)")
    config.addinivalue_line("markers", "e2e: End-to-end Playwright journeys against ngx-admin")
    config.addinivalue_line("markers", "slow: Slow-running tests")
    config.addinivalue_line("markers", "self_healing: Tests with self-healing retry capability")
