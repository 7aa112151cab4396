"""Unit tests for ngx_e2e.utils.waits – condition polling helpers."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from ngx_e2e.utils.waits import is_hidden_within, is_visible_within, wait_until


@pytest.mark.unit
class TestWaitUntil:

    def test_returns_true_immediately(self):
        predicate = MagicMock(return_value=True)

        assert wait_until(predicate, timeout=1_000) is True
        predicate.assert_called_once()

    def test_polls_until_predicate_holds(self):
        predicate = MagicMock(side_effect=[False, False, True])

        assert wait_until(predicate, timeout=2_000, interval=1) is True
        assert predicate.call_count == 3

    def test_times_out(self):
        predicate = MagicMock(return_value=False)

        assert wait_until(predicate, timeout=30, interval=5) is False
        assert predicate.call_count >= 2

    def test_zero_timeout_checks_once(self):
        predicate = MagicMock(return_value=False)

        assert wait_until(predicate, timeout=0) is False
        predicate.assert_called_once()


@pytest.mark.unit
class TestLocatorStateHelpers:

    def test_visible_within(self):
        locator = MagicMock()

        assert is_visible_within(locator, 500) is True
        locator.wait_for.assert_called_once_with(state="visible", timeout=500)

    def test_visible_timeout_becomes_false(self):
        locator = MagicMock()
        locator.wait_for.side_effect = PlaywrightTimeoutError("Timeout 500ms exceeded")

        assert is_visible_within(locator, 500) is False

    def test_hidden_within(self):
        locator = MagicMock()

        assert is_hidden_within(locator, 750) is True
        locator.wait_for.assert_called_once_with(state="hidden", timeout=750)

    def test_other_errors_propagate(self):
        locator = MagicMock()
        locator.wait_for.side_effect = RuntimeError("browser closed")

        with pytest.raises(RuntimeError):
            is_hidden_within(locator)
