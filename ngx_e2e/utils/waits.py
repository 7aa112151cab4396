"""Condition polling used in place of fixed sleeps."""

from __future__ import annotations

import logging
import time
from typing import Callable

from playwright.sync_api import Locator
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

logger = logging.getLogger("ngx-e2e.waits")


def wait_until(
    predicate: Callable[[], bool],
    *,
    timeout: float = 5_000,
    interval: float = 100,
) -> bool:
    """Poll *predicate* until it is truthy or *timeout* ms elapse.

    The predicate is always evaluated at least once, and once more after the
    deadline passes, so a zero timeout is a single check.
    """
    deadline = time.monotonic() + timeout / 1000
    while True:
        if predicate():
            return True
        if time.monotonic() >= deadline:
            return False
        time.sleep(interval / 1000)


def _wait_for_state(locator: Locator, state: str, timeout: float) -> bool:
    try:
        locator.wait_for(state=state, timeout=timeout)
        return True
    except PlaywrightTimeoutError:
        logger.debug("Locator did not become %s within %sms", state, timeout)
        return False


def is_visible_within(locator: Locator, timeout: float = 2_000) -> bool:
    """Return whether *locator* becomes visible within *timeout* ms."""
    return _wait_for_state(locator, "visible", timeout)


def is_hidden_within(locator: Locator, timeout: float = 2_000) -> bool:
    """Return whether *locator* becomes hidden within *timeout* ms."""
    return _wait_for_state(locator, "hidden", timeout)
