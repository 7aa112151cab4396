"""Base Page Object with self-healing locator support.

Each page class inherits from BasePage and exposes high-level actions
instead of raw selectors, so journeys read as user intent and survive
markup changes in ngx-admin.

Self-healing: ``find()`` tries a primary selector, then falls back through
a list of alternatives.  Successful fallbacks are logged so the canonical
selector can be updated later.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Sequence

from playwright.sync_api import Locator, Page, expect

from ..utils.config import SHORT_TIMEOUT, get_base_url
from ..utils.waits import is_hidden_within, is_visible_within, wait_until

logger = logging.getLogger("ngx-e2e.pom")


class BasePage:
    """Common navigation and waiting for all ngx-admin page objects."""

    # Subclasses override with the page-specific route.
    path: str = "/"

    def __init__(self, page: Page, base_url: str | None = None) -> None:
        self.page = page
        self.base_url = (base_url or get_base_url()).rstrip("/")

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def navigate(self) -> None:
        """Go to the page's canonical URL."""
        url = f"{self.base_url}{self.path}"
        logger.info("Navigating to %s", url)
        self.page.goto(url)

    def reload(self) -> None:
        self.page.reload()

    @property
    def title(self) -> str:
        return self.page.title()

    @property
    def url(self) -> str:
        return self.page.url

    # ------------------------------------------------------------------
    # Self-healing locator
    # ------------------------------------------------------------------

    def find(
        self,
        primary: str,
        fallbacks: Sequence[str] = (),
        *,
        timeout: float = SHORT_TIMEOUT,
    ) -> Locator:
        """Locate an element with self-healing fallback chain.

        Parameters
        ----------
        primary:
            The preferred Playwright selector (CSS, XPath, text=, etc.).
        fallbacks:
            Ordered alternatives to try when *primary* is not visible
            within *timeout* ms.
        timeout:
            Milliseconds to wait for each selector before trying the next.

        Raises
        ------
        TimeoutError
            When none of the selectors resolve to a visible element.
        """
        all_selectors = [primary, *fallbacks]
        last_error: Exception | None = None

        for selector in all_selectors:
            try:
                locator = self.page.locator(selector)
                locator.first.wait_for(state="visible", timeout=timeout)
                if selector != primary:
                    logger.warning(
                        "Self-healed: primary '%s' failed, used fallback '%s'",
                        primary,
                        selector,
                    )
                return locator
            except Exception as exc:
                last_error = exc
                logger.debug("Selector '%s' not visible, trying next fallback", selector)

        raise TimeoutError(
            f"Self-healing exhausted all selectors: {all_selectors}"
        ) from last_error

    # ------------------------------------------------------------------
    # Waiting
    # ------------------------------------------------------------------

    def wait_for_load(self, state: str = "networkidle") -> None:
        """Wait until the page reaches the given load state."""
        self.page.wait_for_load_state(state)

    def wait_until(self, predicate: Callable[[], bool], *, timeout: float = SHORT_TIMEOUT) -> bool:
        return wait_until(predicate, timeout=timeout)

    def is_visible_within(self, locator: Locator, timeout: float = 2_000) -> bool:
        return is_visible_within(locator, timeout)

    def is_hidden_within(self, locator: Locator, timeout: float = 2_000) -> bool:
        return is_hidden_within(locator, timeout)

    # ------------------------------------------------------------------
    # Convenience helpers
    # ------------------------------------------------------------------

    def screenshot(self, path: str = "screenshot.png") -> bytes:
        """Capture a full-page screenshot."""
        return self.page.screenshot(path=path, full_page=True)

    def expect_url_contains(self, fragment: str, *, timeout: float = SHORT_TIMEOUT) -> None:
        """Assert that the current URL contains *fragment*."""
        expect(self.page).to_have_url(re.compile(f".*{re.escape(fragment)}"), timeout=timeout)
