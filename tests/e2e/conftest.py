"""Pytest configuration for E2E journeys with Playwright.

Journeys need a running ngx-admin instance at ``BASE_URL``; when it cannot
be reached every test in this directory is skipped.
"""

from __future__ import annotations

import logging
import os

import httpx
import pytest
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

from ngx_e2e.utils.config import (
    DEFAULT_TIMEOUT,
    NAVIGATION_TIMEOUT,
    VIEWPORT,
    get_base_url,
    get_directory_from_env,
    get_headless,
    get_slow_mo,
)

logger = logging.getLogger("ngx-e2e.tests")


@pytest.fixture(scope="session")
def base_url() -> str:
    """Base URL for the application."""
    return get_base_url()


@pytest.fixture(scope="session", autouse=True)
def _require_app(base_url):
    try:
        httpx.get(base_url, timeout=3.0, follow_redirects=True)
    except httpx.HTTPError as exc:
        pytest.skip(f"ngx-admin is not reachable at {base_url}: {exc}")


@pytest.fixture(scope="session")
def browser():
    """Launch browser for E2E tests."""
    with sync_playwright() as p:
        try:
            browser = p.chromium.launch(headless=get_headless(), slow_mo=get_slow_mo())
        except PlaywrightError as exc:
            pytest.skip(f"Chromium could not be launched: {exc}")
        yield browser
        browser.close()


@pytest.fixture()
def context(browser, base_url):
    """Isolated context per test: clean cookies and storage."""
    ctx = browser.new_context(viewport=VIEWPORT, base_url=base_url)
    ctx.set_default_timeout(DEFAULT_TIMEOUT)
    ctx.set_default_navigation_timeout(NAVIGATION_TIMEOUT)
    yield ctx
    ctx.close()


@pytest.fixture()
def page(context):
    """Create a new page for each test."""
    page = context.new_page()
    yield page
    page.close()


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Capture a screenshot when a journey fails."""
    outcome = yield
    report = outcome.get_result()

    if report.when != "call" or not report.failed:
        return
    page = item.funcargs.get("page")
    if page is None or page.is_closed():
        return

    screenshots_dir = get_directory_from_env(
        "NGX_SCREENSHOTS_DIR", os.path.join("test-results", "screenshots")
    )
    name = item.nodeid.replace("::", "_").replace("/", "_").replace("\\", "_")
    path = screenshots_dir / f"{name}.png"
    try:
        page.screenshot(path=str(path))
        logger.info("Failure screenshot saved to %s", path)
    except PlaywrightError as exc:
        logger.warning("Could not capture failure screenshot: %s", exc)
