"""Unit tests for the Page Object Model base class (no browser required).

Tests the POM framework logic using mocked Playwright Page objects.
"""

from __future__ import annotations

import os
from unittest.mock import MagicMock, patch

import pytest
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from ngx_e2e.pages.base_page import BasePage


@pytest.mark.unit
class TestBasePageInit:
    """Verify BasePage construction and URL building."""

    def test_default_base_url(self):
        page = MagicMock()
        with patch.dict(os.environ, {"BASE_URL": ""}):
            bp = BasePage(page)
        assert bp.base_url == "http://localhost:4200"

    def test_base_url_from_env(self):
        page = MagicMock()
        with patch.dict(os.environ, {"BASE_URL": "https://demo.akveo.com/ngx-admin/"}):
            bp = BasePage(page)
        assert bp.base_url == "https://demo.akveo.com/ngx-admin"

    def test_custom_base_url_strips_trailing_slash(self):
        page = MagicMock()
        bp = BasePage(page, "https://example.com/")
        assert bp.base_url == "https://example.com"

    def test_navigate_builds_full_url(self):
        page = MagicMock()
        bp = BasePage(page, "https://example.com")
        bp.path = "/pages/forms/layouts"
        bp.navigate()
        page.goto.assert_called_once_with("https://example.com/pages/forms/layouts")

    def test_title_delegates_to_page(self):
        page = MagicMock()
        page.title.return_value = "ngx-admin Demo Application"
        bp = BasePage(page, "http://localhost:4200")
        assert bp.title == "ngx-admin Demo Application"

    def test_url_delegates_to_page(self, mock_page):
        bp = BasePage(mock_page, "http://localhost:4200")
        assert bp.url == "http://localhost:4200/pages/iot-dashboard"


@pytest.mark.unit
class TestSelfHealingFind:
    """Verify the self-healing locator fallback chain."""

    def test_returns_primary_when_visible(self):
        page = MagicMock()
        locator = MagicMock()
        page.locator.return_value = locator

        bp = BasePage(page, "http://localhost:4200")
        result = bp.find("ngx-temperature-dragger")

        assert result is locator
        page.locator.assert_called_once_with("ngx-temperature-dragger")

    def test_falls_back_when_primary_fails(self):
        page = MagicMock()
        primary_locator = MagicMock()
        primary_locator.first.wait_for.side_effect = PlaywrightTimeoutError("not found")
        fallback_locator = MagicMock()
        page.locator.side_effect = [primary_locator, fallback_locator]

        bp = BasePage(page, "http://localhost:4200")
        result = bp.find('nb-tab[tabtitle="Temperature"]', fallbacks=('[tabtitle="Temperature"]',))

        assert result is fallback_locator

    def test_raises_timeout_when_all_fail(self):
        page = MagicMock()
        locator = MagicMock()
        locator.first.wait_for.side_effect = PlaywrightTimeoutError("nope")
        page.locator.return_value = locator

        bp = BasePage(page, "http://localhost:4200")

        with pytest.raises(TimeoutError, match="exhausted"):
            bp.find("nb-toast", fallbacks=(".toast", '[role="alert"]'))

    def test_tries_all_selectors_in_order(self):
        page = MagicMock()
        failing = MagicMock()
        failing.first.wait_for.side_effect = PlaywrightTimeoutError("hidden")
        success = MagicMock()
        page.locator.side_effect = [failing, failing, success]

        bp = BasePage(page, "http://localhost:4200")
        result = bp.find("primary", fallbacks=("fallback1", "fallback2"))

        assert result is success
        assert [c.args[0] for c in page.locator.call_args_list] == ["primary", "fallback1", "fallback2"]


@pytest.mark.unit
class TestWaiting:

    def test_wait_for_load_defaults_to_networkidle(self):
        page = MagicMock()
        BasePage(page, "http://localhost:4200").wait_for_load()
        page.wait_for_load_state.assert_called_once_with("networkidle")

    def test_visibility_helpers_report_timeouts_as_false(self):
        locator = MagicMock()
        locator.wait_for.side_effect = PlaywrightTimeoutError("Timeout")
        bp = BasePage(MagicMock(), "http://localhost:4200")

        assert bp.is_visible_within(locator) is False
        assert bp.is_hidden_within(locator) is False
