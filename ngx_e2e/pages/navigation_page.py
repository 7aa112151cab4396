"""Sidebar navigation across the ngx-admin demo sections."""

from __future__ import annotations

import logging

from playwright.sync_api import Locator, Page

from .base_page import BasePage

logger = logging.getLogger("ngx-e2e.pom.navigation")


class NavigationPage(BasePage):
    """Page object for the left-hand menu."""

    path = "/"

    def __init__(self, page: Page, base_url: str | None = None) -> None:
        super().__init__(page, base_url)
        self._form_layouts_item = page.locator('//a[normalize-space()="Form Layouts"]')
        self._datepicker_item = page.locator('//a[normalize-space()="Datepicker"]')
        self._smart_table_item = page.locator('//a[normalize-space()="Smart Table"]')
        self._toastr_item = page.locator('//a[normalize-space()="Toastr"]')
        self._tooltip_item = page.locator('//a[normalize-space()="Tooltip"]')

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def select_group_menu_item(self, group_title: str) -> None:
        """Expand a menu group, leaving it alone if it is already open."""
        group = self.page.locator(f'a[title="{group_title}"]')
        if group.get_attribute("aria-expanded") == "false":
            logger.debug("Expanding menu group %s", group_title)
            group.click()

    def _open(self, group_title: str, item: Locator, route: str) -> None:
        self.select_group_menu_item(group_title)
        item.click()
        self.page.wait_for_url(f"**{route}")

    def form_layouts_page(self) -> None:
        self._open("Forms", self._form_layouts_item, "/forms/layouts")

    def datepicker_page(self) -> None:
        self._open("Forms", self._datepicker_item, "/forms/datepicker")

    def smart_table_page(self) -> None:
        self._open("Tables & Data", self._smart_table_item, "/tables/smart-table")

    def toastr_page(self) -> None:
        self._open("Modal & Overlays", self._toastr_item, "/modal-overlays/toastr")

    def tooltip_page(self) -> None:
        self._open("Modal & Overlays", self._tooltip_item, "/modal-overlays/tooltip")

    def iot_dashboard_page(self) -> None:
        """The app lands on the IoT dashboard; just wait for it to settle."""
        self.wait_for_load("networkidle")
