"""IoT dashboard status cards (light, coffee maker) and the header title."""

from __future__ import annotations

from playwright.sync_api import Page

from .base_page import BasePage


class DashboardPage(BasePage):

    path = "/pages/iot-dashboard"

    def __init__(self, page: Page, base_url: str | None = None) -> None:
        super().__init__(page, base_url)
        coffee_maker = page.locator("ngx-status-card", has_text="Coffee Maker").first
        self._coffee_maker_card = coffee_maker.locator("nb-card")
        # Renders "ON" or "OFF"
        self._coffee_maker_status = coffee_maker.locator(".status")
        self._light_button = page.get_by_role("button", name="Light")
        self._header_logo = page.locator("ngx-header .logo").first

    def coffee_maker_status_text(self) -> str:
        return (self._coffee_maker_status.text_content() or "").strip()

    def is_coffee_maker_on(self) -> bool:
        return self.coffee_maker_status_text().upper() == "ON"

    def turn_off_coffee_maker(self) -> bool:
        """Click the Coffee Maker card if it is on; return whether it now reads OFF."""
        if self.is_coffee_maker_on():
            self._coffee_maker_card.click()
            self.wait_until(lambda: not self.is_coffee_maker_on(), timeout=2_000)
        return self.coffee_maker_status_text().upper() == "OFF"

    def toggle_light(self) -> bool:
        """Click the Light card and return its new on/off state."""
        before = self.is_light_active()
        self._light_button.click()
        self.wait_until(lambda: self.is_light_active() != before, timeout=2_000)
        return self.is_light_active()

    def is_light_active(self) -> bool:
        classes = self._light_button.get_attribute("class") or ""
        return "active" in classes

    def header_title(self) -> str:
        """Text of the brand link in the header, e.g. ``ngx-admin``."""
        return (self._header_logo.text_content() or "").strip()
