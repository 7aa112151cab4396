"""Toastr page: configuring and inspecting Nebular toast notifications."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from playwright.sync_api import Locator, Page

from .base_page import BasePage

logger = logging.getLogger("ngx-e2e.pom.toaster")

POSITIONS = ("top-right", "top-left", "bottom-right", "bottom-left", "top-center", "bottom-center")
TOAST_TYPES = ("success", "info", "warning", "primary", "danger")


@dataclass(frozen=True)
class ToastText:
    title: str
    content: str


@dataclass
class ToastConfig:
    """Optional settings applied before showing a toast; None leaves a field as is."""

    position: str | None = None
    title: str | None = None
    content: str | None = None
    timeout: int | None = None
    type: str | None = None
    prevent_duplicates: bool | None = None
    hide_on_click: bool | None = None


def position_from_classes(classes: str) -> str:
    for position in POSITIONS:
        if position in classes:
            return position
    return "unknown"


def type_from_classes(classes: str) -> str:
    for toast_type in TOAST_TYPES:
        if toast_type in classes:
            return toast_type
    return "unknown"


class ToasterPage(BasePage):

    path = "/pages/modal-overlays/toastr"

    def __init__(self, page: Page, base_url: str | None = None) -> None:
        super().__init__(page, base_url)

        # Configuration
        self._position_select = page.locator('nb-select[placeholder="Position"]').or_(
            page.locator('select[ng-reflect-model="top-right"]')
        )
        self._title_input = page.locator('input[placeholder="Title"]')
        self._content_input = page.locator('input[placeholder="Content"]')
        self._timeout_input = page.locator('input[placeholder="Timeout"]')
        self._type_select = page.locator('nb-select[placeholder="Toast type"]').or_(
            page.locator('select[ng-reflect-model="success"]')
        )
        self._prevent_duplicates = page.locator(
            'nb-checkbox:has-text("Prevent arising of duplicate toast")'
        ).or_(page.locator('input[type="checkbox"]').first)
        self._hide_on_click = page.locator('nb-checkbox:has-text("Hide on click")').or_(
            page.locator('input[type="checkbox"]').nth(1)
        )

        # Toast buttons
        self._show_toast_button = page.locator('button:has-text("Show toast")')
        self._type_buttons = {
            toast_type: page.locator("button").filter(
                has_text=re.compile(rf"^{toast_type.capitalize()}$")
            )
            for toast_type in TOAST_TYPES
        }

        # Clear buttons
        self._clear_all_button = page.locator('button:has-text("Clear all toasts")')
        self._clear_last_button = page.locator('button:has-text("Clear last toast")')

        # Rendered toasts
        self._container = page.locator("nb-toastr-container").or_(page.locator(".toastr-container"))
        self._toasts = page.locator("nb-toast").or_(page.locator(".toast"))

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def _choose_option(self, select: Locator, value: str) -> None:
        select.click()
        self.page.locator(f'nb-option[ng-reflect-value="{value}"]').or_(
            self.page.locator(f'option[value="{value}"]')
        ).click()

    def select_position(self, position: str) -> None:
        if position not in POSITIONS:
            raise ValueError(f"Unknown toast position: {position}")
        self._choose_option(self._position_select, position)

    def set_title(self, title: str) -> None:
        self._title_input.clear()
        self._title_input.fill(title)

    def set_content(self, content: str) -> None:
        self._content_input.clear()
        self._content_input.fill(content)

    def set_timeout(self, timeout: int) -> None:
        self._timeout_input.clear()
        self._timeout_input.fill(str(timeout))

    def select_toast_type(self, toast_type: str) -> None:
        if toast_type not in TOAST_TYPES:
            raise ValueError(f"Unknown toast type: {toast_type}")
        self._choose_option(self._type_select, toast_type)

    def _set_checkbox(self, checkbox: Locator, enable: bool) -> None:
        if checkbox.is_checked() != enable:
            checkbox.click()

    def toggle_prevent_duplicates(self, enable: bool = True) -> None:
        self._set_checkbox(self._prevent_duplicates, enable)

    def toggle_hide_on_click(self, enable: bool = True) -> None:
        self._set_checkbox(self._hide_on_click, enable)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def show_toast(self) -> None:
        self._show_toast_button.click()

    def show_quick_toast(self, toast_type: str) -> None:
        """Click one of the Success/Info/Warning/Primary/Danger quick buttons."""
        if toast_type not in TOAST_TYPES:
            raise ValueError(f"Unknown toast type: {toast_type}")
        self._type_buttons[toast_type].click()

    def show_success_toast(self) -> None:
        self.show_quick_toast("success")

    def show_info_toast(self) -> None:
        self.show_quick_toast("info")

    def show_warning_toast(self) -> None:
        self.show_quick_toast("warning")

    def show_primary_toast(self) -> None:
        self.show_quick_toast("primary")

    def show_danger_toast(self) -> None:
        self.show_quick_toast("danger")

    def clear_all_toasts(self) -> None:
        self._clear_all_button.click()

    def clear_last_toast(self) -> None:
        self._clear_last_button.click()

    def click_on_toast(self, index: int = 0) -> None:
        toast = self._toasts.nth(index)
        toast.wait_for(state="visible")
        toast.click()

    def configure_and_show_toast(self, config: ToastConfig) -> None:
        if config.position:
            self.select_position(config.position)
        if config.title:
            self.set_title(config.title)
        if config.content:
            self.set_content(config.content)
        if config.timeout is not None:
            self.set_timeout(config.timeout)
        if config.type:
            self.select_toast_type(config.type)
        if config.prevent_duplicates is not None:
            self.toggle_prevent_duplicates(config.prevent_duplicates)
        if config.hide_on_click is not None:
            self.toggle_hide_on_click(config.hide_on_click)
        logger.info("Showing toast with %s", config)
        self.show_toast()

    # ------------------------------------------------------------------
    # Readers
    # ------------------------------------------------------------------

    def wait_for_toasts_to_load(self) -> None:
        self._show_toast_button.wait_for(state="visible")

    def toast_count(self) -> int:
        return self._toasts.count()

    def toast_text(self, index: int = 0) -> ToastText:
        toast = self._toasts.nth(index)
        toast.wait_for(state="visible")
        title = toast.locator(".toast-title").or_(toast.locator("span").first).first.text_content() or ""
        content = toast.locator(".toast-message").or_(toast.locator("div").last).first.text_content() or ""
        return ToastText(title=title.strip(), content=content.strip())

    def is_toast_visible(self, index: int = 0) -> bool:
        return self.is_visible_within(self._toasts.nth(index), 2_000)

    def wait_for_toast_to_disappear(self, index: int = 0, timeout: float = 10_000) -> bool:
        return self.is_hidden_within(self._toasts.nth(index), timeout)

    def toast_position(self) -> str:
        self._container.first.wait_for(state="visible")
        return position_from_classes(self._container.first.get_attribute("class") or "")

    def toast_type(self, index: int = 0) -> str:
        toast = self._toasts.nth(index)
        toast.wait_for(state="visible")
        return type_from_classes(toast.get_attribute("class") or "")
