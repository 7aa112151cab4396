"""Tooltip page: hover-triggered Nebular tooltips."""

from __future__ import annotations

import re

from playwright.sync_api import Locator, Page

from ..slider import BoundingBox
from ..utils.config import SHORT_TIMEOUT
from .base_page import BasePage

PLACEMENTS = ("top", "right", "bottom", "left")


class TooltipPage(BasePage):

    path = "/pages/modal-overlays/tooltip"

    def __init__(self, page: Page, base_url: str | None = None) -> None:
        super().__init__(page, base_url)
        self._default_button = page.locator('button:has-text("Show Tooltip")').first
        self._placement_buttons = {
            placement: page.locator(f'button:has-text("{placement.capitalize()}")').first
            for placement in PLACEMENTS
        }
        self._colored_button = page.get_by_role(
            "button", name=re.compile("colored tooltip", re.IGNORECASE)
        ).or_(page.locator("text=Colored Tooltips").first)
        self._with_icon_button = page.get_by_role(
            "button", name=re.compile("with icon", re.IGNORECASE)
        ).or_(page.locator("text=With Icon").first)
        self._tooltip = (
            page.locator("nb-tooltip")
            .or_(page.locator('[role="tooltip"]'))
            .or_(page.locator(".nb-tooltip"))
        )

    # ------------------------------------------------------------------
    # Hover actions
    # ------------------------------------------------------------------

    def _hover(self, target: Locator) -> None:
        target.hover()
        self.is_visible_within(self._tooltip.first, 1_000)

    def hover_on_default_tooltip(self) -> None:
        self._hover(self._default_button)

    def hover_on_placement(self, placement: str) -> None:
        """Hover the Top/Right/Bottom/Left demo button."""
        self._hover(self._placement_buttons[placement])

    def hover_on_colored_tooltip(self) -> None:
        self._hover(self._colored_button.first)

    def hover_on_icon_tooltip(self) -> None:
        self._hover(self._with_icon_button.first)

    def hover_on_button(self, text: str) -> None:
        self._hover(self.page.locator(f'button:has-text("{text}")').first)

    def move_mouse_away(self) -> None:
        self.page.mouse.move(0, 0)
        self.is_hidden_within(self._tooltip.first, 1_000)

    # ------------------------------------------------------------------
    # Readers
    # ------------------------------------------------------------------

    def tooltip_text(self) -> str:
        self._tooltip.first.wait_for(state="visible", timeout=SHORT_TIMEOUT)
        return self._tooltip.first.text_content() or ""

    def is_tooltip_visible(self) -> bool:
        return self.is_visible_within(self._tooltip.first, 2_000)

    def tooltip_bounding_box(self) -> BoundingBox | None:
        self._tooltip.first.wait_for(state="visible")
        return BoundingBox.from_playwright(self._tooltip.first.bounding_box())

    def placement_button_bounding_box(self, placement: str) -> BoundingBox | None:
        return BoundingBox.from_playwright(self._placement_buttons[placement].bounding_box())

    def tooltip_background_color(self) -> str:
        self._tooltip.first.wait_for(state="visible")
        return self._tooltip.first.evaluate("el => window.getComputedStyle(el).backgroundColor")

    def tooltip_disappears_on_mouse_move(self) -> bool:
        self.page.mouse.move(0, 0)
        return self.is_hidden_within(self._tooltip.first, 2_000)
