"""IoT dashboard temperature card with its circular dragger."""

from __future__ import annotations

import logging
import re

from playwright.sync_api import Locator, Page

from ..exceptions import ElementNotRenderedError
from ..slider import BoundingBox, SliderGeometry, SliderTarget, compute_slider_target, drag_pointer
from ..utils.config import SHORT_TIMEOUT
from .base_page import BasePage

logger = logging.getLogger("ngx-e2e.pom.temperature")

TEMPERATURE_GEOMETRY = SliderGeometry(minimum=10, maximum=35)


class TemperaturePage(BasePage):
    """Page object for the temperature/humidity card on the IoT dashboard."""

    path = "/pages/iot-dashboard"

    def __init__(
        self,
        page: Page,
        base_url: str | None = None,
        geometry: SliderGeometry = TEMPERATURE_GEOMETRY,
    ) -> None:
        super().__init__(page, base_url)
        self.geometry = geometry

        self._dragger = page.locator("ngx-temperature-dragger").first
        self._slider_circle = page.locator("circle").first
        self._value = page.locator(".value.temperature").first
        self._svg = page.locator("ngx-temperature-dragger svg").first

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def navigate_to_temperature_page(self) -> None:
        self.navigate()
        self.wait_for_load("networkidle")
        self._dragger.wait_for(state="visible")

    def click_temperature_tab(self) -> None:
        tab = self.find(
            'nb-tab[tabtitle="Temperature"]',
            fallbacks=('[tabtitle="Temperature"]', "text=Temperature"),
            timeout=SHORT_TIMEOUT,
        )
        tab.first.click()
        self._dragger.wait_for(state="visible")

    # ------------------------------------------------------------------
    # Slider
    # ------------------------------------------------------------------

    def _bounding_box(self, locator: Locator, description: str) -> BoundingBox:
        box = BoundingBox.from_playwright(locator.bounding_box())
        if box is None:
            raise ElementNotRenderedError(f"{description} not found or not visible")
        return box

    def set_temperature(self, target: float, *, steps: int = 5) -> SliderTarget:
        """Drag the temperature thumb towards *target* degrees and return the computed point.

        Raises :class:`ElementNotRenderedError` when the dragger's SVG or the
        thumb has no bounding box.
        """
        self._dragger.wait_for(state="visible")

        svg_box = self._bounding_box(self._svg, "Temperature SVG container")
        self._bounding_box(self._slider_circle, "Temperature slider circle")

        slider_target = compute_slider_target(target, svg_box, self.geometry)
        logger.info(
            "Setting temperature to %s (%.1f%%): center=(%.1f, %.1f) radius=%.1f angle=%.1f deg target=(%.1f, %.1f)",
            slider_target.value,
            slider_target.fraction * 100,
            slider_target.center_x,
            slider_target.center_y,
            slider_target.radius,
            slider_target.angle_degrees,
            slider_target.x,
            slider_target.y,
        )

        before = self.temperature_value()
        self._dragger.hover()
        drag_pointer(
            self.page.mouse,
            slider_target.center,
            (slider_target.x, slider_target.y),
            steps=steps,
        )
        self.wait_until(lambda: self.temperature_value() != before, timeout=1_000)
        return slider_target

    # ------------------------------------------------------------------
    # Readers
    # ------------------------------------------------------------------

    def temperature_value(self) -> str:
        return self._value.text_content() or ""

    def temperature_reading(self) -> float | None:
        """Numeric part of the displayed temperature, or None when there is none."""
        match = re.search(r"-?\d+(?:\.\d+)?", self.temperature_value())
        return float(match.group()) if match else None

    def circle_bounding_box(self) -> BoundingBox | None:
        return BoundingBox.from_playwright(self._slider_circle.bounding_box())

    def svg_bounding_box(self) -> BoundingBox | None:
        return BoundingBox.from_playwright(self._svg.bounding_box())

    def hover_on_slider(self) -> None:
        self._slider_circle.hover()

    def is_slider_visible(self) -> bool:
        return self._slider_circle.is_visible()
