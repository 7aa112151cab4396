"""Coordinate mapping for circular drag controls.

The IoT dashboard's temperature dragger is an SVG arc with no keyboard or
value API, so the only way to set it is to drag a synthetic pointer. This
module turns a target value into the screen point on that arc and drives
the press-move-release sequence.

Positioning is approximate: hit-testing belongs to the third-party widget,
so callers should assert within a tolerance window.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Protocol

logger = logging.getLogger("ngx-e2e.slider")


class Mouse(Protocol):
    """Subset of ``playwright.sync_api.Mouse`` used for dragging."""

    def move(self, x: float, y: float, *, steps: int = ...) -> None: ...

    def down(self) -> None: ...

    def up(self) -> None: ...


@dataclass(frozen=True)
class BoundingBox:
    """Screen rectangle of an element, as reported by Playwright."""

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_playwright(cls, box: dict[str, Any] | None) -> "BoundingBox | None":
        if box is None:
            return None
        return cls(x=box["x"], y=box["y"], width=box["width"], height=box["height"])

    @property
    def center(self) -> tuple[float, float]:
        return self.x + self.width / 2, self.y + self.height / 2


@dataclass(frozen=True)
class SliderGeometry:
    """Value range and arc of a circular slider.

    Angles are in radians, measured the way screen coordinates run (y grows
    downward), so 225°..315° is the arc across the top of the dial.
    """

    minimum: float = 10.0
    maximum: float = 35.0
    start_angle: float = math.pi * 1.25
    end_angle: float = math.pi * 1.75
    radius_ratio: float = 0.4

    def __post_init__(self) -> None:
        if self.maximum <= self.minimum:
            raise ValueError(
                f"Slider maximum ({self.maximum}) must be greater than minimum ({self.minimum})"
            )
        if self.end_angle < self.start_angle:
            raise ValueError("Slider end angle must not precede its start angle")
        if self.radius_ratio <= 0:
            raise ValueError("Slider radius ratio must be positive")


@dataclass(frozen=True)
class SliderTarget:
    """Result of mapping a value onto the slider arc."""

    value: float
    fraction: float
    angle: float
    center_x: float
    center_y: float
    radius: float
    x: float
    y: float

    @property
    def angle_degrees(self) -> float:
        return math.degrees(self.angle)

    @property
    def center(self) -> tuple[float, float]:
        return self.center_x, self.center_y


def clamp(value: float, minimum: float, maximum: float) -> float:
    return min(max(value, minimum), maximum)


def value_to_fraction(value: float, minimum: float, maximum: float) -> float:
    """Normalize *value* into ``[0, 1]`` after clamping it to the range."""
    return (clamp(value, minimum, maximum) - minimum) / (maximum - minimum)


def fraction_to_angle(fraction: float, start_angle: float, end_angle: float) -> float:
    return start_angle + fraction * (end_angle - start_angle)


def compute_slider_target(
    value: float,
    box: BoundingBox,
    geometry: SliderGeometry = SliderGeometry(),
) -> SliderTarget:
    """Map *value* to the screen point on the arc inscribed in *box*."""
    clamped = clamp(value, geometry.minimum, geometry.maximum)
    fraction = value_to_fraction(clamped, geometry.minimum, geometry.maximum)
    angle = fraction_to_angle(fraction, geometry.start_angle, geometry.end_angle)

    center_x, center_y = box.center
    radius = min(box.width, box.height) * geometry.radius_ratio

    return SliderTarget(
        value=clamped,
        fraction=fraction,
        angle=angle,
        center_x=center_x,
        center_y=center_y,
        radius=radius,
        x=center_x + radius * math.cos(angle),
        y=center_y + radius * math.sin(angle),
    )


def drag_pointer(
    mouse: Mouse,
    start: tuple[float, float],
    target: tuple[float, float],
    *,
    steps: int = 5,
) -> None:
    """Press at *start*, move to *target* in *steps* increments, release."""
    logger.debug("Dragging pointer from %s to %s in %d steps", start, target, steps)
    mouse.move(start[0], start[1])
    mouse.down()
    mouse.move(target[0], target[1], steps=steps)
    mouse.up()
