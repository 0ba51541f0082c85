"""Placement of connector pins on two facing circular faces."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import NamedTuple

from pinmap.config import PinConfig

Color = tuple[int, int, int]

COLORS: tuple[Color, ...] = (
    (255, 0, 0),
    (0, 255, 0),
    (0, 0, 255),
    (0, 0, 0),
)


class Point(NamedTuple):
    x: int
    y: int


@dataclass(frozen=True)
class ColoredLine:
    """A connection from a left-face pin index to a right-face pin index."""

    start_index: int
    end_index: int
    color: Color


@dataclass(frozen=True)
class PinLayout:
    """Pixel positions of both connector faces and all their pins."""

    outer_radius: int
    pin_radius: int
    font_size: int
    left_center: Point
    right_center: Point
    left_pins: tuple[Point, ...]
    right_pins: tuple[Point, ...]

    def label_position(self, pin: Point) -> Point:
        """Where the number of the pin at ``pin`` is written."""
        return Point(
            math.trunc(pin.x - self.pin_radius * 0.5),
            math.trunc(pin.y + self.pin_radius * 0.4),
        )

    def line_endpoints(self, line: ColoredLine) -> tuple[Point, Point] | None:
        """The two pin positions a line joins, or None if either is missing."""
        if 0 <= line.start_index < len(self.left_pins) and 0 <= line.end_index < len(
            self.right_pins
        ):
            return self.left_pins[line.start_index], self.right_pins[line.end_index]
        return None


def _ring_positions(center: Point, outer_radius: int, config: PinConfig, rotate: int):
    for count, offset in zip(config.ring_pins, config.ring_offsets):
        radius = outer_radius - outer_radius * offset
        for i in range(count):
            degrees = (360.0 / count) * i - rotate
            radians = degrees * (math.pi / 180.0)
            yield Point(
                math.trunc(center.x + radius * math.cos(radians)),
                math.trunc(center.y + radius * math.sin(radians)),
            )


def compute_layout(width: int, height: int, config: PinConfig) -> PinLayout:
    """Lay out both connector faces in a drawing area of the given size."""
    if width < 0 or height < 0:
        raise ValueError("width and height must not be negative")

    outer_radius = min(width, height) // 3 - 20
    spacing = math.trunc(outer_radius * 0.5)
    pin_radius = math.trunc(outer_radius * 0.06)
    font_size = math.trunc(pin_radius * 0.75)

    left_center = Point(width // 4 - spacing, height // 2)
    right_center = Point(3 * width // 4 + spacing, height // 2)
    rotate = math.trunc(config.angle)

    return PinLayout(
        outer_radius=outer_radius,
        pin_radius=pin_radius,
        font_size=font_size,
        left_center=left_center,
        right_center=right_center,
        left_pins=tuple(_ring_positions(left_center, outer_radius, config, rotate)),
        right_pins=tuple(_ring_positions(right_center, outer_radius, config, rotate)),
    )