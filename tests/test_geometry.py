import math

import pytest

from pinmap.config import PinConfig
from pinmap.geometry import COLORS, ColoredLine, Point, compute_layout

CONFIG = PinConfig(ring_pins=(4, 6), ring_offsets=(0.5, 0.8), angle=0.0, total_pins=10)


def test_pin_count_matches_rings():
    layout = compute_layout(1200, 600, CONFIG)
    assert len(layout.left_pins) == 10
    assert len(layout.right_pins) == 10


def test_centers_are_symmetric():
    layout = compute_layout(1200, 600, CONFIG)
    assert layout.left_center.y == layout.right_center.y
    assert layout.left_center.x + layout.right_center.x == 1200


def test_pins_lie_on_their_ring():
    layout = compute_layout(1200, 600, CONFIG)
    radii = [layout.outer_radius * (1 - 0.5)] * 4 + [layout.outer_radius * (1 - 0.8)] * 6
    for pin, radius in zip(layout.left_pins, radii):
        distance = math.hypot(pin.x - layout.left_center.x, pin.y - layout.left_center.y)
        assert abs(distance - radius) <= 1.5


def test_first_pin_without_rotation_is_to_the_right():
    layout = compute_layout(1200, 600, CONFIG)
    first = layout.left_pins[0]
    assert first.y == layout.left_center.y
    assert first.x > layout.left_center.x


def test_rotation_moves_first_pin_upwards():
    config = PinConfig(ring_pins=(4,), ring_offsets=(0.5,), angle=90.0, total_pins=4)
    layout = compute_layout(1200, 600, config)
    first = layout.left_pins[0]
    assert first.y < layout.left_center.y
    assert abs(first.x - layout.left_center.x) <= 1


def test_rotation_angle_is_truncated():
    base = PinConfig(ring_pins=(4,), ring_offsets=(0.5,), angle=30.0, total_pins=4)
    fractional = PinConfig(ring_pins=(4,), ring_offsets=(0.5,), angle=30.9, total_pins=4)
    assert compute_layout(1200, 600, base) == compute_layout(1200, 600, fractional)


def test_empty_config_has_no_pins():
    layout = compute_layout(800, 600, PinConfig())
    assert layout.left_pins == ()
    assert layout.right_pins == ()


def test_rings_limited_by_shorter_list():
    config = PinConfig(ring_pins=(4, 4), ring_offsets=(0.5,), total_pins=8)
    layout = compute_layout(1200, 600, config)
    assert len(layout.left_pins) == 4


def test_pin_radius_smaller_than_outer_radius():
    layout = compute_layout(1200, 600, CONFIG)
    assert 0 < layout.pin_radius < layout.outer_radius
    assert layout.font_size <= layout.pin_radius


def test_label_position_near_pin():
    layout = compute_layout(1200, 600, CONFIG)
    pin = layout.left_pins[0]
    label = layout.label_position(pin)
    assert label.x <= pin.x
    assert label.y >= pin.y
    assert abs(label.x - pin.x) <= layout.pin_radius


def test_line_endpoints_in_range():
    layout = compute_layout(1200, 600, CONFIG)
    line = ColoredLine(0, 3, COLORS[0])
    assert layout.line_endpoints(line) == (layout.left_pins[0], layout.right_pins[3])


def test_line_endpoints_out_of_range():
    layout = compute_layout(1200, 600, CONFIG)
    assert layout.line_endpoints(ColoredLine(10, 0, COLORS[1])) is None
    assert layout.line_endpoints(ColoredLine(0, 10, COLORS[1])) is None
    assert layout.line_endpoints(ColoredLine(-1, 0, COLORS[1])) is None


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        compute_layout(-1, 600, CONFIG)