"""Pin arrangement settings for concentric connector rings, and their validation."""

from __future__ import annotations

import math
import re
import struct
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

OFFSET_MIN = 0.1
OFFSET_MAX = 1.0
PIN_SUM_MESSAGE = "Total No of Pins and Sum Of Concentric Pins Must Be Equal"

_INT_PATTERN = re.compile(r"\s*[+-]?\d+\s*")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


class ConfigError(ValueError):
    """Raised when ring settings fail validation; holds every message found."""

    def __init__(self, messages: Iterable[str]):
        self.messages = tuple(messages)
        super().__init__("; ".join(self.messages))


@dataclass(frozen=True)
class PinConfig:
    """Pin counts and radial offsets of each ring, plus the rotation angle."""

    ring_pins: tuple[int, ...] = ()
    ring_offsets: tuple[float, ...] = ()
    angle: float = 0.0
    total_pins: int = 0

    @property
    def ring_count(self) -> int:
        """Number of rings that have both a pin count and an offset."""
        return min(len(self.ring_pins), len(self.ring_offsets))


def resize_labels(labels: Iterable[str], count: int) -> list[str]:
    """Grow the labels with "Item N" defaults, or cut them down, to ``count``."""
    if count < 0:
        raise ValueError(f"ring count must not be negative: {count}")
    result = list(labels)
    if count > len(result):
        result.extend(f"Item {i + 1}" for i in range(len(result), count))
    else:
        del result[count:]
    return result


def _parse_int(text: str) -> int | None:
    if not _INT_PATTERN.fullmatch(text):
        return None
    value = int(text)
    if not _INT_MIN <= value <= _INT_MAX:
        return None
    return value


def _parse_float(text: str) -> float | None:
    if "_" in text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    try:
        # Offsets are held in single precision.
        (single,) = struct.unpack("f", struct.pack("f", value))
    except OverflowError:
        return None
    return single


def build_config(
    total_pins: int,
    angle: float,
    pin_texts: Sequence[str],
    offset_texts: Sequence[str],
) -> PinConfig:
    """Validate the ring entries and return the resulting configuration.

    Raises ConfigError with every problem found, or ValueError when the two
    lists differ in length.
    """
    if len(pin_texts) != len(offset_texts):
        raise ValueError("pin counts and offsets must have the same length")

    errors: list[str] = []
    pins: list[int] = []
    offsets: list[float] = []
    total_sum = 0

    for pin_text, offset_text in zip(pin_texts, offset_texts):
        value = _parse_int(pin_text)
        if value is None:
            errors.append(f"Invalid integer in item {pin_text}")
        else:
            total_sum += value
            pins.append(value)

        offset = _parse_float(offset_text)
        if offset is None:
            errors.append(f"Invalid float in item {pin_text}")
        elif offset < OFFSET_MIN or offset > OFFSET_MAX:
            errors.append(f"Value must be between 0.1 and 0.9 in item {pin_text}")
        else:
            offsets.append(offset)

    if total_sum != total_pins:
        errors.append(PIN_SUM_MESSAGE)

    if errors:
        raise ConfigError(errors)

    return PinConfig(
        ring_pins=tuple(pins),
        ring_offsets=tuple(offsets),
        angle=float(angle),
        total_pins=int(total_pins),
    )