"""State of the two pin selectors and the connections drawn between them."""

from __future__ import annotations

import random

from pinmap.geometry import COLORS, ColoredLine

SELECT = "Select"


class Session:
    """Left and right pin selectors; choosing a right pin connects the pair."""

    def __init__(self, rng: random.Random | None = None):
        self._rng = rng if rng is not None else random.Random()
        self.total_pins = 0
        self.left_options: list[str] = [SELECT]
        self.right_options: list[str] = [SELECT]
        self.left_disabled: set[int] = set()
        self.right_disabled: set[int] = set()
        self.left_index = 0
        self.right_index = 0
        self.left_enabled = True
        self.right_enabled = True
        self.drawing = False
        self.lines: list[ColoredLine] = []

    @property
    def left_text(self) -> str:
        return self.left_options[self.left_index]

    @property
    def right_text(self) -> str:
        return self.right_options[self.right_index]

    def fill(self, total_pins: int) -> None:
        """Offer pins 1..total_pins on both sides; existing lines stay."""
        self.total_pins = total_pins
        options = [SELECT, *(str(i) for i in range(1, total_pins + 1))]
        self.left_options = list(options)
        self.right_options = list(options)
        self.left_index = 0
        self.right_index = 0
        self.left_enabled = True
        # Refilling the right selector passes through a "Select"/"Select"
        # choice, which disables both placeholders and the right selector.
        self.drawing = True
        self.left_disabled = {0}
        self.right_disabled = {0}
        self.right_enabled = False

    def _find(self, options: list[str], disabled: set[int], text: str) -> int:
        try:
            index = options.index(text)
        except ValueError:
            raise ValueError(f"no option {text!r}") from None
        if index in disabled:
            raise ValueError(f"option {text!r} is disabled")
        return index

    def select_left(self, text: str) -> None:
        """Choose the left pin; this enables the right selector."""
        if not self.left_enabled:
            raise ValueError("left selector is disabled")
        self.left_index = self._find(self.left_options, self.left_disabled, text)
        self.right_enabled = True

    def select_right(self, text: str) -> ColoredLine | None:
        """Choose the right pin and connect it to the chosen left pin.

        Returns the new line, or None when the pair names no valid pins.
        """
        if not self.right_enabled:
            raise ValueError("right selector is disabled")
        if text == SELECT:
            raise ValueError("Invalid Selection")
        self.right_index = self._find(self.right_options, self.right_disabled, text)

        self.drawing = True
        line = self._connect(self.left_text, self.right_text)

        self.left_disabled.add(self.left_index)
        self.right_disabled.add(self.right_index)
        self.left_index = 0
        self.right_enabled = self.left_text != SELECT
        return line

    def _connect(self, left_text: str, right_text: str) -> ColoredLine | None:
        try:
            start = int(left_text) - 1
            end = int(right_text) - 1
        except ValueError:
            return None
        if not (0 <= start < self.total_pins and 0 <= end < self.total_pins):
            return None
        line = ColoredLine(start, end, COLORS[self._rng.randrange(len(COLORS))])
        self.lines.append(line)
        return line

    def reset(self) -> None:
        """Clear all lines and re-enable the pin options."""
        self.drawing = False
        # Only options 1 .. total_pins - 1 are re-enabled.
        for index in range(1, self.total_pins):
            self.left_disabled.discard(index)
            self.right_disabled.discard(index)
        self.left_enabled = True
        self.right_enabled = True
        self.left_index = 0
        self.right_index = 0
        self.lines.clear()