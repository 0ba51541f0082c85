"""Command-driven connector pin mapping application."""

from __future__ import annotations

import argparse
import math
import random
import sys
from dataclasses import dataclass, field
from typing import Callable, TextIO

from pinmap.config import ConfigError, PinConfig, build_config, resize_labels
from pinmap.geometry import compute_layout
from pinmap.session import Session

HELP = """Commands:
  rings N              set the number of concentric rings
  ring I PINS OFFSET   set pin count and offset (0.1 .. 1) of ring I
  total N              set the total number of pins
  angle A              set the rotation angle in degrees
  generate             validate the rings and apply them
  update               refill the pin selectors
  left PIN             choose a pin on the left face
  right PIN            choose a pin on the right face and connect
  reset                remove all connections
  show                 print pin positions and connections
  quit                 leave"""


@dataclass
class ConfigDialog:
    """Editable ring settings before they are validated."""

    total_pins: int = 0
    angle: float = 0.0
    pin_texts: list[str] = field(default_factory=list)
    offset_texts: list[str] = field(default_factory=list)

    @property
    def ring_count(self) -> int:
        return len(self.pin_texts)

    def set_ring_count(self, count: int) -> None:
        self.pin_texts = resize_labels(self.pin_texts, count)
        self.offset_texts = resize_labels(self.offset_texts, count)

    def set_ring(self, index: int, pins: str, offset: str) -> None:
        if not 0 <= index < self.ring_count:
            raise IndexError(f"no ring {index + 1}")
        self.pin_texts[index] = pins
        self.offset_texts[index] = offset

    def generate(self) -> PinConfig:
        return build_config(self.total_pins, self.angle, self.pin_texts, self.offset_texts)


def _expect(args: list[str], count: int, usage: str) -> None:
    if len(args) != count:
        raise ValueError(f"usage: {usage}")


def _to_int(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        raise ValueError(f"invalid number {text!r}") from None


def _hex(color: tuple[int, int, int]) -> str:
    return "#{:02x}{:02x}{:02x}".format(*color)


class ConnectorApp:
    """Reads commands line by line and reports results."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        width: int = 800,
        height: int = 600,
        rng: random.Random | None = None,
    ):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.width = width
        self.height = height
        self.dialog = ConfigDialog()
        self.config = PinConfig()
        self.session = Session(rng)
        self._commands: dict[str, Callable[[list[str]], None]] = {
            "rings": self._rings,
            "ring": self._ring,
            "total": self._total,
            "angle": self._angle,
            "generate": self._generate,
            "update": self._update,
            "left": self._left,
            "right": self._right,
            "reset": self._reset,
            "show": self._show,
            "help": self._help,
        }

    def _say(self, text: str) -> None:
        print(text, file=self.stdout)

    def run(self) -> int:
        """Process commands until end of input or quit; returns the exit status."""
        for raw in self.stdin:
            parts = raw.split()
            if not parts or parts[0].startswith("#"):
                continue
            name, *args = parts
            if name in ("quit", "exit"):
                break
            handler = self._commands.get(name)
            if handler is None:
                self._say(f"Unknown command: {name}")
                continue
            try:
                handler(args)
            except ConfigError as exc:
                for message in exc.messages:
                    self._say(f"Error: {message}")
            except (ValueError, IndexError) as exc:
                self._say(f"Error: {exc}")
        return 0

    def _rings(self, args: list[str]) -> None:
        _expect(args, 1, "rings N")
        self.dialog.set_ring_count(_to_int(args[0]))

    def _ring(self, args: list[str]) -> None:
        _expect(args, 3, "ring I PINS OFFSET")
        self.dialog.set_ring(_to_int(args[0]) - 1, args[1], args[2])

    def _total(self, args: list[str]) -> None:
        _expect(args, 1, "total N")
        self.dialog.total_pins = _to_int(args[0])

    def _angle(self, args: list[str]) -> None:
        _expect(args, 1, "angle A")
        try:
            value = float(args[0])
        except ValueError:
            raise ValueError(f"invalid angle {args[0]!r}") from None
        if not math.isfinite(value):
            raise ValueError(f"invalid angle {args[0]!r}")
        self.dialog.angle = value

    def _generate(self, args: list[str]) -> None:
        _expect(args, 0, "generate")
        self.config = self.dialog.generate()
        self._say("Pins Generated Successfully")

    def _update(self, args: list[str]) -> None:
        _expect(args, 0, "update")
        self.session.fill(self.config.total_pins)

    def _left(self, args: list[str]) -> None:
        _expect(args, 1, "left PIN")
        self.session.select_left(args[0])

    def _right(self, args: list[str]) -> None:
        _expect(args, 1, "right PIN")
        line = self.session.select_right(args[0])
        if line is not None:
            self._say(f"drawing from {line.start_index + 1} to {line.end_index + 1}")

    def _reset(self, args: list[str]) -> None:
        _expect(args, 0, "reset")
        self.session.reset()

    def _show(self, args: list[str]) -> None:
        _expect(args, 0, "show")
        layout = compute_layout(self.width, self.height, self.config)
        left, right = layout.left_center, layout.right_center
        self._say(f"Left face: center ({left.x}, {left.y}) radius {layout.outer_radius}")
        self._say(f"Right face: center ({right.x}, {right.y}) radius {layout.outer_radius}")
        for number, (lp, rp) in enumerate(zip(layout.left_pins, layout.right_pins), 1):
            self._say(f"Pin {number}: left ({lp.x}, {lp.y}) right ({rp.x}, {rp.y})")
        for line in self.session.lines:
            if layout.line_endpoints(line) is not None:
                self._say(
                    f"Line {line.start_index + 1} -> {line.end_index + 1} color {_hex(line.color)}"
                )

    def _help(self, args: list[str]) -> None:
        self._say(HELP)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="pinmap", description="Map connections between two connector faces."
    )
    parser.add_argument("--width", type=int, default=800, help="drawing width in pixels")
    parser.add_argument("--height", type=int, default=600, help="drawing height in pixels")
    parser.add_argument("script", nargs="?", help="file of commands; standard input if omitted")
    args = parser.parse_args(argv)
    if args.width <= 0 or args.height <= 0:
        parser.error("width and height must be positive")

    if args.script:
        with open(args.script, encoding="utf-8") as handle:
            return ConnectorApp(handle, sys.stdout, args.width, args.height).run()
    return ConnectorApp(sys.stdin, sys.stdout, args.width, args.height).run()


if __name__ == "__main__":
    sys.exit(main())