# pinmap

pinmap lays out the pins of a circular connector on concentric rings and
records wires between a pin on a left connector face and a pin on a right
connector face. Both faces share the same layout.

## Installing

    pip install .

To run the tests as well:

    pip install ".[test]"
    pytest

## Running

    pinmap [--width W] [--height H] [SCRIPT]

`pinmap` reads commands one per line from the file `SCRIPT`, or from standard
input when no file is given, until end of input or `quit` / `exit`.
`--width` and `--height` (default 800 and 600) set the size of the drawing
area, in pixels, that pin positions are computed for; both must be positive.
Blank lines and lines starting with `#` are skipped.

Commands:

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
    help                 list the commands
    quit                 leave

New rings start out with the placeholder entry `Item N`, which must be replaced
with `ring` before `generate` succeeds. `generate` checks every ring: the pin
count must be an integer, the offset a number from 0.1 to 1 (a fraction of the
outer radius, measured in from the edge), and the pin counts must add up to the
total. Every problem found is printed as an `Error:` line; otherwise
`Pins Generated Successfully` is printed.

After `update`, choose a left pin and then a right pin. Each `right` prints
`drawing from L to R` and gives the wire one of four colours, picked at
random: red, green, blue or black. A pin that has been used cannot be chosen
again until `reset`, and the right face can be chosen only after a left pin.
Choosing `Select` on the right is reported as `Invalid Selection`.

Example:

    total 8
    rings 2
    ring 1 6 0.2
    ring 2 2 0.6
    generate
    update
    left 1
    right 3
    show

`show` prints the centre and radius of each face, the position of every pin on
both faces, and each wire with its colour as `#rrggbb`.

## Using it as a library

    from pinmap.config import build_config
    from pinmap.geometry import compute_layout

    config = build_config(8, 0.0, ["6", "2"], ["0.2", "0.6"])
    layout = compute_layout(800, 600, config)

- `pinmap.config.build_config` returns a `PinConfig` (`ring_pins`,
  `ring_offsets`, `angle`, `total_pins`, `ring_count`). It raises
  `ConfigError`, whose `messages` holds every problem found, and `ValueError`
  when the two lists differ in length. `resize_labels` grows a list with
  `Item N` entries or cuts it down to a given length.
- `pinmap.geometry.compute_layout` returns a `PinLayout` with the outer and pin
  radii, font size, both face centres and the `Point` of every pin.
  `PinLayout.label_position` gives where a pin number is written, and
  `PinLayout.line_endpoints` the two end points of a `ColoredLine`, or `None`
  when either pin does not exist.
- `pinmap.session.Session` keeps the two pin selectors and the wires drawn. It
  has `fill`, `select_left`, `select_right` (returning the new `ColoredLine`,
  or `None`) and `reset`; it takes an optional `random.Random` for colours.
- `pinmap.app.ConnectorApp` runs the commands above over any text streams, and
  `ConfigDialog` holds the ring entries before they are validated.

## What it does not do

pinmap has no graphical window: it computes pin and wire positions and reports
them as text, but does not draw them. Configurations and wires are not saved
between runs.