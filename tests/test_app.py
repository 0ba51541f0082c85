import io
import random

import pytest

from pinmap.app import ConfigDialog, ConnectorApp, main
from pinmap.config import ConfigError

SETUP = """\
total 6
rings 2
ring 1 2 0.5
ring 2 4 0.8
generate
update
"""


def run_script(text):
    out = io.StringIO()
    app = ConnectorApp(io.StringIO(text), out, 1200, 600, random.Random(3))
    status = app.run()
    return app, status, out.getvalue()


def test_generate_success():
    app, status, output = run_script(SETUP)
    assert status == 0
    assert "Pins Generated Successfully" in output
    assert app.config.ring_pins == (2, 4)


def test_generate_sum_mismatch():
    _, _, output = run_script("total 5\nrings 1\nring 1 4 0.5\ngenerate\n")
    assert "Error: Total No of Pins and Sum Of Concentric Pins Must Be Equal" in output


def test_default_ring_labels_are_rejected():
    _, _, output = run_script("total 0\nrings 1\ngenerate\n")
    assert "Error: Invalid integer in item Item 1" in output


def test_connection_is_shown():
    app, _, output = run_script(SETUP + "left 1\nright 2\nshow\n")
    assert "drawing from 1 to 2" in output
    assert "Line 1 -> 2 color #" in output
    assert len(app.session.lines) == 1
    assert sum(line.startswith("Pin ") for line in output.splitlines()) == 6


def test_right_placeholder_warns():
    _, _, output = run_script("right Select\n")
    assert "Error: Invalid Selection" in output


def test_reset_removes_lines():
    app, _, _ = run_script(SETUP + "left 1\nright 2\nreset\n")
    assert app.session.lines == []


def test_unknown_command_and_quit():
    app, _, output = run_script("frobnicate\nquit\ntotal 3\n")
    assert "Unknown command: frobnicate" in output
    assert app.dialog.total_pins == 0


def test_wrong_argument_count():
    _, _, output = run_script("ring 1\n")
    assert "Error: usage: ring I PINS OFFSET" in output


def test_config_dialog_labels_and_generate():
    dialog = ConfigDialog(total_pins=4)
    dialog.set_ring_count(1)
    assert dialog.pin_texts == ["Item 1"]
    dialog.set_ring(0, "4", "0.5")
    assert dialog.generate().ring_pins == (4,)


def test_config_dialog_generate_error():
    dialog = ConfigDialog(total_pins=4)
    dialog.set_ring_count(1)
    with pytest.raises(ConfigError):
        dialog.generate()


def test_config_dialog_missing_ring():
    dialog = ConfigDialog()
    with pytest.raises(IndexError):
        dialog.set_ring(0, "1", "0.5")


def test_main_runs_script(tmp_path, capsys):
    script = tmp_path / "pins.txt"
    script.write_text(SETUP + "show\n", encoding="utf-8")
    assert main(["--width", "1200", "--height", "600", str(script)]) == 0
    output = capsys.readouterr().out
    assert "Pins Generated Successfully" in output
    assert "Pin 6:" in output


def test_main_rejects_bad_size():
    with pytest.raises(SystemExit):
        main(["--width", "0"])