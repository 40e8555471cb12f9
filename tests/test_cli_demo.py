from __future__ import annotations

import numpy as np

from etabar.cli import _explicit_positions, _step_durations
from etabar.colors import ANSI_COLORS


def test_demo_draws_every_step(capsys) -> None:
    from etabar.cli import main as cli_main

    rc = cli_main(["demo", "--total", "4", "--delay", "0", "--width", "60", "--force_tty"])
    assert rc == 0

    captured = capsys.readouterr()
    rows = captured.err.rstrip("\n").split("\r")[1:]
    assert len(rows) == 4
    for row, expected in zip(rows, ["25.00%", "50.00%", "75.00%", "100.00%"]):
        assert f"] {expected} " in row
    assert captured.out.startswith("Done: 4 steps in ")


def test_demo_explicit_steps(capsys) -> None:
    from etabar.cli import main as cli_main

    rc = cli_main(["demo", "--total", "10", "--step", "2.5", "--delay", "0", "--width", "60", "--force_tty"])
    assert rc == 0

    err = capsys.readouterr().err
    for expected in ["0.00%", "25.00%", "50.00%", "75.00%", "100.00%"]:
        assert f"] {expected} " in err


def test_demo_not_a_tty_draws_nothing(capsys) -> None:
    from etabar.cli import main as cli_main

    rc = cli_main(["demo", "--total", "3", "--delay", "0", "--width", "60"])
    assert rc == 0
    captured = capsys.readouterr()
    assert "\r" not in captured.err
    assert "Done: 3 steps" in captured.out


def test_demo_with_jitter_and_unknown_color(capsys) -> None:
    from etabar.cli import main as cli_main

    rc = cli_main(
        [
            "demo",
            "--total",
            "3",
            "--delay",
            "0",
            "--jitter",
            "0.001",
            "--seed",
            "5",
            "--fill_color",
            "chartreuse",
            "--width",
            "50",
            "--force_tty",
        ]
    )
    assert rc == 0
    err = capsys.readouterr().err
    assert "WARNING: unknown colour 'chartreuse'" in err
    assert ANSI_COLORS["default"] + "=" + ANSI_COLORS["default"] in err


def test_demo_rejects_bad_arguments(capsys) -> None:
    from etabar.cli import main as cli_main

    assert cli_main(["demo", "--total", "0"]) == 2
    assert "ERROR: --total" in capsys.readouterr().err
    assert cli_main(["demo", "--delay", "-1"]) == 2
    assert cli_main(["demo", "--step", "0"]) == 2
    assert cli_main(["demo", "--width", "-5"]) == 2


def test_eta_command(capsys) -> None:
    from etabar.cli import main as cli_main

    assert cli_main(["eta", "3661"]) == 0
    assert capsys.readouterr().out == "1 hour 1 minute 1 second\n"

    assert cli_main(["eta", "0.2"]) == 0
    assert capsys.readouterr().out == "1 second\n"


def test_colors_command(capsys) -> None:
    from etabar.cli import main as cli_main

    assert cli_main(["colors"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == len(ANSI_COLORS)
    assert "\033[0;31mred\033[0m" in lines


def test_step_durations_are_seeded() -> None:
    a = _step_durations(20, delay=0.01, jitter=0.5, seed=42)
    b = _step_durations(20, delay=0.01, jitter=0.5, seed=42)
    assert np.array_equal(a, b)
    assert a.shape == (20,)
    assert (a >= 0.01).all()
    assert np.array_equal(_step_durations(3, delay=0.2, jitter=0.0, seed=None), np.full(3, 0.2))


def test_explicit_positions_end_at_total() -> None:
    assert _explicit_positions(10, 2.5) == [0.0, 2.5, 5.0, 7.5, 10.0]
    assert _explicit_positions(3, 5) == [0.0, 3.0]
