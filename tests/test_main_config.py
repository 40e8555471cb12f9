from __future__ import annotations

import pytest

import main as main_module
from main import RunConfig


def test_default_config_maps_to_demo_argv() -> None:
    argv = RunConfig().to_argv()
    assert argv[0] == "demo"
    assert argv[argv.index("--total") + 1] == "100"
    assert argv[argv.index("--fill_color") + 1] == "light-green"
    assert "--force_tty" in argv
    assert "--step" not in argv
    assert "--width" not in argv


def test_optional_fields_are_forwarded() -> None:
    argv = RunConfig(step=2.5, width=72, seed=None, force_tty=False).to_argv()
    assert argv[argv.index("--step") + 1] == "2.5"
    assert argv[argv.index("--width") + 1] == "72"
    assert "--seed" not in argv
    assert "--force_tty" not in argv


@pytest.mark.parametrize(
    "kwargs",
    [
        {"total": 0},
        {"total": 2.5},
        {"delay": -0.1},
        {"jitter": -1},
        {"step": 0},
        {"fill_char": ""},
        {"fill_color": "chartreuse"},
        {"width": -1},
    ],
)
def test_invalid_config_is_rejected(kwargs) -> None:
    with pytest.raises(ValueError):
        RunConfig(**kwargs).validate()


def test_main_runs_cli_with_argv(monkeypatch, capsys) -> None:
    monkeypatch.setattr("sys.argv", ["main.py", "eta", "61"])
    assert main_module.main() == 0
    assert capsys.readouterr().out == "1 minute 1 second\n"


def test_main_help_lists_config_fields(monkeypatch, capsys) -> None:
    monkeypatch.setattr("sys.argv", ["main.py", "--help"])
    assert main_module.main() == 0
    out = capsys.readouterr().out
    for name in RunConfig.__dataclass_fields__:
        assert f"  - {name}:" in out
