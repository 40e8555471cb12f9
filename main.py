from __future__ import annotations

from dataclasses import MISSING, dataclass, field
import sys

import etabar.cli as etabar_cli
from etabar.colors import ANSI_COLORS, color_names


@dataclass(frozen=True, slots=True)
class RunConfig:
    """Settings for running the demo through main.py.

    Lets you run `main.py` from an IDE and keep the demo parameters in one
    place. The fields are translated into `python -m etabar demo ...` CLI
    arguments.
    """

    total: int = field(
        default=100,
        metadata={"help": "Number of loop steps to simulate."},
    )
    delay: float = field(
        default=0.03,
        metadata={"help": "Seconds slept per step."},
    )
    jitter: float = field(
        default=0.02,
        metadata={"help": "Scale of random extra time per step (seconds). 0 => constant steps."},
    )
    seed: int | None = field(
        default=7,
        metadata={"help": "Seed for the jitter generator. None => different every run."},
    )
    step: float | None = field(
        default=None,
        metadata={"help": "Explicit progress increment. None => advance by one per step."},
    )
    fill_char: str = field(
        default="=",
        metadata={"help": "Character drawn for completed work."},
    )
    track_char: str = field(
        default=" ",
        metadata={"help": "Character drawn for remaining work."},
    )
    fill_color: str = field(
        default="light-green",
        metadata={"help": f"Colour of the filled segment. Choices: {', '.join(color_names())}"},
    )
    track_color: str = field(
        default="default",
        metadata={"help": "Colour of the remaining segment."},
    )
    width: int | None = field(
        default=None,
        metadata={"help": "Fixed width in columns. None => query the terminal."},
    )
    force_tty: bool = field(
        default=True,
        metadata={"help": "Draw rows even when stderr is not a terminal (CLI: --force_tty)."},
    )

    def validate(self) -> None:
        if isinstance(self.total, bool) or not isinstance(self.total, int):
            raise ValueError(f"total must be an integer, got: {self.total!r}")
        if self.total < 1:
            raise ValueError(f"total must be >= 1, got: {self.total}")
        if float(self.delay) < 0:
            raise ValueError("delay must be >= 0")
        if float(self.jitter) < 0:
            raise ValueError("jitter must be >= 0")
        if self.step is not None and float(self.step) <= 0:
            raise ValueError("step must be > 0 or None")
        if not self.fill_char or not self.track_char:
            raise ValueError("fill_char and track_char must not be empty")
        invalid = sorted({self.fill_color, self.track_color} - set(ANSI_COLORS))
        if invalid:
            raise ValueError(f"Invalid colours: {invalid}. Choices: {color_names()}")
        if self.width is not None and int(self.width) < 0:
            raise ValueError("width must be >= 0 or None")

    def to_argv(self) -> list[str]:
        self.validate()

        argv: list[str] = [
            "demo",
            "--total",
            str(int(self.total)),
            "--delay",
            f"{float(self.delay):g}",
            "--jitter",
            f"{float(self.jitter):g}",
            "--fill_char",
            self.fill_char,
            "--track_char",
            self.track_char,
            "--fill_color",
            self.fill_color,
            "--track_color",
            self.track_color,
        ]

        if self.seed is not None:
            argv.extend(["--seed", str(int(self.seed))])
        if self.step is not None:
            argv.extend(["--step", f"{float(self.step):g}"])
        if self.width is not None:
            argv.extend(["--width", str(int(self.width))])
        if self.force_tty:
            argv.append("--force_tty")
        return argv


DEFAULT_RUN_CONFIG = RunConfig()


def _print_main_help() -> None:
    print("Usage:")
    print("  python main.py demo [--total N] [--delay S] [--fill_color NAME] ...")
    print("  python main.py              # run the demo with DEFAULT_RUN_CONFIG (handy in an IDE)")
    print("  python main.py --help")
    print("")
    print("RunConfig parameters (edit them in main.py):")
    for f in RunConfig.__dataclass_fields__.values():  # type: ignore[attr-defined]
        help_text = (f.metadata or {}).get("help", "")
        if f.default is not MISSING:
            default_repr = f.default
        elif f.default_factory is not MISSING:
            default_repr = "<factory>"
        else:
            default_repr = None
        print(f"  - {f.name}: {help_text} (default: {default_repr!r})")

def main() -> int:
    argv = sys.argv[1:]
    if len(argv) == 1 and argv[0] in {"-h", "--help", "help"}:
        _print_main_help()
        return 0
    if argv:
        return int(etabar_cli.main(argv))

    try:
        return int(etabar_cli.main(DEFAULT_RUN_CONFIG.to_argv()))
    except ValueError as e:
        print(f"Invalid main.py defaults: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
