from __future__ import annotations

import argparse
import math
import sys
import time

import numpy as np

from etabar import __version__
from etabar.bar import ProgressRenderer
from etabar.colors import ANSI_COLORS, color_names, colorize
from etabar.humanize import humanize
from etabar.progress import ProgressPrinter
from etabar.terminal import detect_width_provider, fixed_width


DEFAULT_TOTAL = 50
DEFAULT_DELAY_S = 0.05


def _step_durations(n: int, *, delay: float, jitter: float, seed: int | None) -> np.ndarray:
    """Per-step sleep times: ``delay`` plus half-normal noise of scale ``jitter``."""
    base = np.full(n, float(delay), dtype=np.float64)
    if jitter <= 0:
        return base
    rng = np.random.default_rng(seed)
    return base + np.abs(rng.normal(0.0, float(jitter), size=n))


def _explicit_positions(total: int, step: float) -> list[float]:
    positions = np.arange(0.0, float(total), float(step))
    return [float(v) for v in np.append(positions, float(total))]


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="python -m etabar", description="Terminal progress bar with ETA")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = p.add_subparsers(dest="command", required=True)

    demo = sub.add_parser("demo", help="Run a simulated loop and draw its progress bar")
    demo.add_argument("--total", type=int, default=DEFAULT_TOTAL, help=f"Number of steps (default: {DEFAULT_TOTAL})")
    demo.add_argument(
        "--delay",
        type=float,
        default=DEFAULT_DELAY_S,
        help=f"Seconds slept per step (default: {DEFAULT_DELAY_S})",
    )
    demo.add_argument("--jitter", type=float, default=0.0, help="Scale of random extra time per step (seconds)")
    demo.add_argument("--seed", type=int, default=None, help="Seed for the jitter generator")
    demo.add_argument(
        "--step",
        type=float,
        default=None,
        help="Set progress explicitly in increments of this size instead of advancing by one",
    )
    demo.add_argument("--fill_char", default="=")
    demo.add_argument("--track_char", default=" ")
    demo.add_argument("--fill_color", default="default", help=f"One of: {', '.join(color_names())}")
    demo.add_argument("--track_color", default="default", help=f"One of: {', '.join(color_names())}")
    demo.add_argument("--width", type=int, default=None, help="Fixed bar width in columns (default: terminal width)")
    demo.add_argument(
        "--force_tty",
        action="store_true",
        help="Draw progress rows even when stderr is not a terminal",
    )

    sub.add_parser("colors", help="List the colour names usable for --fill_color/--track_color")

    eta = sub.add_parser("eta", help="Print a duration in seconds as human-readable text")
    eta.add_argument("seconds", type=float)

    return p


def cmd_demo(args: argparse.Namespace) -> int:
    if args.total < 1:
        print(f"ERROR: --total must be >= 1, got: {args.total}", file=sys.stderr)
        return 2
    if args.delay < 0 or args.jitter < 0:
        print("ERROR: --delay and --jitter must be >= 0", file=sys.stderr)
        return 2
    if args.step is not None and not args.step > 0:
        print(f"ERROR: --step must be > 0, got: {args.step}", file=sys.stderr)
        return 2
    if args.width is not None and args.width < 0:
        print(f"ERROR: --width must be >= 0, got: {args.width}", file=sys.stderr)
        return 2

    for name in (args.fill_color, args.track_color):
        if name not in ANSI_COLORS:
            print(f"WARNING: unknown colour {name!r}, using 'default'", file=sys.stderr)

    width_provider = fixed_width(args.width) if args.width is not None else detect_width_provider()
    renderer = ProgressRenderer(
        args.total,
        args.fill_char,
        args.track_char,
        args.fill_color,
        args.track_color,
        width_provider=width_provider,
    )
    progress = ProgressPrinter(renderer=renderer, enabled=True if args.force_tty else None, stream=sys.stderr)

    positions: list[float | None]
    if args.step is None:
        positions = [None] * int(args.total)
    else:
        positions = list(_explicit_positions(args.total, args.step))

    durations = _step_durations(len(positions), delay=args.delay, jitter=args.jitter, seed=args.seed)
    for position, pause in zip(positions, durations):
        time.sleep(float(pause))
        progress.update(position)
    progress.finish()

    print(f"Done: {args.total} steps in {humanize(math.ceil(renderer.elapsed))}")
    return 0


def cmd_colors(args: argparse.Namespace) -> int:
    for name in color_names():
        print(colorize(name, name))
    return 0


def cmd_eta(args: argparse.Namespace) -> int:
    if not math.isfinite(args.seconds):
        print(f"ERROR: seconds must be finite, got: {args.seconds}", file=sys.stderr)
        return 2
    print(humanize(math.ceil(args.seconds)))
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "demo":
        return cmd_demo(args)
    if args.command == "colors":
        return cmd_colors(args)
    if args.command == "eta":
        return cmd_eta(args)

    parser.print_help()
    return 2
