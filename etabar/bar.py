"""Progress bar rows with percentage and ETA, sized to the terminal width.

A :class:`ProgressRenderer` is created once per loop with the number of steps
and called once per iteration::

    bar = ProgressRenderer(300)
    for item in items:
        work(item)
        sys.stderr.write(bar.render())
        sys.stderr.flush()

Each call returns a ``"\\r"``-prefixed row such as
``[=========          ] 45.00% (ETA: 12 seconds)`` that overwrites the current
terminal line. The ETA is a linear extrapolation of elapsed time, so it works
best for loops whose steps take roughly the same time.
"""

from __future__ import annotations

import math
import numbers
import time
from typing import Callable

from etabar.colors import Colorizer, colorize
from etabar.humanize import humanize
from etabar.terminal import WidthProvider, detect_width_provider


class InvalidArgument(ValueError):
    """Raised for a bad step total or a progress value that goes backwards."""


def _is_real_number(value: object) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def remaining_seconds(elapsed: float, percentage: float) -> int | None:
    """Whole seconds left at ``percentage`` after ``elapsed`` seconds, rounded up.

    Returns None when the arithmetic does not produce a finite value.
    """
    try:
        remaining = (elapsed / percentage) * (100 - percentage)
        return math.ceil(remaining)
    except (ArithmeticError, ValueError):
        return None


def format_percentage(percentage: float) -> str:
    return f"{percentage:,.2f}%"


def build_row(
    percentage: float,
    width: int,
    eta_text: str,
    *,
    fill_char: str = "=",
    track_char: str = " ",
    fill_color: str = "default",
    track_color: str = "default",
    colorizer: Colorizer = colorize,
) -> str:
    """Lay out one bar row (without the leading carriage return).

    The bracketed region gets whatever is left of ``width`` after the
    brackets, the percentage text, the ETA suffix and their separators. The
    fill count is clamped to that region, so percentages above 100 draw a
    full bar and a too-small width draws an empty one.
    """
    eta = f"(ETA: {eta_text})" if eta_text else ""
    percentage_text = format_percentage(percentage)
    inner_width = int(width) - 1 - len(eta) - 1 - len(percentage_text) - 2

    room = max(inner_width, 0)
    try:
        filled = math.ceil(inner_width * (percentage / 100))
    except (OverflowError, ValueError):
        # percentage (or the product) is not finite
        filled = room if percentage > 0 else 0
    filled = min(max(filled, 0), room)
    track = room - filled

    # each unit carries its own escape pair
    fill_unit = colorizer(fill_color, fill_char)
    track_unit = colorizer(track_color, track_char)
    return "[" + fill_unit * filled + track_unit * track + "] " + percentage_text + " " + eta


class ProgressRenderer:
    """Tracks loop progress and renders the bar row for each step."""

    def __init__(
        self,
        total: float,
        fill_char: str = "=",
        track_char: str = " ",
        fill_color: str = "default",
        track_color: str = "default",
        *,
        width_provider: WidthProvider | None = None,
        colorizer: Colorizer | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if not _is_real_number(total) or not math.isfinite(total) or total < 1:
            raise InvalidArgument(f"total must be a number >= 1, got {total!r}")

        self._total = total
        self._current: float = 0
        self._clock = clock
        self._start_time = float(clock())

        self.fill_char = fill_char
        self.track_char = track_char
        self.fill_color = fill_color
        self.track_color = track_color
        self.width_provider: WidthProvider = width_provider if width_provider is not None else detect_width_provider()
        self.colorizer: Colorizer = colorizer if colorizer is not None else colorize

    @property
    def total(self) -> float:
        return self._total

    @property
    def current(self) -> float:
        return self._current

    @property
    def start_time(self) -> float:
        return self._start_time

    @property
    def elapsed(self) -> float:
        return float(self._clock()) - self._start_time

    @property
    def percentage(self) -> float:
        return self._current / self._total * 100

    @property
    def finished(self) -> bool:
        return self._current >= self._total

    def render(self, current: float | None = None) -> str:
        """Advance progress and return the row to print.

        With ``current`` the stored progress is set to it (it may not be
        smaller than the previous value); without it progress moves on by one.
        """
        if current is not None:
            if not _is_real_number(current) or not math.isfinite(current):
                raise InvalidArgument(f"current progress must be a finite number, got {current!r}")
            if current < self._current:
                raise InvalidArgument(
                    f"current progress {current!r} is smaller than the previous one ({self._current!r})"
                )
            self._current = current
        else:
            self._current += 1

        percentage = self.percentage
        width = self.width_provider()
        eta_text = self.estimate(percentage)
        return "\r" + self.layout(percentage, width, eta_text)

    def estimate(self, percentage: float) -> str:
        """Humanised time left at ``percentage``, or ``""`` if there is no estimate."""
        if not percentage or math.isnan(percentage) or percentage <= 0:
            return ""
        seconds = remaining_seconds(self.elapsed, percentage)
        if seconds is None:
            return ""
        return humanize(seconds)

    def layout(self, percentage: float, width: int, eta_text: str) -> str:
        return build_row(
            percentage,
            width,
            eta_text,
            fill_char=self.fill_char,
            track_char=self.track_char,
            fill_color=self.fill_color,
            track_color=self.track_color,
            colorizer=self.colorizer,
        )

    def __repr__(self) -> str:
        return f"ProgressRenderer(total={self._total!r}, current={self._current!r})"
