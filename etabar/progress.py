"""Terminal host loop for a progress bar (write, flush, finish)."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, TextIO, TypeVar

from etabar.bar import InvalidArgument, ProgressRenderer

T = TypeVar("T")

_ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")


def visible_length(text: str) -> int:
    return len(_ANSI_ESCAPE.sub("", text))


@dataclass(slots=True)
class ProgressPrinter:
    """Draws a renderer's rows on one terminal line.

    Rows go to stderr unless another stream is given, and each row's leading
    carriage return makes it overwrite the previous one. When the stream is
    not a terminal the rows are skipped but ``log`` messages still appear.
    """

    renderer: ProgressRenderer
    enabled: bool | None = None
    stream: TextIO = sys.stderr

    _last_render: str = ""

    def __post_init__(self) -> None:
        if self.enabled is not None:
            return
        isatty = getattr(self.stream, "isatty", None)
        try:
            self.enabled = bool(isatty()) if isatty is not None else False
        except (OSError, ValueError):
            self.enabled = False

    def _emit(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()

    def _erase_row(self) -> None:
        if self.enabled and self._last_render:
            blank = " " * visible_length(self._last_render)
            self._emit(f"\r{blank}\r")
            self._last_render = ""

    def log(self, message: str) -> None:
        """Print ``message`` on a line of its own, wiping any half-drawn row first."""
        self._erase_row()
        self._emit(f"{message}\n")

    def update(self, current: float | None = None) -> str:
        """Advance the renderer and draw its row; returns the row either way."""
        row = self.renderer.render(current)
        if self.enabled:
            self._emit(row)
            self._last_render = row.lstrip("\r")
        return row

    def finish(self) -> None:
        """Move past the drawn row so later output starts on a fresh line."""
        if self.enabled and self._last_render:
            self._emit("\n")
            self._last_render = ""


def track(
    iterable: Iterable[T],
    total: float | None = None,
    *,
    stream: TextIO | None = None,
    enabled: bool | None = None,
    **style: Any,
) -> Iterator[T]:
    """Yield from ``iterable`` and draw one bar step after each item.

    ``style`` is passed to :class:`ProgressRenderer` (fill/track characters
    and colours, ``width_provider``, ``colorizer``, ``clock``). A missing or
    invalid total raises :class:`InvalidArgument` here, before iteration.
    """
    if total is None:
        try:
            total = len(iterable)  # type: ignore[arg-type]
        except TypeError:
            raise InvalidArgument("total is required for iterables without len()") from None

    printer = ProgressPrinter(
        renderer=ProgressRenderer(total, **style),
        enabled=enabled,
        stream=stream if stream is not None else sys.stderr,
    )
    return _drive(iterable, printer)


def _drive(iterable: Iterable[T], printer: ProgressPrinter) -> Iterator[T]:
    try:
        for item in iterable:
            yield item
            printer.update()
    finally:
        printer.finish()
