"""Single-line terminal progress bar with percentage and ETA.

This package provides:
- a renderer that turns loop progress into a bar row sized to the terminal
- a human-readable ETA extrapolated from elapsed time
- a small host loop (``track``) and a demo CLI

See README.md for usage.
"""

from __future__ import annotations

from etabar.bar import InvalidArgument, ProgressRenderer
from etabar.humanize import humanize
from etabar.progress import ProgressPrinter, track

__all__ = ["InvalidArgument", "ProgressPrinter", "ProgressRenderer", "__version__", "humanize", "track"]

__version__ = "0.1.0"
