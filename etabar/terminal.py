"""Terminal width discovery, one provider per platform."""

from __future__ import annotations

import os
import platform
import subprocess
from typing import Callable, Protocol


class WidthProvider(Protocol):
    def __call__(self) -> int: ...


def _run_columns(cmd: list[str], *, field: int = 0) -> int:
    """Run ``cmd`` and parse one whitespace-separated field of its last line.

    Returns 0 when the command is missing, fails, or prints something that
    is not a non-negative integer.
    """
    try:
        output = subprocess.check_output(cmd, text=True, stderr=subprocess.DEVNULL, timeout=2.0)
    except (OSError, subprocess.SubprocessError):
        return 0

    lines = [line for line in output.splitlines() if line.strip()]
    if not lines:
        return 0
    parts = lines[-1].split()
    if len(parts) <= field:
        return 0
    try:
        columns = int(parts[field])
    except ValueError:
        return 0
    return max(0, columns)


def powershell_width() -> int:
    system_root = os.environ.get("SYSTEMROOT", r"C:\Windows")
    exe = os.path.join(system_root, "System32", "WindowsPowerShell", "v1.0", "powershell.exe")
    return _run_columns([exe, "-Command", "$Host.UI.RawUI.WindowSize.Width"])


def stty_width() -> int:
    # `stty size` prints "<rows> <columns>"
    return _run_columns(["stty", "size"], field=1)


def tput_width() -> int:
    return _run_columns(["/usr/bin/env", "tput", "cols"])


def unsupported_width() -> int:
    return 0


_PROVIDERS: dict[str, Callable[[], int]] = {
    "windows": powershell_width,
    "darwin": stty_width,
    "linux": tput_width,
}


def detect_width_provider(system: str | None = None) -> WidthProvider:
    """Pick the width provider for ``system`` (default: ``platform.system()``)."""
    name = (system if system is not None else platform.system()).strip().lower()
    return _PROVIDERS.get(name, unsupported_width)


def fixed_width(columns: int) -> WidthProvider:
    if int(columns) < 0:
        raise ValueError(f"columns must be >= 0, got {columns!r}")
    value = int(columns)

    def _width() -> int:
        return value

    return _width
