"""ANSI colour lookup for bar segments."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Protocol

RESET = "\033[0m"

ANSI_COLORS: Mapping[str, str] = MappingProxyType(
    {
        "black": "\033[0;30m",
        "red": "\033[0;31m",
        "light-red": "\033[1;31m",
        "green": "\033[0;32m",
        "light-green": "\033[1;32m",
        "brown": "\033[0;33m",
        "orange": "\033[0;33m",
        "blue": "\033[0;34m",
        "light-blue": "\033[1;34m",
        "purple": "\033[0;35m",
        "light-purple": "\033[1;35m",
        "cyan": "\033[0;36m",
        "light-cyan": "\033[1;36m",
        "light-gray": "\033[0;37m",
        "dark-gray": "\033[1;30m",
        "yellow": "\033[1;33m",
        "white": "\033[1;37m",
        "default": RESET,
    }
)


class Colorizer(Protocol):
    def __call__(self, name: str, text: str) -> str: ...


def colorize(name: str, text: str) -> str:
    """Wrap ``text`` in the escape for ``name``; unknown names use ``default``."""
    start = ANSI_COLORS.get(name, RESET)
    return f"{start}{text}{RESET}"


def color_names() -> list[str]:
    return sorted(ANSI_COLORS)
