"""Human-readable durations for ETA text."""

from __future__ import annotations

# Calendar-naive: a year is 365 days, a month is 30 days.
TIME_UNITS: tuple[tuple[int, str, str], ...] = (
    (31536000, "year", "years"),
    (2592000, "month", "months"),
    (604800, "week", "weeks"),
    (86400, "day", "days"),
    (3600, "hour", "hours"),
    (60, "minute", "minutes"),
    (1, "second", "seconds"),
)


def humanize(seconds: float) -> str:
    """Greedy breakdown of ``seconds`` from years down to seconds.

    Units with a zero count are skipped, so ``3601`` is ``"1 hour 1 second"``.
    Anything below one second (including negatives) is ``"0 seconds"``.
    """
    remaining = float(seconds)
    terms: list[str] = []
    for unit, singular, plural in TIME_UNITS:
        if remaining < unit:
            continue
        count = int(remaining // unit)
        terms.append(f"{count} {singular if count == 1 else plural}")
        remaining -= count * unit

    return " ".join(terms) if terms else "0 seconds"
