"""Timezone listing, current-time formatting and human-readable date differences."""
from __future__ import annotations

from datetime import datetime, timezone
from functools import lru_cache
from zoneinfo import ZoneInfo, available_timezones

import pandas as pd

DEFAULT_TIME_FORMAT = "%I:%M:%S %p %Z"
DEFAULT_PRECISION = 7

# Fixed-length units below one month, in seconds.
_SHORT_UNITS = (
    ("week", 7 * 24 * 3600),
    ("day", 24 * 3600),
    ("hour", 3600),
    ("minute", 60),
    ("second", 1),
)


class InvalidDateError(ValueError):
    """Raised when a date string cannot be parsed."""


@lru_cache
def list_timezones() -> list[str]:
    """Sorted IANA timezone identifiers known to the interpreter."""
    return sorted(available_timezones())


def is_timezone(name: str) -> bool:
    return name in list_timezones()


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def current_time(tz_name: str, fmt: str = DEFAULT_TIME_FORMAT, now: datetime | None = None) -> str:
    """Format *now* (default: the current instant) in timezone *tz_name*."""
    now = now or utcnow()
    return now.astimezone(ZoneInfo(tz_name)).strftime(fmt)


def parse_date(value: str) -> datetime:
    """Parse a free-form date string into an aware UTC datetime.

    Naive input is taken to be UTC.

    Raises:
        InvalidDateError: pandas cannot make sense of *value*.
    """
    try:
        ts = pd.Timestamp(value)
    except (ValueError, TypeError) as exc:
        raise InvalidDateError(value) from exc
    if pd.isna(ts):
        raise InvalidDateError(value)
    if ts.tzinfo is None:
        ts = ts.tz_localize("UTC")
    return ts.tz_convert("UTC").to_pydatetime()


def _add_months(dt: datetime, months: int) -> datetime:
    year, month = divmod(dt.month - 1 + months, 12)
    year += dt.year
    month += 1
    # Clamp to the last valid day of the target month.
    day = dt.day
    while True:
        try:
            return dt.replace(year=year, month=month, day=day)
        except ValueError:
            day -= 1


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def date_difference(first: datetime, second: datetime, precision: int = DEFAULT_PRECISION) -> str:
    """Human-readable calendar difference between two instants.

    Counts whole years and months first, then weeks, days, hours, minutes
    and seconds; zero units are skipped and at most *precision* units are
    emitted.  The order of the arguments does not matter.

    Example: ``"1 year, 2 months, 3 days"``.
    """
    start, end = sorted((first, second))
    precision = max(1, precision)

    months = (end.year - start.year) * 12 + (end.month - start.month)
    if _add_months(start, months) > end:
        months -= 1
    anchor = _add_months(start, months)
    years, months = divmod(months, 12)

    parts: list[str] = []
    if years:
        parts.append(_plural(years, "year"))
    if months:
        parts.append(_plural(months, "month"))

    remaining = int((end - anchor).total_seconds())
    for unit, seconds in _SHORT_UNITS:
        count, remaining = divmod(remaining, seconds)
        if count:
            parts.append(_plural(count, unit))

    if not parts:
        return "0 seconds"
    return ", ".join(parts[:precision])
