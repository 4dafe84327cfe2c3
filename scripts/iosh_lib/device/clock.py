"""
Software clock for the simulated device.

The clock keeps a base datetime plus the monotonic reading at which it
was set, so time keeps advancing after `clock set` without touching the
host clock.
"""

import calendar
import re
import time
from datetime import datetime, timedelta
from typing import Callable, Optional


MONTHS = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

MIN_YEAR = 1993
MAX_YEAR = 2035

_TIME_RE = re.compile(r"^(\d{1,2}):(\d{1,2}):(\d{1,2})$")


def parse_time(value: str) -> tuple[int, int, int]:
    """Parse hh:mm:ss, validating 0<=hh<24, 0<=mm<60, 0<=ss<60."""
    match = _TIME_RE.match(value.strip())
    if not match:
        raise ValueError(f"Invalid time '{value}'. Expected hh:mm:ss.")
    hour, minute, second = (int(g) for g in match.groups())
    if not 0 <= hour < 24:
        raise ValueError(f"Invalid hour {hour}. Must be between 0 and 23.")
    if not 0 <= minute < 60:
        raise ValueError(f"Invalid minute {minute}. Must be between 0 and 59.")
    if not 0 <= second < 60:
        raise ValueError(f"Invalid second {second}. Must be between 0 and 59.")
    return hour, minute, second


def parse_month(name: str) -> int:
    """Return the month number for a full or three-letter month name."""
    lowered = name.strip().lower()
    for number, month in enumerate(MONTHS, start=1):
        if lowered == month.lower() or (len(lowered) == 3 and month.lower().startswith(lowered)):
            return number
    raise ValueError(f"Invalid month '{name}'.")


def parse_date(day: str, month: str, year: str) -> tuple[int, int, int]:
    """Parse and validate a day / month name / year triple."""
    month_number = parse_month(month)
    try:
        year_number = int(year)
    except ValueError:
        raise ValueError(f"Invalid year '{year}'.") from None
    if not MIN_YEAR <= year_number <= MAX_YEAR:
        raise ValueError(f"Invalid year {year_number}. Must be between {MIN_YEAR} and {MAX_YEAR}.")
    try:
        day_number = int(day)
    except ValueError:
        raise ValueError(f"Invalid day '{day}'.") from None
    days_in_month = calendar.monthrange(year_number, month_number)[1]
    if not 1 <= day_number <= days_in_month:
        raise ValueError(
            f"Invalid day {day_number} for {MONTHS[month_number - 1]} {year_number}. "
            f"Must be between 1 and {days_in_month}."
        )
    return day_number, month_number, year_number


class Clock:
    """Device clock with settable date/time and uptime tracking."""

    def __init__(self, start: Optional[datetime] = None,
                 monotonic: Callable[[], float] = time.monotonic):
        self._monotonic = monotonic
        self._base = start if start is not None else datetime.now().replace(microsecond=0)
        self._anchor = monotonic()
        self._boot = self._anchor

    def _rebase(self, value: datetime) -> None:
        self._base = value
        self._anchor = self._monotonic()

    def current_datetime(self) -> datetime:
        """Current device time."""
        return self._base + timedelta(seconds=self._monotonic() - self._anchor)

    def set_time(self, value: str) -> None:
        """Set the time of day, keeping the current date."""
        hour, minute, second = parse_time(value)
        now = self.current_datetime()
        self._rebase(now.replace(hour=hour, minute=minute, second=second, microsecond=0))

    def set_date(self, day: str, month: str, year: str) -> None:
        """Set the date, keeping the current time of day."""
        day_number, month_number, year_number = parse_date(day, month, year)
        now = self.current_datetime()
        self._rebase(now.replace(year=year_number, month=month_number, day=day_number))

    def set(self, time_value: str, day: str, month: str, year: str) -> None:
        """Set date and time together; nothing changes if either is invalid."""
        hour, minute, second = parse_time(time_value)
        day_number, month_number, year_number = parse_date(day, month, year)
        self._rebase(datetime(year_number, month_number, day_number, hour, minute, second))

    def uptime(self) -> timedelta:
        """Time elapsed since boot (or the last reload)."""
        return timedelta(seconds=self._monotonic() - self._boot)

    def reset_uptime(self) -> None:
        self._boot = self._monotonic()


def format_clock(value: datetime) -> str:
    """Render a datetime the way `show clock` prints it."""
    return f"{value:%H:%M:%S} UTC {value:%a %B} {value.day} {value.year}"


def format_uptime(hostname: str, value: timedelta) -> str:
    """Render `show uptime` output."""
    total_minutes = int(value.total_seconds()) // 60
    days, remainder = divmod(total_minutes, 24 * 60)
    hours, minutes = divmod(remainder, 60)
    return f"{hostname} uptime is {days} days, {hours} hours, {minutes} minutes"
