"""Weeks of Amenorrhea: time elapsed since the LNMP, in weeks and days.

The LNMP is placed at local midnight using the platform's calendar-to-time
conversion, and "now" comes from an injectable clock.  Elapsed seconds are
truncated to whole days, which also absorbs the one-hour skew a DST change
inside the span can introduce.  Near a DST boundary the result may therefore
lag by a day; that precision limit is accepted.
"""

import datetime
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

from naegele.dates import CalendarDate
from naegele.errors import ErrorKind, NaegeleError

logger: logging.Logger = logging.getLogger(__name__)

SECONDS_PER_DAY: int = 86400
DAYS_PER_WEEK: int = 7

Clock = Callable[[], float]


@dataclass(frozen=True)
class Duration:
    weeks: int
    days: int

    @classmethod
    def from_days(cls, total_days: int) -> "Duration":
        weeks, days = divmod(total_days, DAYS_PER_WEEK)
        return cls(weeks=weeks, days=days)


def local_midnight_timestamp(date: CalendarDate) -> float:
    """POSIX timestamp of local midnight on ``date``.

    Raises:
        NaegeleError: ``DATE_CONVERSION`` when the platform cannot represent
            the date as a time point.
    """
    try:
        return datetime.datetime(date.year, date.month, date.day).timestamp()
    except (OverflowError, OSError, ValueError) as exc:
        logger.warning("local_midnight_timestamp failed: %s", type(exc).__name__)
        raise NaegeleError(ErrorKind.DATE_CONVERSION) from exc


def read_clock(clock: Clock) -> float:
    """Current POSIX time from ``clock``.

    Raises:
        NaegeleError: ``SYSTEM_TIME`` when the clock raises anything or
            returns something other than a number of seconds.
    """
    try:
        now = clock()
    except Exception as exc:  # noqa: BLE001 - any clock fault is a system time failure
        logger.warning("clock read failed: %s", type(exc).__name__)
        raise NaegeleError(ErrorKind.SYSTEM_TIME) from exc
    if isinstance(now, bool) or not isinstance(now, (int, float)):
        logger.warning("clock returned %s, not seconds", type(now).__name__)
        raise NaegeleError(ErrorKind.SYSTEM_TIME)
    return now


def compute_duration(lnmp: CalendarDate, clock: Clock | None = None) -> Duration:
    """Elapsed time from ``lnmp`` (local midnight) to ``clock()``.

    Args:
        lnmp: Last normal menstrual period.
        clock: Zero-argument callable returning the current POSIX time in
            seconds.  Defaults to ``time.time``.

    Returns:
        Whole weeks and the remaining 0-6 days.

    Raises:
        NaegeleError: ``DATE_CONVERSION``, ``SYSTEM_TIME`` or ``FUTURE_DATE``.
    """
    start = local_midnight_timestamp(lnmp)
    now = read_clock(clock or time.time)

    elapsed = now - start
    if elapsed < 0:
        raise NaegeleError(ErrorKind.FUTURE_DATE)

    total_days = int(elapsed // SECONDS_PER_DAY)
    logger.debug("compute_duration result: %d days", total_days)
    return Duration.from_days(total_days)


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def format_duration(duration: Duration) -> str:
    """Render ``"N week(s)"`` or ``"N week(s), M day(s)"``."""
    if duration.days == 0:
        return _plural(duration.weeks, "week")
    return f"{_plural(duration.weeks, 'week')}, {_plural(duration.days, 'day')}"
