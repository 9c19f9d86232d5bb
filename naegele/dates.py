"""Calendar primitives: the validated ``CalendarDate`` and its text form.

Dates travel as ``dd/mm/yyyy`` strings, exactly 10 characters, zero padded.
``parse_date`` is the only way text becomes a ``CalendarDate``; it either
returns a fully valid date or raises ``NaegeleError(INVALID_DATE)``.
"""

import datetime
import logging
import re
from dataclasses import dataclass

from naegele.errors import ErrorKind, NaegeleError

logger: logging.Logger = logging.getLogger(__name__)

DATE_TEXT_LEN: int = 10
MIN_YEAR: int = 1900
MAX_YEAR: int = 2100

# [0-9] rather than \d: str.isdigit-style Unicode digits are not accepted.
_DATE_RE = re.compile(r"([0-9]{2})/([0-9]{2})/([0-9]{4})")

_DAYS_IN_MONTH: tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(month: int, year: int) -> int:
    """Number of days in ``month`` of ``year``, or 0 for a month outside 1-12."""
    if month < 1 or month > 12:
        return 0
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


@dataclass(frozen=True)
class CalendarDate:
    """A calendar-correct day/month/year triple.

    Construction fails for a month outside 1-12 or a day past the end of the
    month, so an existing instance is always a real date.  The 1900-2100
    window only applies to parsed input; an EDD may land in 2101.
    """

    day: int
    month: int
    year: int

    def __post_init__(self) -> None:
        if not 1 <= self.day <= days_in_month(self.month, self.year):
            raise NaegeleError(ErrorKind.INVALID_DATE)

    def to_date(self) -> datetime.date:
        return datetime.date(self.year, self.month, self.day)


def parse_date(text: object) -> CalendarDate:
    """Parse ``dd/mm/yyyy`` text into a ``CalendarDate``.

    Args:
        text: Caller-supplied LNMP text.  Anything other than a 10-character
            string of the exact shape ``dd/mm/yyyy`` is rejected.

    Returns:
        The validated date.

    Raises:
        NaegeleError: With ``ErrorKind.INVALID_DATE`` for absent, malformed
            or calendar-impossible input, or a year outside 1900-2100.
    """
    if not isinstance(text, str) or len(text) != DATE_TEXT_LEN:
        logger.debug("parse_date rejected input of type %s", type(text).__name__)
        raise NaegeleError(ErrorKind.INVALID_DATE)

    match = _DATE_RE.fullmatch(text)
    if match is None:
        logger.debug("parse_date rejected malformed 10-char input")
        raise NaegeleError(ErrorKind.INVALID_DATE)

    day, month, year = (int(group) for group in match.groups())
    if not MIN_YEAR <= year <= MAX_YEAR:
        logger.debug("parse_date rejected year outside %d-%d", MIN_YEAR, MAX_YEAR)
        raise NaegeleError(ErrorKind.INVALID_DATE)

    return CalendarDate(day=day, month=month, year=year)


def format_date(date: CalendarDate) -> str:
    return f"{date.day:02d}/{date.month:02d}/{date.year:04d}"
