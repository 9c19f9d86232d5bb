"""Estimated Due Date by Naegele's rule.

Naegele's rule: add 7 days to the LNMP, go back 3 months and forward one
year (equivalently, forward 9 months).  The arithmetic is done on the
day/month/year fields directly, carrying day overflow into the following
month one month length at a time so that a leap February is honoured.
"""

import logging

from naegele.dates import CalendarDate, days_in_month

logger: logging.Logger = logging.getLogger(__name__)

EDD_DAY_OFFSET: int = 7
EDD_MONTH_OFFSET: int = 3


def compute_edd_date(lnmp: CalendarDate) -> CalendarDate:
    """Apply Naegele's rule to a validated LNMP.

    Args:
        lnmp: Last normal menstrual period.

    Returns:
        The estimated due date, always a valid ``CalendarDate``, 280 to 283
        days after ``lnmp`` depending on the month lengths crossed.  When the
        day would fall past the end of a shorter target month (24 May gives
        "31 Feb") the last day of that month is used.
    """
    # Length of the LNMP month itself: the +7 days overflow out of it.
    ceiling = days_in_month(lnmp.month, lnmp.year)

    day = lnmp.day + EDD_DAY_OFFSET
    # year_basis stays one below the EDD year until the final +1.
    year_basis = lnmp.year
    if lnmp.month > EDD_MONTH_OFFSET:
        month = lnmp.month - EDD_MONTH_OFFSET
    else:
        month = lnmp.month + (12 - EDD_MONTH_OFFSET)
        year_basis -= 1

    while day > ceiling:
        day -= ceiling
        month += 1
        if month > 12:
            month = 1
            year_basis += 1
        # Months from here on are EDD months: look them up in the EDD year.
        ceiling = days_in_month(month, year_basis + 1)

    day = min(day, days_in_month(month, year_basis + 1))

    edd = CalendarDate(day=day, month=month, year=year_basis + 1)
    logger.debug("compute_edd_date result: %d days after LNMP", (edd.to_date() - lnmp.to_date()).days)
    return edd
