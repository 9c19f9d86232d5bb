"""Strands tools exposing the calculator to the pregnancy-dating assistant.

Each function is decorated with ``@tool`` so the Strands framework can
expose it to the language model.  The calculator validates the input; a
failed computation is raised as ``ValueError`` with the calculator's
message so the model receives a clear explanation instead of a traceback.
"""

import logging

from strands import tool

from naegele.calculator import compute_edd, compute_woa
from naegele.dates import DATE_TEXT_LEN

logger: logging.Logger = logging.getLogger(__name__)


def _check_text(lnmp: object) -> None:
    if not isinstance(lnmp, str):
        raise ValueError("lnmp must be a string.")
    if len(lnmp) > DATE_TEXT_LEN:
        raise ValueError(f"lnmp exceeds maximum length of {DATE_TEXT_LEN}.")


@tool
def calculate_due_date(lnmp: str) -> str:
    """Calculate the estimated due date (EDD) from the last menstrual period.

    Use this tool when the user gives the first day of their last normal
    menstrual period (LNMP) and wants to know when the baby is due.  The due
    date is computed with Naegele's rule (add 7 days, subtract 3 months, add
    1 year).

    Args:
        lnmp: First day of the last normal menstrual period in DD/MM/YYYY
            format, e.g. 15/01/2024.

    Returns:
        The estimated due date in DD/MM/YYYY format.

    Raises:
        ValueError: If lnmp is not a valid DD/MM/YYYY date between 1900 and
            2100.
    """
    _check_text(lnmp)
    # LNMP is health data: log the length only, never the value.
    logger.debug("calculate_due_date called with %d-char lnmp", len(lnmp))

    result = compute_edd(lnmp)
    if not result.ok:
        raise ValueError(f"lnmp could not be used: {result.message}.")
    return result.value


@tool
def calculate_weeks_of_amenorrhea(lnmp: str) -> str:
    """Calculate how far along a pregnancy is, in weeks of amenorrhea (WOA).

    Use this tool when the user gives the first day of their last normal
    menstrual period (LNMP) and wants to know how many weeks and days have
    passed since then, measured up to the current moment.

    Args:
        lnmp: First day of the last normal menstrual period in DD/MM/YYYY
            format, e.g. 15/01/2024.

    Returns:
        The elapsed time such as "12 weeks, 3 days" or "1 week".

    Raises:
        ValueError: If lnmp is not a valid DD/MM/YYYY date, or if it lies in
            the future.
    """
    _check_text(lnmp)
    logger.debug("calculate_weeks_of_amenorrhea called with %d-char lnmp", len(lnmp))

    result = compute_woa(lnmp)
    if not result.ok:
        raise ValueError(f"lnmp could not be used: {result.message}.")
    return result.value
