"""naegele: estimated due date and weeks of amenorrhea from an LNMP date.

Public API
----------
compute_edd
    Naegele's-rule due date for a ``dd/mm/yyyy`` LNMP.
compute_woa
    Weeks and days elapsed since the LNMP.
compute_both
    Both of the above; the EDD error wins if the date is bad.
error_message
    Display text for an ``ErrorKind``.

The Strands assistant lives in ``naegele.agent`` and is not imported here,
so the calculator works without AWS configuration.

Example
-------
>>> from naegele import compute_edd
>>> compute_edd("01/01/2024").value
'08/10/2024'
"""

from naegele.calculator import ComputationResult, compute_both, compute_edd, compute_woa
from naegele.dates import CalendarDate, format_date, parse_date
from naegele.edd import compute_edd_date
from naegele.errors import ErrorKind, NaegeleError, error_message
from naegele.woa import Duration, compute_duration, format_duration

__all__: list[str] = [
    "CalendarDate",
    "ComputationResult",
    "Duration",
    "ErrorKind",
    "NaegeleError",
    "compute_both",
    "compute_duration",
    "compute_edd",
    "compute_edd_date",
    "compute_woa",
    "error_message",
    "format_date",
    "format_duration",
    "parse_date",
]
