"""Functional boundary: one call per computation, string in, result out.

Each function parses its own input, runs the relevant calculator and either
returns a successful ``ComputationResult`` carrying formatted text or a
failed one carrying the ``ErrorKind``.  Expected failures never raise.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from naegele.dates import CalendarDate, format_date, parse_date
from naegele.edd import compute_edd_date
from naegele.errors import ErrorKind, NaegeleError, error_message
from naegele.woa import Clock, compute_duration, format_duration

logger: logging.Logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class ComputationResult:
    """Either a value (success) or an ``ErrorKind`` (failure), never both."""

    value: Any = None
    error: ErrorKind | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str | None:
        """Display text for a failure, ``None`` on success."""
        return None if self.error is None else error_message(self.error)

    def unwrap(self) -> Any:
        """Return the value, or raise ``NaegeleError`` for a failure."""
        if self.error is not None:
            raise NaegeleError(self.error)
        return self.value


def _run(lnmp: object, compute: Callable[[CalendarDate], T]) -> ComputationResult:
    if lnmp is None:
        return ComputationResult(error=ErrorKind.NULL_PARAM)
    try:
        return ComputationResult(value=compute(parse_date(lnmp)))
    except NaegeleError as exc:
        logger.info("computation failed: %s", exc.kind.value)
        return ComputationResult(error=exc.kind)


def compute_edd(lnmp: str | None) -> ComputationResult:
    """EDD for ``lnmp`` as ``dd/mm/yyyy`` text."""
    return _run(lnmp, lambda date: format_date(compute_edd_date(date)))


def compute_woa(lnmp: str | None, clock: Clock | None = None) -> ComputationResult:
    """WOA for ``lnmp``, e.g. ``"5 weeks, 3 days"``, measured against ``clock``."""
    return _run(lnmp, lambda date: format_duration(compute_duration(date, clock)))


def compute_both(lnmp: str | None, clock: Clock | None = None) -> ComputationResult:
    """EDD and WOA together as an ``(edd, woa)`` tuple.

    The EDD is computed first; if it fails the WOA is not attempted and the
    EDD error is returned.
    """
    edd = compute_edd(lnmp)
    if not edd.ok:
        return edd
    woa = compute_woa(lnmp, clock)
    if not woa.ok:
        return woa
    return ComputationResult(value=(edd.value, woa.value))
