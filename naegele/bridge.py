"""Adapter for hosts that marshal results across a foreign-function boundary.

Constrained hosts (a WASM/JS wrapper, a C extension shim) pass in the
capacity of the buffer they will copy the result into and expect integer
status codes.  This module keeps that contract out of the core:

* integer codes for ``ErrorKind`` (0 is success),
* minimum capacities, checked before any parsing or clock read,
* a result record shaped like ``{success, edd, woa, error}``.
"""

import logging
from dataclasses import dataclass

from naegele.calculator import compute_edd, compute_woa
from naegele.errors import UNKNOWN_ERROR_MESSAGE, ErrorKind, error_message
from naegele.woa import Clock

logger: logging.Logger = logging.getLogger(__name__)

DATE_STR_MAX_LEN: int = 16
WOA_STR_MAX_LEN: int = 32

OK: int = 0

ERROR_CODES: dict[ErrorKind, int] = {
    ErrorKind.NULL_PARAM: -1,
    ErrorKind.INVALID_DATE: -2,
    ErrorKind.DATE_CONVERSION: -3,
    ErrorKind.SYSTEM_TIME: -4,
    ErrorKind.FUTURE_DATE: -5,
    ErrorKind.BUFFER_TOO_SMALL: -6,
}

_KINDS_BY_CODE: dict[int, ErrorKind] = {code: kind for kind, code in ERROR_CODES.items()}


def encode_error(kind: ErrorKind) -> int:
    return ERROR_CODES[kind]


def decode_error(code: int) -> ErrorKind | None:
    """``ErrorKind`` for ``code``; ``None`` for success or an unknown code."""
    return _KINDS_BY_CODE.get(code)


def error_string(code: int) -> str:
    """Message for an integer status code.  Total: unknown codes never raise."""
    if code == OK:
        return "Success"
    kind = decode_error(code)
    return UNKNOWN_ERROR_MESSAGE if kind is None else error_message(kind)


@dataclass(frozen=True)
class BridgeResult:
    code: int
    edd: str | None = None
    woa: str | None = None

    @property
    def success(self) -> bool:
        return self.code == OK

    @property
    def error(self) -> str | None:
        return None if self.success else error_string(self.code)

    def to_dict(self) -> dict:
        return {
            "success": self.success,
            "edd": self.edd,
            "woa": self.woa,
            "error": self.error,
        }


def _fail(kind: ErrorKind) -> BridgeResult:
    return BridgeResult(code=encode_error(kind))


def _precheck(lnmp: object, capacity: object, minimum: int) -> BridgeResult | None:
    # A capacity that is not a buffer size counts as a missing argument.
    if lnmp is None or isinstance(capacity, bool) or not isinstance(capacity, int):
        return _fail(ErrorKind.NULL_PARAM)
    if capacity < minimum:
        logger.debug("capacity %d below minimum %d", capacity, minimum)
        return _fail(ErrorKind.BUFFER_TOO_SMALL)
    return None


def bridge_compute_edd(lnmp: str | None, capacity: int | None) -> BridgeResult:
    """EDD into a buffer of ``capacity`` characters (at least ``DATE_STR_MAX_LEN``)."""
    failed = _precheck(lnmp, capacity, DATE_STR_MAX_LEN)
    if failed is not None:
        return failed
    result = compute_edd(lnmp)
    if not result.ok:
        return _fail(result.error)
    return BridgeResult(code=OK, edd=result.value)


def bridge_compute_woa(
    lnmp: str | None,
    capacity: int | None,
    clock: Clock | None = None,
) -> BridgeResult:
    """WOA into a buffer of ``capacity`` characters (at least ``WOA_STR_MAX_LEN``)."""
    failed = _precheck(lnmp, capacity, WOA_STR_MAX_LEN)
    if failed is not None:
        return failed
    result = compute_woa(lnmp, clock)
    if not result.ok:
        return _fail(result.error)
    return BridgeResult(code=OK, woa=result.value)


def bridge_compute(
    lnmp: str | None,
    edd_capacity: int | None,
    woa_capacity: int | None,
    clock: Clock | None = None,
) -> BridgeResult:
    """EDD then WOA; the first failure is returned and nothing else is filled in."""
    edd = bridge_compute_edd(lnmp, edd_capacity)
    if not edd.success:
        return edd
    woa = bridge_compute_woa(lnmp, woa_capacity, clock)
    if not woa.success:
        return woa
    return BridgeResult(code=OK, edd=edd.edd, woa=woa.woa)
