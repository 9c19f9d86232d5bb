"""Error taxonomy shared by every naegele computation.

``ErrorKind`` is the closed set of failure reasons a caller can observe.
Core helpers raise ``NaegeleError`` at the point of failure; the functional
boundary in ``naegele.calculator`` turns it into a failed result so that
presentation layers only ever deal with a message to display.
"""

import enum
import logging

logger: logging.Logger = logging.getLogger(__name__)


class ErrorKind(enum.Enum):
    """Every reason an EDD or WOA computation can fail."""

    NULL_PARAM = "null_param"
    INVALID_DATE = "invalid_date"
    DATE_CONVERSION = "date_conversion"
    SYSTEM_TIME = "system_time"
    FUTURE_DATE = "future_date"
    BUFFER_TOO_SMALL = "buffer_too_small"


UNKNOWN_ERROR_MESSAGE: str = "Unknown error"

_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.NULL_PARAM: "NULL parameter provided",
    ErrorKind.INVALID_DATE: "Invalid date format or value",
    ErrorKind.DATE_CONVERSION: "Failed to convert date",
    ErrorKind.SYSTEM_TIME: "Failed to get system time",
    ErrorKind.FUTURE_DATE: "LNMP date is in the future",
    ErrorKind.BUFFER_TOO_SMALL: "Output buffer too small",
}


def error_message(kind: object) -> str:
    """Return the human-readable message for ``kind``.

    Never raises: anything that is not an ``ErrorKind`` member (``None``,
    a stray integer, a foreign object) maps to ``"Unknown error"``.
    """
    if isinstance(kind, ErrorKind):
        return _MESSAGES[kind]
    logger.debug("error_message called with unknown kind of type %s", type(kind).__name__)
    return UNKNOWN_ERROR_MESSAGE


class NaegeleError(ValueError):
    """Raised by the core when an LNMP cannot be turned into a result."""

    def __init__(self, kind: ErrorKind) -> None:
        self.kind: ErrorKind = kind
        super().__init__(error_message(kind))
