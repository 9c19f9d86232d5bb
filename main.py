"""Entry point for the naegele CLI.

Run with:
    python main.py 15/01/2024
    python main.py --ask 15/01/2024

The script configures structured logging, computes the EDD and WOA for the
LNMP given on the command line and prints them.  With ``--ask`` the date is
handed to the pregnancy-dating assistant instead.
"""

import argparse
import datetime
import json
import logging
import sys
import time
import uuid

from naegele import compute_both
from naegele.agent import create_agent, invoke_with_audit
from naegele.config import Settings

logger: logging.Logger = logging.getLogger(__name__)

# Attributes every LogRecord carries; anything else came in via ``extra``.
_STANDARD_RECORD_ATTRS: frozenset[str] = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime"}


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _STANDARD_RECORD_ATTRS and not key.startswith("_"):
                payload[key] = value
        return json.dumps(payload, default=str)


def _configure_logging() -> None:
    """Configure logging from ``LOG_FORMAT`` and ``LOG_LEVEL``.

    Set LOG_FORMAT=json for structured JSON output (CloudWatch-friendly).
    Any other value (or absent) falls back to human-readable plaintext.
    """
    cfg = Settings()
    level = logging.getLevelName(cfg.log_level)
    if not isinstance(level, int):
        level = logging.INFO

    if cfg.log_format == "json":
        handler = logging.StreamHandler()
        handler.setFormatter(_JsonFormatter())
        logging.basicConfig(level=level, handlers=[handler], force=True)
    else:
        logging.basicConfig(
            level=level,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="naegele",
        description="Estimated due date (Naegele's rule) and weeks of amenorrhea from an LNMP.",
    )
    parser.add_argument("lnmp", help="last normal menstrual period, dd/mm/yyyy")
    parser.add_argument(
        "--ask",
        action="store_true",
        help="send the date to the pregnancy-dating assistant instead of computing locally",
    )
    return parser


def _ask(lnmp: str) -> None:
    agent = create_agent()
    prompt = (
        f"My last menstrual period started on {lnmp}. "
        "What is my due date and how many weeks along am I?"
    )
    response = invoke_with_audit(agent, prompt)
    print(getattr(response, "message", response))


def run(argv: list[str] | None = None) -> None:
    """Parse arguments, compute, and print the result.

    Exits with code 1 when the LNMP is rejected so that callers (shell
    scripts, CI jobs, etc.) can detect failure cleanly; the error message
    goes to stderr.  A structured record of the computation is logged with
    a session id, timestamp, elapsed time and status, never the LNMP itself.
    """
    args = _build_parser().parse_args(argv)
    _configure_logging()

    if args.ask:
        _ask(args.lnmp)
        return

    session_id = str(uuid.uuid4())
    start = time.monotonic()
    result = compute_both(args.lnmp)
    elapsed_ms = (time.monotonic() - start) * 1000

    logger.info(
        "lnmp_computation",
        extra={
            "session_id": session_id,
            "timestamp": datetime.datetime.now(datetime.timezone.utc).isoformat(),
            "elapsed_ms": round(elapsed_ms, 1),
            "status": "success" if result.ok else result.error.value,
        },
    )

    if not result.ok:
        print(f"Error: {result.message}", file=sys.stderr)
        sys.exit(1)

    edd, woa = result.value
    print(f"EDD: {edd}")
    print(f"WOA: {woa}")


if __name__ == "__main__":
    run()
