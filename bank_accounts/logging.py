"""Logging setup for bank-accounts.

Two output formats are supported: a pipe-separated ``standard`` line for
terminals and one JSON object per line for log shippers. Account context
passed through :func:`account_context` ends up as top-level JSON keys.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, TextIO

from bank_accounts.config import AccountServiceConfig

STANDARD_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Client libraries that log every request or delivery at INFO
NOISY_LOGGERS = ("confluent_kafka", "psycopg", "httpx", "httpcore", "faker")


class JsonFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if hasattr(record, "extra"):
            log_data.update(record.extra)

        return json.dumps(log_data, default=str)


def build_formatter(format_type: str) -> logging.Formatter:
    """Return the formatter for ``format_type`` ("json" or anything else)."""
    if format_type == "json":
        return JsonFormatter()
    return logging.Formatter(fmt=STANDARD_FORMAT, datefmt=DATE_FORMAT)


def setup_logging(
    level: str = "INFO",
    format_type: str = "standard",
    stream: TextIO | None = None,
) -> None:
    """Configure the root logger for bank-accounts.

    Parameters
    ----------
    level : str
        Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Unknown names
        fall back to INFO.
    format_type : str
        Format type: "standard" or "json".
    stream : TextIO | None
        Destination of log lines; stdout when omitted.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(build_formatter(format_type))
    root_logger.addHandler(handler)

    logging.getLogger("bank_accounts").setLevel(log_level)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def configure_logging(config: AccountServiceConfig) -> None:
    """Apply the log level and format of a service configuration."""
    setup_logging(config.log_level, config.log_format)


def account_context(account_id: str, **fields: Any) -> dict[str, Any]:
    """Build the ``extra`` mapping that tags a log record with an account.

    Examples
    --------
    >>> logger.info("Account created", extra=account_context(account.account_id))
    """
    return {"extra": {"account_id": account_id, **fields}}
