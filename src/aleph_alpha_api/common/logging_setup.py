"""Central logging setup for the client."""
from __future__ import annotations
import logging
import re
import sys

_BEARER = re.compile(r"(Bearer\s+)\S+", re.IGNORECASE)


class RedactTokenFilter(logging.Filter):
    """Mask bearer credentials in any record passing through the handler."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = _BEARER.sub(r"\1***", message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True


def setup_logging(level: int = logging.INFO) -> None:
    """
    Configure root logger with sane defaults.

    Args:
        level: Logging level.
    """
    handler = logging.StreamHandler(sys.stdout)
    fmt = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
    handler.setFormatter(logging.Formatter(fmt))
    handler.addFilter(RedactTokenFilter())
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)
