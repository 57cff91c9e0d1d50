"""langroute Logging: logging port and structlog adapter."""

from langroute.logging.port import LoggingPort
from langroute.logging.structlog_adapter import StructlogAdapter

__all__ = ["LoggingPort", "StructlogAdapter"]
