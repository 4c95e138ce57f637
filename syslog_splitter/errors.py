"""Error types and the diagnostic error sink used by the appender."""

import logging

logger = logging.getLogger(__name__)


class TransportError(OSError):
    """Socket-level failure while writing to or closing a syslog transport."""


class ConfigError(ValueError):
    """Malformed appender configuration, raised once at initialization."""


class ErrorSink:
    """Fire-and-forget diagnostic channel. Implementations must never raise."""

    def report(self, message: str):
        raise NotImplementedError


class LoggingErrorSink(ErrorSink):
    """Routes reports to the ``syslog_splitter.errors`` logger."""

    def report(self, message: str):
        logger.warning("%s", message)


class CollectingErrorSink(ErrorSink):
    """Keeps every report in memory, for inspection by callers and tests."""

    def __init__(self):
        self.messages: list[str] = []

    def report(self, message: str):
        self.messages.append(message)
