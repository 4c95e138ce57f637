"""Log event model and syslog severities."""

import logging
import time
from dataclasses import dataclass, field
from enum import IntEnum


class Severity(IntEnum):
    """Syslog severities; a lower value is more severe."""

    EMERGENCY = 0
    ALERT = 1
    CRITICAL = 2
    ERROR = 3
    WARNING = 4
    NOTICE = 5
    INFO = 6
    DEBUG = 7

    def is_as_severe_as(self, threshold: "Severity | None") -> bool:
        return threshold is None or self <= threshold


_SEVERITY_ALIASES = {
    "EMERG": Severity.EMERGENCY,
    "PANIC": Severity.EMERGENCY,
    "FATAL": Severity.EMERGENCY,
    "CRIT": Severity.CRITICAL,
    "ERR": Severity.ERROR,
    "WARN": Severity.WARNING,
    "INFORMATIONAL": Severity.INFO,
    "TRACE": Severity.DEBUG,
}


def parse_severity(value) -> Severity:
    """Parse a severity from a member, a number (0-7) or a name such as "warn"."""
    if isinstance(value, Severity):
        return value
    if isinstance(value, int):
        return Severity(value)
    text = str(value).strip().upper()
    if text.isdigit():
        return Severity(int(text))
    if text in Severity.__members__:
        return Severity[text]
    if text in _SEVERITY_ALIASES:
        return _SEVERITY_ALIASES[text]
    raise ValueError(f"Unknown syslog severity: {value!r}")


def severity_for_level(levelno: int) -> Severity:
    """Map a stdlib logging level number to the syslog severity."""
    if levelno >= logging.CRITICAL:
        return Severity.CRITICAL
    if levelno >= logging.ERROR:
        return Severity.ERROR
    if levelno >= logging.WARNING:
        return Severity.WARNING
    if levelno >= logging.INFO:
        return Severity.INFO
    return Severity.DEBUG


def _now_ms() -> int:
    return int(time.time() * 1000)


@dataclass(frozen=True)
class LogEvent:
    message: str
    level: Severity = Severity.INFO
    timestamp_ms: int = field(default_factory=_now_ms)
    trace_lines: tuple[str, ...] = ()
    logger_name: str = ""
