"""RFC 3164 packet header: ``"Mmm dd HH:MM:SS hostname "``."""

import functools
import logging
import socket
from datetime import datetime, tzinfo

logger = logging.getLogger(__name__)

UNKNOWN_HOST = "UNKNOWN_HOST"

# Month abbreviations are fixed English regardless of the process locale.
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

# Offset of the tens digit of the day-of-month in "Mmm dd ".
_DAY_OFFSET = 4


@functools.lru_cache(maxsize=None)
def local_hostname() -> str:
    """Resolve the local host name once per process; UNKNOWN_HOST if that fails."""
    try:
        hostname = socket.gethostname()
    except OSError as exc:
        logger.debug("Hostname resolution failed: %s", exc)
        return UNKNOWN_HOST
    return hostname or UNKNOWN_HOST


def format_timestamp(timestamp_ms: int, tz: tzinfo | None = None) -> str:
    """Format epoch milliseconds as ``"Mmm dd HH:MM:SS "`` with a space-padded day."""
    moment = datetime.fromtimestamp(timestamp_ms / 1000.0, tz)
    stamp = f"{_MONTHS[moment.month - 1]} {moment.day:02d} {moment:%H:%M:%S} "
    # RFC 3164 says leading space, not leading zero on days 1-9
    if stamp[_DAY_OFFSET] == "0":
        stamp = stamp[:_DAY_OFFSET] + " " + stamp[_DAY_OFFSET + 1:]
    return stamp


class HeaderBuilder:
    """Builds the HEADER part of a syslog packet for a given instant.

    *hostname* overrides the resolved local host name; *tz* defaults to local time.
    """

    def __init__(self, hostname: str | None = None, tz: tzinfo | None = None):
        self._hostname = hostname
        self._tz = tz

    @property
    def hostname(self) -> str:
        if self._hostname is None:
            self._hostname = local_hostname()
        return self._hostname

    def build(self, timestamp_ms: int) -> str:
        return format_timestamp(timestamp_ms, self._tz) + self.hostname + " "
