"""Syslog writer: prefixes packets with their PRI and hands them to a transport."""

import logging

from syslog_splitter.facility import Facility
from syslog_splitter.models import Severity
from syslog_splitter.transport import Transport

logger = logging.getLogger(__name__)


def encode_priority(facility: Facility, severity: Severity) -> str:
    """Return the ``"<PRI>"`` prefix, PRI being facility * 8 + severity."""
    return f"<{int(facility) | int(severity)}>"


class SyslogWriter:
    """Writes packets in call order at the most recently set severity."""

    def __init__(self, transport: Transport, facility: Facility = Facility.USER,
                 encoding: str = "utf-8"):
        self._transport = transport
        self._facility = facility
        self._encoding = encoding
        self._severity = Severity.INFO

    def set_level(self, severity: Severity):
        self._severity = severity

    def write(self, packet: str):
        data = (encode_priority(self._facility, self._severity) + packet).encode(
            self._encoding, errors="replace")
        self._transport.write(data)
        logger.debug("Sent %d-byte syslog packet", len(data))

    def close(self):
        self._transport.close()
