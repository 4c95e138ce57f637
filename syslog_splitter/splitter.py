"""Packet splitter: breaks oversized syslog packets into framed sub-packets."""

import logging
from typing import Callable

from syslog_splitter.errors import ErrorSink

logger = logging.getLogger(__name__)

# Largest packet text that, with a "<PRI>" prefix of up to five bytes, still
# fits the traditional 1024-byte syslog datagram.
DEFAULT_MAX_PACKET_BYTES = 1019

TRUNCATION_MARKER = "..."


def byte_length(text: str, encoding: str = "utf-8") -> int:
    """Return the size of *text* once encoded for the wire."""
    return len(text.encode(encoding, errors="replace"))


def split_packet(header: str, continuation_prefix: str, max_bytes: int, packet: str,
                 emit: Callable[[str], None], encoding: str = "utf-8",
                 error_sink: ErrorSink | None = None):
    """Emit *packet* through *emit*, split into pieces of at most *max_bytes*.

    *packet* must start with *header*. A packet that does not fit is cut at
    ``len(header) + (len(packet) - len(header)) // 2`` characters; the left
    piece gets TRUNCATION_MARKER appended and the right piece is re-prefixed
    with *header* and *continuation_prefix*. Both pieces are split again as
    needed, left first, so pieces are emitted in reading order.

    The size test counts encoded bytes while the cut point counts characters.
    Recursion depth is bounded by log2(len(packet)).

    When a cut would not make both pieces strictly smaller in encoded bytes
    than the packet (header plus prefix leave no room for a body), the packet
    is emitted oversized and the condition is reported to *error_sink*.
    """
    size = byte_length(packet, encoding)
    if size <= max_bytes:
        emit(packet)
        return

    split = len(header) + (len(packet) - len(header)) // 2
    left = packet[:split] + TRUNCATION_MARKER
    right = header + continuation_prefix + packet[split:]

    if byte_length(left, encoding) >= size or byte_length(right, encoding) >= size:
        logger.warning("Cannot split packet of %d bytes below %d bytes; sending oversized packet",
                       size, max_bytes)
        if error_sink is not None:
            error_sink.report(
                f"Syslog packet of {size} bytes cannot be split below {max_bytes} bytes "
                f"(header and continuation prefix leave no room); sending it oversized."
            )
        emit(packet)
        return

    split_packet(header, continuation_prefix, max_bytes, left, emit, encoding, error_sink)
    split_packet(header, continuation_prefix, max_bytes, right, emit, encoding, error_sink)
