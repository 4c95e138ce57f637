"""Event formatter: turns one LogEvent into the ordered packets to transmit."""

from typing import Callable

from syslog_splitter.errors import ErrorSink
from syslog_splitter.header import HeaderBuilder
from syslog_splitter.layout import Layout
from syslog_splitter.models import LogEvent
from syslog_splitter.splitter import DEFAULT_MAX_PACKET_BYTES, split_packet

# Packets longer than this many characters might exceed the byte budget once
# encoded, so they go through the splitter; shorter ones are sent directly.
SPLIT_TRIGGER_LENGTH = 256

# Replaces the leading tab of indented trace lines.
TRACE_INDENT = "    "


class EventFormatter:
    def __init__(self, header_builder: HeaderBuilder, layout: Layout | None = None,
                 facility_tag: str = "", max_packet_bytes: int = DEFAULT_MAX_PACKET_BYTES,
                 continuation_prefix: str = "", encoding: str = "utf-8",
                 error_sink: ErrorSink | None = None):
        self._header_builder = header_builder
        self._layout = layout
        self._facility_tag = facility_tag
        self._max_packet_bytes = max_packet_bytes
        self._continuation_prefix = continuation_prefix or ""
        self._encoding = encoding
        self._error_sink = error_sink

    def qualify(self, header: str, body: str) -> str:
        """Prefix *body* with the header and the facility tag, when either is set."""
        if self._facility_tag or header:
            return header + self._facility_tag + body
        return body

    def format(self, event: LogEvent, emit: Callable[[str], None]):
        """Emit the packets for *event* in transmission order.

        The message packet comes first, split when it is long, followed by one
        unsplit packet per trace line when the layout does not render traces.
        """
        header = self._header_builder.build(event.timestamp_ms)
        if self._layout is None:
            body = event.message
        else:
            body = self._layout.render(event)
        packet = self.qualify(header, body)

        if len(packet) > SPLIT_TRIGGER_LENGTH:
            split_packet(header, self._continuation_prefix, self._max_packet_bytes, packet,
                         emit, self._encoding, self._error_sink)
        else:
            emit(packet)

        if self._layout is None or self._layout.suppresses_traces():
            for line in event.trace_lines:
                if line.startswith("\t"):
                    emit(header + TRACE_INDENT + line[1:])
                else:
                    emit(header + line)

    def format_layout_message(self, message: str, timestamp_ms: int,
                              emit: Callable[[str], None]):
        """Emit a layout header or footer banner as a single packet."""
        header = self._header_builder.build(timestamp_ms)
        emit(self.qualify(header, message))
