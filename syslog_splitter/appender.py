"""Syslog appender: formats events, splits oversized packets and writes them in order."""

import logging
import threading
import time

from syslog_splitter.config import AppenderConfig
from syslog_splitter.errors import ErrorSink, LoggingErrorSink, TransportError
from syslog_splitter.facility import Facility, resolve_facility
from syslog_splitter.formatter import EventFormatter
from syslog_splitter.header import HeaderBuilder
from syslog_splitter.layout import Layout
from syslog_splitter.models import LogEvent, Severity
from syslog_splitter.transmitter import SyslogWriter
from syslog_splitter.transport import Transport, open_transport

logger = logging.getLogger(__name__)


class SyslogAppender:
    """Sends LogEvents to a syslog transport, splitting packets over the size budget.

    The layout, transport and error sink are injected. ``append`` never raises:
    failures are reported to the error sink and the event is dropped. A failed
    write discards the transport for good; later appends report it missing.
    One lock covers appends and ``close`` so nothing is written after close.
    """

    def __init__(self, config: AppenderConfig | None = None, layout: Layout | None = None,
                 transport: Transport | None = None, error_sink: ErrorSink | None = None,
                 header_builder: HeaderBuilder | None = None):
        self._config = config or AppenderConfig()
        self._layout = layout
        self._error_sink = error_sink or LoggingErrorSink()
        self._lock = threading.Lock()

        self._facility, facility_str = resolve_facility(self._config.facility, self._error_sink)
        self._facility_tag = facility_str if self._config.facility_printing else ""
        self._formatter = EventFormatter(
            header_builder or HeaderBuilder(),
            layout=layout,
            facility_tag=self._facility_tag,
            max_packet_bytes=self._config.max_packet_bytes,
            continuation_prefix=self._config.continuation_prefix,
            encoding=self._config.encoding,
            error_sink=self._error_sink,
        )
        self._writer = None
        if transport is not None:
            self._writer = SyslogWriter(transport, self._facility, self._config.encoding)
        self._layout_header_checked = False
        self.closed = False

    @property
    def name(self) -> str:
        return self._config.name

    @property
    def facility(self) -> Facility:
        return self._facility

    @property
    def facility_tag(self) -> str:
        return self._facility_tag

    @property
    def connected(self) -> bool:
        return self._writer is not None

    def append(self, event: LogEvent):
        if not event.level.is_as_severe_as(self._config.threshold):
            return

        with self._lock:
            if self._writer is None:
                self._error_sink.report(f'No syslog host is set for SyslogAppender named "{self.name}".')
                return

            try:
                if not self._layout_header_checked:
                    # checked once, even when rendering the banner fails
                    self._layout_header_checked = True
                    if self._layout is not None:
                        banner = self._layout.render_header()
                        if banner is not None:
                            self._send_layout_message(banner)

                if self._writer is not None:
                    self._writer.set_level(event.level)
                    self._formatter.format(event, self._write)
            except Exception as exc:
                # a failing layout drops the event
                self._error_sink.report(f'Failed to format event for SyslogAppender "{self.name}": {exc!r}')

    def close(self):
        """Send the layout footer, if any, and release the transport."""
        with self._lock:
            self.closed = True
            if self._writer is None:
                return
            try:
                if self._layout_header_checked and self._layout is not None:
                    footer = self._layout.render_footer()
                    if footer is not None:
                        self._send_layout_message(footer)
                if self._writer is not None:
                    self._writer.close()
            except InterruptedError:
                logger.warning("Interrupted while closing SyslogAppender %s", self.name)
                raise
            except TransportError as exc:
                logger.warning("Error closing transport of SyslogAppender %s: %s", self.name, exc)
            finally:
                self._writer = None

    def _send_layout_message(self, message: str):
        if self._writer is None:
            return
        self._writer.set_level(Severity.INFO)
        self._formatter.format_layout_message(message, int(time.time() * 1000), self._write)

    def _write(self, packet: str):
        # packets emitted after a failed write in the same event are dropped
        if self._writer is None:
            return
        try:
            self._writer.write(packet)
        except InterruptedError:
            self._error_sink.report(f'Write interrupted for SyslogAppender "{self.name}".')
            self._discard_writer()
        except TransportError as exc:
            self._error_sink.report(f'Write failed for SyslogAppender "{self.name}": {exc}')
            self._discard_writer()

    def _discard_writer(self):
        writer, self._writer = self._writer, None
        try:
            writer.close()
        except (TransportError, InterruptedError) as exc:
            logger.debug("Ignoring close failure on discarded transport: %s", exc)


def create_appender(config: AppenderConfig | None = None, layout: Layout | None = None,
                    error_sink: ErrorSink | None = None) -> SyslogAppender:
    """Open the configured transport and build an appender around it.

    If the transport cannot be opened the failure is reported and the appender
    is returned without one, so every append reports the missing host.
    """
    config = config or AppenderConfig()
    error_sink = error_sink or LoggingErrorSink()
    transport = None
    try:
        transport = open_transport(config.protocol, config.host, config.port)
    except TransportError as exc:
        error_sink.report(f'Cannot open syslog transport for SyslogAppender "{config.name}": {exc}')
    return SyslogAppender(config, layout=layout, transport=transport, error_sink=error_sink)
