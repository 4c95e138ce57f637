"""logging.Handler bridge: feeds stdlib LogRecords to a SyslogAppender."""

import logging

from syslog_splitter.appender import SyslogAppender, create_appender
from syslog_splitter.config import AppenderConfig, load_config, load_yaml_config
from syslog_splitter.errors import ErrorSink
from syslog_splitter.layout import Layout, MessageLayout
from syslog_splitter.models import LogEvent, severity_for_level

_DEFAULT_FORMATTER = logging.Formatter()


def _exclude_own_records(record: logging.LogRecord) -> bool:
    # the appender's own diagnostics must not loop back into it
    return not record.name.startswith("syslog_splitter")


def event_from_record(record: logging.LogRecord, formatter: logging.Formatter) -> LogEvent:
    """Convert a LogRecord into a LogEvent.

    The message is rendered with *formatter* but without the exception text;
    exception and stack information become the event's trace lines.
    """
    record.message = record.getMessage()
    if formatter.usesTime():
        record.asctime = formatter.formatTime(record, formatter.datefmt)
    message = formatter.formatMessage(record)

    trace_lines: list[str] = []
    if record.exc_info:
        trace_lines.extend(formatter.formatException(record.exc_info).splitlines())
    elif record.exc_text:
        trace_lines.extend(record.exc_text.splitlines())
    if record.stack_info:
        trace_lines.extend(formatter.formatStack(record.stack_info).splitlines())

    return LogEvent(
        message=message,
        level=severity_for_level(record.levelno),
        timestamp_ms=int(record.created * 1000),
        trace_lines=tuple(trace_lines),
        logger_name=record.name,
    )


class SplittingSysLogHandler(logging.Handler):
    """Logging handler that sends records to syslog, splitting long messages."""

    def __init__(self, appender: SyslogAppender, level=logging.NOTSET):
        super().__init__(level)
        self.appender = appender
        self.addFilter(_exclude_own_records)

    @classmethod
    def from_config(cls, config: AppenderConfig | None = None, layout: Layout | None = None,
                    error_sink: ErrorSink | None = None, level=logging.NOTSET):
        """Build a handler from *config*, or from CONFIG_PATH and the environment."""
        if config is None:
            config = load_config(load_yaml_config())
        appender = create_appender(config, layout=layout or MessageLayout(), error_sink=error_sink)
        return cls(appender, level)

    def emit(self, record: logging.LogRecord):
        try:
            event = event_from_record(record, self.formatter or _DEFAULT_FORMATTER)
        except Exception:
            self.handleError(record)
            return
        self.appender.append(event)

    def close(self):
        try:
            self.appender.close()
        finally:
            super().close()
