"""Layouts render a LogEvent into the text body of a syslog packet."""

from syslog_splitter.models import LogEvent


class Layout:
    """Base layout: optional header/footer banners and a per-event rendering.

    ``suppresses_traces()`` returns True when the layout leaves exception
    traces out of ``render()``; the appender then sends them itself.
    """

    def __init__(self, header: str | None = None, footer: str | None = None):
        self._header = header
        self._footer = footer

    def render_header(self) -> str | None:
        return self._header

    def render_footer(self) -> str | None:
        return self._footer

    def render(self, event: LogEvent) -> str:
        raise NotImplementedError

    def suppresses_traces(self) -> bool:
        return True


class MessageLayout(Layout):
    """Renders the event message verbatim."""

    def render(self, event: LogEvent) -> str:
        return event.message


class SimpleLayout(Layout):
    """Renders ``"LEVEL - message"``."""

    def render(self, event: LogEvent) -> str:
        return f"{event.level.name} - {event.message}"
