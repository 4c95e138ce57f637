"""Shared pytest fixtures for the syslog_splitter test suite."""

from datetime import timezone

import pytest

from syslog_splitter.errors import CollectingErrorSink, TransportError
from syslog_splitter.header import HeaderBuilder, local_hostname


class FakeTransport:
    """In-memory transport recording every write; can be told to fail."""

    def __init__(self):
        self.writes: list[bytes] = []
        self.closed = False
        self.writes_after_close = 0
        self.fail_writes = False
        self.write_error: BaseException | None = None
        self.close_error: BaseException | None = None

    def write(self, data: bytes):
        if self.closed:
            self.writes_after_close += 1
        if self.fail_writes:
            raise TransportError("simulated send failure")
        if self.write_error is not None:
            raise self.write_error
        self.writes.append(data)

    def close(self):
        self.closed = True
        if self.close_error is not None:
            raise self.close_error

    @property
    def packets(self) -> list[str]:
        return [w.decode("utf-8") for w in self.writes]


@pytest.fixture()
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture()
def error_sink() -> CollectingErrorSink:
    return CollectingErrorSink()


@pytest.fixture()
def header_builder() -> HeaderBuilder:
    """Header builder with a fixed host name, rendering in UTC."""
    return HeaderBuilder(hostname="testhost", tz=timezone.utc)


@pytest.fixture()
def fresh_hostname_cache():
    """Clear the process-wide host name cache before and after the test."""
    local_hostname.cache_clear()
    yield
    local_hostname.cache_clear()
