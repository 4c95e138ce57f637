"""Tests for PRI encoding and the syslog writer."""

from syslog_splitter.facility import Facility
from syslog_splitter.models import Severity
from syslog_splitter.transmitter import SyslogWriter, encode_priority


class TestEncodePriority:
    def test_user_error(self):
        assert encode_priority(Facility.USER, Severity.ERROR) == "<11>"

    def test_kern_emergency(self):
        assert encode_priority(Facility.KERN, Severity.EMERGENCY) == "<0>"

    def test_local7_debug(self):
        assert encode_priority(Facility.LOCAL7, Severity.DEBUG) == "<191>"


class TestSyslogWriter:
    def test_default_level_is_info(self, transport):
        writer = SyslogWriter(transport)
        writer.write("hello")
        assert transport.writes == [b"<14>hello"]

    def test_level_applies_to_following_writes(self, transport):
        writer = SyslogWriter(transport, Facility.LOCAL0)
        writer.set_level(Severity.WARNING)
        writer.write("a")
        writer.write("b")
        writer.set_level(Severity.DEBUG)
        writer.write("c")
        assert transport.writes == [b"<132>a", b"<132>b", b"<135>c"]

    def test_encoding(self, transport):
        writer = SyslogWriter(transport, encoding="utf-8")
        writer.write("héllo")
        assert transport.writes == ["<14>héllo".encode("utf-8")]

    def test_unencodable_characters_replaced(self, transport):
        writer = SyslogWriter(transport, encoding="ascii")
        writer.write("héllo")
        assert transport.writes == [b"<14>h?llo"]

    def test_close_closes_transport(self, transport):
        SyslogWriter(transport).close()
        assert transport.closed is True
