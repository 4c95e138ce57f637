"""Tests for the RFC 3164 packet header."""

import socket
from datetime import datetime, timezone

from syslog_splitter.header import UNKNOWN_HOST, HeaderBuilder, format_timestamp, local_hostname


def _ms(*args) -> int:
    return int(datetime(*args, tzinfo=timezone.utc).timestamp() * 1000)


class TestFormatTimestamp:
    def test_single_digit_day_uses_leading_space(self):
        stamp = format_timestamp(_ms(2024, 3, 5, 14, 7, 9), timezone.utc)
        assert stamp == "Mar  5 14:07:09 "
        assert stamp[4] == " "

    def test_two_digit_day_unmodified(self):
        stamp = format_timestamp(_ms(2024, 3, 15, 14, 7, 9), timezone.utc)
        assert stamp == "Mar 15 14:07:09 "
        assert stamp[4:6] == "15"

    def test_day_ten_keeps_its_zero(self):
        stamp = format_timestamp(_ms(2024, 11, 10, 0, 0, 0), timezone.utc)
        assert stamp == "Nov 10 00:00:00 "

    def test_time_is_zero_padded_24h(self):
        stamp = format_timestamp(_ms(2024, 12, 31, 23, 5, 1), timezone.utc)
        assert stamp == "Dec 31 23:05:01 "

    def test_english_month_abbreviations(self):
        months = [format_timestamp(_ms(2024, m, 20), timezone.utc)[:3] for m in range(1, 13)]
        assert months == ["Jan", "Feb", "Mar", "Apr", "May", "Jun",
                          "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]

    def test_milliseconds_ignored(self):
        assert format_timestamp(_ms(2024, 3, 5, 14, 7, 9) + 999, timezone.utc) == "Mar  5 14:07:09 "


class TestHeaderBuilder:
    def test_header_layout(self):
        builder = HeaderBuilder(hostname="web01", tz=timezone.utc)
        assert builder.build(_ms(2024, 1, 2, 3, 4, 5)) == "Jan  2 03:04:05 web01 "

    def test_resolves_local_hostname(self, fresh_hostname_cache, monkeypatch):
        monkeypatch.setattr(socket, "gethostname", lambda: "box42")
        builder = HeaderBuilder(tz=timezone.utc)
        assert builder.build(_ms(2024, 1, 2, 3, 4, 5)).endswith(" box42 ")


class TestLocalHostname:
    def test_failure_falls_back_to_sentinel(self, fresh_hostname_cache, monkeypatch):
        def broken():
            raise OSError("no name")

        monkeypatch.setattr(socket, "gethostname", broken)
        assert local_hostname() == UNKNOWN_HOST

    def test_failure_is_not_retried(self, fresh_hostname_cache, monkeypatch):
        calls = []

        def broken():
            calls.append(1)
            raise OSError("no name")

        monkeypatch.setattr(socket, "gethostname", broken)
        local_hostname()
        local_hostname()
        assert len(calls) == 1

    def test_resolved_once(self, fresh_hostname_cache, monkeypatch):
        calls = []

        def counting():
            calls.append(1)
            return "once"

        monkeypatch.setattr(socket, "gethostname", counting)
        assert local_hostname() == "once"
        assert local_hostname() == "once"
        assert len(calls) == 1
