"""Syslog facility codes and their lowercase names (RFC 3164 section 4.1.1)."""

from enum import IntEnum

from syslog_splitter.errors import ErrorSink


class Facility(IntEnum):
    """Facility values are pre-shifted so that ``facility | severity`` is the PRI."""

    KERN = 0 << 3
    USER = 1 << 3
    MAIL = 2 << 3
    DAEMON = 3 << 3
    AUTH = 4 << 3
    SYSLOG = 5 << 3
    LPR = 6 << 3
    NEWS = 7 << 3
    UUCP = 8 << 3
    CRON = 9 << 3
    AUTHPRIV = 10 << 3
    FTP = 11 << 3
    LOCAL0 = 16 << 3
    LOCAL1 = 17 << 3
    LOCAL2 = 18 << 3
    LOCAL3 = 19 << 3
    LOCAL4 = 20 << 3
    LOCAL5 = 21 << 3
    LOCAL6 = 22 << 3
    LOCAL7 = 23 << 3


_FACILITY_NAMES = {facility.value: facility.name.lower() for facility in Facility}


def facility_name(code: int) -> str | None:
    """Return the lowercase name for a facility code, e.g. 8 -> "user", or None."""
    return _FACILITY_NAMES.get(code)


def lookup_facility(value) -> Facility | None:
    """Resolve a Facility from a member, a numeric code or a name ("local0", "LOCAL0")."""
    if isinstance(value, Facility):
        return value
    if isinstance(value, str):
        text = value.strip()
        if text.lstrip("-").isdigit():
            return lookup_facility(int(text))
        return Facility.__members__.get(text.upper())
    if isinstance(value, int) and value in _FACILITY_NAMES:
        return Facility(value)
    return None


def resolve_facility(value, error_sink: ErrorSink) -> tuple[Facility, str]:
    """Return the facility and its ``"<name>:"`` tag, defaulting unknown values to USER.

    An unknown value is reported once to *error_sink*; the caller keeps the
    returned USER facility for its lifetime.
    """
    facility = lookup_facility(value)
    if facility is None:
        error_sink.report(f'"{value}" is an unknown syslog facility. Defaulting to "USER".')
        facility = Facility.USER
    return facility, facility_name(facility) + ":"
