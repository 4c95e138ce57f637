"""Configuration: frozen dataclass built from defaults, an optional YAML file and env vars."""

import codecs
import logging
import os
from dataclasses import dataclass, fields

import yaml

from syslog_splitter.errors import ConfigError
from syslog_splitter.models import Severity, parse_severity
from syslog_splitter.splitter import DEFAULT_MAX_PACKET_BYTES

logger = logging.getLogger(__name__)

PROTOCOLS = ("udp", "tcp")

_ENV_VARS = {
    "name": "SYSLOG_APPENDER_NAME",
    "host": "SYSLOG_HOST",
    "port": "SYSLOG_PORT",
    "protocol": "SYSLOG_PROTOCOL",
    "facility": "SYSLOG_FACILITY",
    "facility_printing": "SYSLOG_FACILITY_PRINTING",
    "max_packet_bytes": "SYSLOG_MAX_PACKET_BYTES",
    "continuation_prefix": "SYSLOG_CONTINUATION_PREFIX",
    "threshold": "SYSLOG_THRESHOLD",
    "encoding": "SYSLOG_ENCODING",
}


def _parse_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("true", "1", "yes")


def _parse_int(key: str, value) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"{key} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"{key} must be an integer, got {value!r}") from exc


def _parse_threshold(value) -> Severity | None:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    try:
        return parse_severity(value)
    except ValueError as exc:
        raise ConfigError(f"threshold: {exc}") from exc


@dataclass(frozen=True)
class AppenderConfig:
    name: str = "syslog"
    host: str = "localhost"
    port: int = 514
    protocol: str = "udp"
    facility: str | int = "user"
    facility_printing: bool = False
    max_packet_bytes: int = DEFAULT_MAX_PACKET_BYTES
    continuation_prefix: str = ""
    threshold: Severity | None = None
    encoding: str = "utf-8"

    def __post_init__(self):
        if isinstance(self.max_packet_bytes, bool) or not isinstance(self.max_packet_bytes, int):
            raise ConfigError(f"max_packet_bytes must be an integer, got {self.max_packet_bytes!r}")
        if self.max_packet_bytes <= 0:
            raise ConfigError(f"max_packet_bytes must be positive, got {self.max_packet_bytes}")
        if isinstance(self.port, bool) or not isinstance(self.port, int) or not 0 < self.port < 65536:
            raise ConfigError(f"port must be an integer in 1-65535, got {self.port!r}")
        if self.protocol not in PROTOCOLS:
            raise ConfigError(f"protocol must be one of {PROTOCOLS}, got {self.protocol!r}")
        if self.threshold is not None and not isinstance(self.threshold, Severity):
            raise ConfigError(f"threshold must be a Severity or None, got {self.threshold!r}")
        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise ConfigError(f"Unknown encoding: {self.encoding!r}") from exc


def load_yaml_config(path: str | None = None) -> dict:
    """Load settings from a YAML file. Returns an empty dict if there is no file.

    The path defaults to the ``CONFIG_PATH`` environment variable. Settings may
    sit at the top level or under a ``syslog`` key.
    """
    path = path or os.environ.get("CONFIG_PATH")
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.warning("Config file %s not found, using defaults", path)
        return {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    logger.info("Loaded YAML config from %s", path)
    return data.get("syslog", data)


def load_config(yaml_data: dict | None = None) -> AppenderConfig:
    """Build AppenderConfig from defaults <- *yaml_data* <- environment variables."""
    known = {f.name for f in fields(AppenderConfig)}
    raw: dict = {}
    for key, value in (yaml_data or {}).items():
        if key in known:
            raw[key] = value
        else:
            logger.warning("Ignoring unknown config key %r", key)
    for key, env_var in _ENV_VARS.items():
        if env_var in os.environ:
            raw[key] = os.environ[env_var]

    kwargs: dict = {}
    for key in ("name", "host", "protocol", "continuation_prefix", "encoding"):
        if key in raw:
            kwargs[key] = "" if raw[key] is None else str(raw[key])
    if "protocol" in kwargs:
        kwargs["protocol"] = kwargs["protocol"].strip().lower()
    if "port" in raw:
        kwargs["port"] = _parse_int("port", raw["port"])
    if "max_packet_bytes" in raw:
        kwargs["max_packet_bytes"] = _parse_int("max_packet_bytes", raw["max_packet_bytes"])
    if "facility" in raw:
        kwargs["facility"] = raw["facility"]
    if "facility_printing" in raw:
        kwargs["facility_printing"] = _parse_bool(raw["facility_printing"])
    if "threshold" in raw:
        kwargs["threshold"] = _parse_threshold(raw["threshold"])

    return AppenderConfig(**kwargs)
