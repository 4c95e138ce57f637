"""Syslog transports: UDP datagrams and newline-framed TCP streams."""

import logging
import socket

from syslog_splitter.errors import ConfigError, TransportError

logger = logging.getLogger(__name__)


class Transport:
    """Connectionless byte sink. ``write`` and ``close`` raise TransportError."""

    def write(self, data: bytes):
        raise NotImplementedError

    def close(self):
        raise NotImplementedError


class UDPTransport(Transport):
    """Sends each packet as one UDP datagram."""

    def __init__(self, host: str, port: int):
        self._address = (host, port)
        try:
            self._sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        except InterruptedError:
            raise
        except OSError as exc:
            raise TransportError(f"Cannot create UDP socket: {exc}") from exc
        logger.info("UDP syslog transport ready for %s:%d", host, port)

    def write(self, data: bytes):
        try:
            self._sock.sendto(data, self._address)
        except InterruptedError:
            raise
        except OSError as exc:
            raise TransportError(f"UDP send to {self._address[0]}:{self._address[1]} failed: {exc}") from exc

    def close(self):
        try:
            self._sock.close()
        except InterruptedError:
            raise
        except OSError as exc:
            raise TransportError(f"UDP socket close failed: {exc}") from exc
        logger.info("UDP syslog transport closed")


class TCPTransport(Transport):
    """Streams packets over TCP, each terminated by a newline (RFC 6587 non-transparent framing)."""

    def __init__(self, host: str, port: int, timeout: float = 5.0):
        self._host = host
        self._port = port
        try:
            self._sock = socket.create_connection((host, port), timeout=timeout)
        except InterruptedError:
            raise
        except OSError as exc:
            raise TransportError(f"Cannot connect to {host}:{port}: {exc}") from exc
        logger.info("Connected to syslog server %s:%d", host, port)

    def write(self, data: bytes):
        try:
            self._sock.sendall(data + b"\n")
        except InterruptedError:
            raise
        except OSError as exc:
            raise TransportError(f"TCP send to {self._host}:{self._port} failed: {exc}") from exc

    def close(self):
        try:
            self._sock.close()
        except InterruptedError:
            raise
        except OSError as exc:
            raise TransportError(f"TCP socket close failed: {exc}") from exc
        logger.info("Disconnected from syslog server %s:%d", self._host, self._port)


def open_transport(protocol: str, host: str, port: int) -> Transport:
    """Open the transport named by *protocol* ("udp" or "tcp")."""
    if protocol == "udp":
        return UDPTransport(host, port)
    if protocol == "tcp":
        return TCPTransport(host, port)
    raise ConfigError(f"Unknown syslog protocol: {protocol!r}")
