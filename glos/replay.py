"""Replay configuration, errors and target address parsing."""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass, field
from pathlib import Path

from glos.errors import GlosError


class ReplayError(Exception):
    """Base class for replay failures."""


class ReplayIOError(ReplayError):
    """An I/O operation failed during replay."""

    def __init__(self, error: OSError) -> None:
        self.error = error
        super().__init__(f"I/O error: {error}")


class ReplayGlosError(ReplayError):
    """The recording could not be read as GLOS data."""

    def __init__(self, error: GlosError) -> None:
        self.error = error
        super().__init__(f"GLOS error: {error}")


class ReplayConfigError(ReplayError):
    """The replay configuration is invalid."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Config error: {detail}")


@dataclass
class ReplayConfig:
    """Settings for streaming a recording over UDP."""

    input_path: Path = field(default_factory=lambda: Path("recording.glos"))
    target_addr: str = "127.0.0.1:5555"
    speed: float = 1.0
    loop_playback: bool = False
    stats_interval_secs: int = 5
    bind_addr: str = "0.0.0.0:0"

    def validate(self) -> None:
        """Raise ReplayConfigError if the settings cannot be used."""
        if not self.speed > 0.0:
            raise ReplayConfigError("speed must be > 0")


def _parse_port(text: str) -> int:
    if not text or not text.isascii() or not text.isdigit():
        raise ValueError("invalid socket address syntax")
    port = int(text)
    if port > 0xFFFF:
        raise ValueError("invalid socket address syntax")
    return port


def _parse_socket_addr(addr: str) -> str:
    if addr.startswith("["):
        host, sep, port_text = addr[1:].partition("]:")
        if not sep:
            raise ValueError("invalid socket address syntax")
        base, pct, scope = host.partition("%")
        if pct and not (scope.isascii() and scope.isdigit()):
            raise ValueError("invalid socket address syntax")
        try:
            ip6 = ipaddress.IPv6Address(base)
        except ValueError:
            raise ValueError("invalid socket address syntax") from None
        port = _parse_port(port_text)
        shown = f"{ip6}%{int(scope)}" if pct else str(ip6)
        return f"[{shown}]:{port}"

    host, sep, port_text = addr.rpartition(":")
    if not sep:
        raise ValueError("invalid socket address syntax")
    try:
        ip4 = ipaddress.IPv4Address(host)
    except ValueError:
        raise ValueError("invalid socket address syntax") from None
    return f"{ip4}:{_parse_port(port_text)}"


def parse_udp_target(s: str) -> str:
    """Parse ``udp://host:port`` or ``host:port`` into a normalised address.

    The host must be a literal IP address. Raises ValueError otherwise.
    """
    addr = s.removeprefix("udp://")
    try:
        return _parse_socket_addr(addr)
    except ValueError as exc:
        raise ValueError(f"Invalid UDP address '{s}': {exc}") from None