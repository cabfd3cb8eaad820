"""Shared application state for the monitoring views."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

WATERFALL_DEPTH = 256
CN0_HISTORY_DEPTH = 300
LOG_CAPACITY = 1000
DEFAULT_FFT_SIZE = 512


def _now() -> datetime:
    return datetime.now(timezone.utc)


class ConnectionStatus(Enum):
    """Where the displayed data comes from."""

    DISCONNECTED = "disconnected"
    MOCK = "mock"
    LIVE = "live"
    REPLAY = "replay"

    def label(self) -> str:
        """Human-readable status text."""
        return _STATUS_LABELS[self]

    def color(self) -> tuple[int, int, int]:
        """RGB colour used to show the status."""
        return _STATUS_COLORS[self]


_STATUS_LABELS = {
    ConnectionStatus.DISCONNECTED: "Отключено",
    ConnectionStatus.MOCK: "Генератор тестовых данных",
    ConnectionStatus.LIVE: "Живой поток",
    ConnectionStatus.REPLAY: "Воспроизведение файла",
}

_STATUS_COLORS = {
    ConnectionStatus.DISCONNECTED: (180, 50, 50),
    ConnectionStatus.MOCK: (200, 150, 50),
    ConnectionStatus.LIVE: (50, 180, 50),
    ConnectionStatus.REPLAY: (50, 150, 200),
}


@dataclass
class Satellite:
    """One tracked satellite."""

    id: str
    constellation: str
    cn0: float
    elevation: float
    azimuth: float
    doppler: float
    used_in_fix: bool


@dataclass
class SignalData:
    """Spectrum of the current frame plus the waterfall history."""

    frequency_mhz: float = 1575.42
    sample_rate_mhz: float = 4.0
    fft_data: list[float] = field(default_factory=lambda: [0.0] * DEFAULT_FFT_SIZE)
    waterfall: deque[list[float]] = field(default_factory=deque)
    timestamp: datetime = field(default_factory=_now)

    def push_waterfall(self, data: list[float]) -> None:
        """Append a spectrum row, dropping the oldest beyond the depth."""
        while len(self.waterfall) >= WATERFALL_DEPTH:
            self.waterfall.popleft()
        self.waterfall.append(list(data))


@dataclass
class SystemMetrics:
    """Processing load figures."""

    cpu_usage: float = 0.0
    bandwidth_mhz: float = 0.0
    buffer_usage: float = 0.0
    packets_per_sec: int = 0


@dataclass
class AppState:
    """Everything the views display; guard access with ``lock``."""

    status: ConnectionStatus = ConnectionStatus.DISCONNECTED
    satellites: list[Satellite] = field(default_factory=list)
    signal_data: SignalData = field(default_factory=SignalData)
    metrics: SystemMetrics = field(default_factory=SystemMetrics)
    position_lat: float = 55.7512
    position_lon: float = 37.6184
    altitude: float = 150.0
    velocity: float = 0.0
    hdop: float = 1.0
    pdop: float = 1.5
    cn0_history: deque[tuple[datetime, float]] = field(default_factory=deque)
    log_messages: deque[tuple[datetime, str]] = field(default_factory=deque)
    lock: threading.RLock = field(
        default_factory=threading.RLock, repr=False, compare=False
    )

    def add_log(self, message: str) -> None:
        """Record a message, keeping at most LOG_CAPACITY entries."""
        while len(self.log_messages) >= LOG_CAPACITY:
            self.log_messages.popleft()
        self.log_messages.append((_now(), message))

    def avg_cn0(self) -> float:
        """Mean CN0 over all satellites, 0.0 when there are none."""
        if not self.satellites:
            return 0.0
        return sum(sat.cn0 for sat in self.satellites) / len(self.satellites)

    def satellite_count(self) -> int:
        return len(self.satellites)

    def used_satellites(self) -> int:
        """Number of satellites taking part in the position fix."""
        return sum(1 for sat in self.satellites if sat.used_in_fix)