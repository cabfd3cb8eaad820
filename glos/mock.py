"""Synthetic data generator that keeps the application state moving."""

from __future__ import annotations

import math
import random
import threading
from datetime import datetime, timezone

from glos.state import (
    CN0_HISTORY_DEPTH,
    AppState,
    ConnectionStatus,
    Satellite,
    SystemMetrics,
)

TICK_SECONDS = 0.05
FFT_SIZE = 512

START_MESSAGE = "Запуск генератора тестовых данных..."
STOP_MESSAGE = "Генератор тестовых данных остановлен"

_CONSTELLATIONS = (
    ("GPS", "G", 12),
    ("ГЛОНАСС", "R", 8),
    ("Галилео", "E", 6),
    ("Бэйдоу", "C", 5),
)

_PEAKS = (0.25, 0.5, 0.75)

_LOG_MESSAGES = (
    "Получено 1024 сэмпла",
    "Решения обновлены",
    "Спутник получен",
    "Обработка корреляций",
)


def generate_satellites(rng: random.Random, time: float) -> list[Satellite]:
    """Produce a plausible sky of satellites for the given moment."""
    satellites = []
    for name, prefix, count in _CONSTELLATIONS:
        for i in range(1, count + 1):
            phase = time * 0.1 + i * 0.5
            satellites.append(
                Satellite(
                    id=f"{prefix}{i:02d}",
                    constellation=name,
                    cn0=30.0 + 10.0 * (math.sin(phase) + 1.0) + rng.random() * 3.0,
                    elevation=15.0 + 60.0 * (math.cos(phase) + 1.0) / 2.0,
                    azimuth=((i * 360.0 / count) + time * 5.0) % 360.0,
                    doppler=-500.0 + math.sin(phase * 1.5) * 800.0,
                    used_in_fix=rng.random() > 0.3,
                )
            )
    return satellites


def generate_fft(rng: random.Random, time: float) -> list[float]:
    """Produce a noisy spectrum with three signal peaks."""
    fft = []
    for i in range(FFT_SIZE):
        freq = i / FFT_SIZE
        power = -80.0 + rng.random() * 10.0
        for peak in _PEAKS:
            dist = abs(freq - peak)
            if dist < 0.05:
                power += 40.0 * (1.0 - dist / 0.05)
        power += 5.0 * math.sin(time + freq * 10.0)
        fft.append(power)
    return fft


class MockDataGenerator:
    """Fills an AppState with synthetic data from a background thread."""

    def __init__(
        self,
        state: AppState,
        rng: random.Random | None = None,
        interval: float = TICK_SECONDS,
    ) -> None:
        self._state = state
        self._rng = rng if rng is not None else random.Random()
        self._interval = interval
        self._time = 0.0
        self._running = threading.Event()
        self._wake = threading.Event()
        self._thread: threading.Thread | None = None

    def start(self) -> None:
        """Start generating; does nothing if already running."""
        if self._running.is_set():
            return
        self._running.set()
        self._wake.clear()
        with self._state.lock:
            self._state.add_log(START_MESSAGE)
        self._time = 0.0
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Stop generating and wait for the worker to finish."""
        self._running.clear()
        self._wake.set()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join()
            self._thread = None

    def is_running(self) -> bool:
        return self._running.is_set()

    def tick(self) -> None:
        """Apply one update step to the state."""
        rng = self._rng
        state = self._state
        with state.lock:
            state.status = ConnectionStatus.MOCK
            state.satellites = generate_satellites(rng, self._time)

            state.cn0_history.append((datetime.now(timezone.utc), state.avg_cn0()))
            while len(state.cn0_history) > CN0_HISTORY_DEPTH:
                state.cn0_history.popleft()

            fft = generate_fft(rng, self._time)
            state.signal_data.fft_data = list(fft)
            state.signal_data.push_waterfall(fft)
            state.signal_data.timestamp = datetime.now(timezone.utc)

            state.metrics = SystemMetrics(
                cpu_usage=25.0 + rng.random() * 15.0,
                bandwidth_mhz=4.0,
                buffer_usage=45.0 + rng.random() * 20.0,
                packets_per_sec=800 + rng.randrange(200),
            )

            state.position_lat += (rng.random() - 0.5) * 0.00001
            state.position_lon += (rng.random() - 0.5) * 0.00001
            state.velocity = 0.1 + rng.random() * 0.3
            state.hdop = 0.8 + rng.random() * 0.5

            if rng.random() < 0.05:
                state.add_log(rng.choice(_LOG_MESSAGES))
        self._time += TICK_SECONDS

    def _run(self) -> None:
        while self._running.is_set():
            self.tick()
            self._wake.wait(self._interval)
        with self._state.lock:
            self._state.status = ConnectionStatus.DISCONNECTED
            self._state.add_log(STOP_MESSAGE)