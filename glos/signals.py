"""Spectrum plot points, statistics and waterfall colouring."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from glos.state import SignalData

Color = tuple[int, int, int]


@dataclass(frozen=True)
class SignalStats:
    """Summary of one spectrum frame, in dB."""

    max_power: float
    min_power: float
    avg_power: float

    @property
    def dynamic_range(self) -> float:
        return self.max_power - self.min_power


def _divide(numerator: float, denominator: float) -> float:
    if denominator != 0.0:
        return numerator / denominator
    if numerator == 0.0 or math.isnan(numerator) or math.isnan(denominator):
        return math.nan
    return math.inf if numerator > 0.0 else -math.inf


def _channel(value: float) -> int:
    if math.isnan(value):
        return 0
    return min(max(math.floor(value + 0.5), 0), 255)


def power_to_color(power_db: float, min_db: float, max_db: float) -> Color:
    """Map a power level to a jet-like RGB colour: blue, cyan, green, yellow, red."""
    normalized = _divide(power_db - min_db, max_db - min_db)
    if not math.isnan(normalized):
        normalized = min(max(normalized, 0.0), 1.0)

    if normalized < 0.25:
        t = normalized / 0.25
        rgb = (0.0, 255.0 * t, 255.0)
    elif normalized < 0.5:
        t = (normalized - 0.25) / 0.25
        rgb = (0.0, 255.0, 255.0 * (1.0 - t))
    elif normalized < 0.75:
        t = (normalized - 0.5) / 0.25
        rgb = (255.0 * t, 255.0, 0.0)
    else:
        t = (normalized - 0.75) / 0.25
        rgb = (255.0, 255.0 * (1.0 - t), 0.0)
    r, g, b = rgb
    return _channel(r), _channel(g), _channel(b)


def fft_points(signal_data: SignalData) -> list[tuple[float, float]]:
    """Spectrum as (frequency in MHz, power in dB) pairs around the centre frequency."""
    size = len(signal_data.fft_data)
    return [
        (
            (i / size - 0.5) * signal_data.sample_rate_mhz
            + signal_data.frequency_mhz,
            power,
        )
        for i, power in enumerate(signal_data.fft_data)
    ]


def signal_stats(fft_data: Sequence[float]) -> SignalStats:
    """Maximum, minimum and mean power of a spectrum.

    NaN values are ignored for the extremes; an empty spectrum gives
    -inf, +inf and NaN.
    """
    finite = [p for p in fft_data if not math.isnan(p)]
    max_power = max(finite, default=-math.inf)
    min_power = min(finite, default=math.inf)
    avg_power = sum(fft_data) / len(fft_data) if fft_data else math.nan
    return SignalStats(max_power=max_power, min_power=min_power, avg_power=avg_power)


def waterfall_rgba(waterfall: Iterable[Sequence[float]]) -> tuple[int, int, bytes]:
    """Render waterfall rows into an RGBA image scaled to the data's own range.

    Returns (width, height, pixels); an empty waterfall gives (0, 0, b"").
    Raises ValueError when rows differ in length.
    """
    rows = [list(row) for row in waterfall]
    if not rows:
        return 0, 0, b""
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("waterfall rows must all have the same length")

    values = [p for row in rows for p in row if not math.isnan(p)]
    min_power = min(values, default=math.inf)
    max_power = max(values, default=-math.inf)

    pixels = bytearray()
    for row in rows:
        for power in row:
            pixels.extend(power_to_color(power, min_power, max_power))
            pixels.append(255)
    return width, len(rows), bytes(pixels)