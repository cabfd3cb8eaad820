"""User-adjustable display settings."""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum

FFT_WINDOW_SIZES = (256, 512, 1024, 2048)
MIN_CN0_RANGE = (0.0, 50.0)
UPDATE_RATE_RANGE_MS = (10, 500)
HISTORY_LENGTH_RANGE = (60, 600)


class ColormapType(Enum):
    """Colour map used to draw the spectrum waterfall."""

    JET = "jet"
    VIRIDIS = "viridis"
    GRAYSCALE = "grayscale"

    def label(self) -> str:
        """Human-readable name of the colour map."""
        return _COLORMAP_LABELS[self]


_COLORMAP_LABELS = {
    ColormapType.JET: "Jet",
    ColormapType.VIRIDIS: "Viridis",
    ColormapType.GRAYSCALE: "Оттенки серого",
}


def _check_between(name: str, value: float, bounds: tuple[float, float]) -> None:
    low, high = bounds
    if not low <= value <= high:
        raise ValueError(f"{name} must be between {low} and {high}, got {value}")


@dataclass
class UiSettings:
    """Settings of the signal, satellite and dashboard views."""

    fft_window_size: int = 512
    waterfall_colormap: ColormapType = ColormapType.JET
    show_grid: bool = True
    min_cn0_threshold: float = 25.0
    show_doppler_arrows: bool = False
    skyplot_labels: bool = True
    update_rate_ms: int = 50
    history_length: int = 300

    def reset(self) -> None:
        """Restore every setting to its default value."""
        defaults = UiSettings()
        for item in fields(self):
            setattr(self, item.name, getattr(defaults, item.name))

    def validate(self) -> None:
        """Raise ValueError if a setting lies outside what the views offer."""
        if self.fft_window_size not in FFT_WINDOW_SIZES:
            raise ValueError(
                f"fft_window_size must be one of {FFT_WINDOW_SIZES}, "
                f"got {self.fft_window_size}"
            )
        if not isinstance(self.waterfall_colormap, ColormapType):
            raise ValueError(f"unknown colour map: {self.waterfall_colormap!r}")
        _check_between("min_cn0_threshold", self.min_cn0_threshold, MIN_CN0_RANGE)
        _check_between("update_rate_ms", self.update_rate_ms, UPDATE_RATE_RANGE_MS)
        _check_between("history_length", self.history_length, HISTORY_LENGTH_RANGE)