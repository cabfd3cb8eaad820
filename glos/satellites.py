"""Satellite table filtering and sorting, and sky plot helpers."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable
from dataclasses import dataclass, replace
from enum import Enum

from glos.state import Satellite

Color = tuple[int, int, int]

CONSTELLATIONS = ("GPS", "ГЛОНАСС", "Галилео", "Бэйдоу")

CONSTELLATION_COLORS: dict[str, Color] = {
    "GPS": (100, 150, 255),
    "ГЛОНАСС": (255, 100, 100),
    "Галилео": (100, 255, 150),
    "Бэйдоу": (255, 200, 100),
}
DEFAULT_COLOR: Color = (255, 255, 255)

CN0_STRONG_COLOR: Color = (100, 255, 100)
CN0_MEDIUM_COLOR: Color = (255, 200, 100)
CN0_WEAK_COLOR: Color = (255, 100, 100)
CN0_STRONG_THRESHOLD = 35.0
CN0_MEDIUM_THRESHOLD = 25.0


class SortColumn(Enum):
    """Column the satellite table is ordered by."""

    ID = "id"
    CONSTELLATION = "constellation"
    CN0 = "cn0"
    ELEVATION = "elevation"
    AZIMUTH = "azimuth"
    DOPPLER = "doppler"


_SORT_KEYS: dict[SortColumn, Callable[[Satellite], object]] = {
    SortColumn.ID: lambda sat: sat.id,
    SortColumn.CONSTELLATION: lambda sat: sat.constellation,
    SortColumn.CN0: lambda sat: sat.cn0,
    SortColumn.ELEVATION: lambda sat: sat.elevation,
    SortColumn.AZIMUTH: lambda sat: sat.azimuth,
    SortColumn.DOPPLER: lambda sat: sat.doppler,
}

_TEXT_COLUMNS = frozenset({SortColumn.ID, SortColumn.CONSTELLATION})


@dataclass
class SatelliteTable:
    """Filter and sort settings of the interactive satellite table."""

    sort_by: SortColumn = SortColumn.CN0
    sort_ascending: bool = False
    filter_constellation: str | None = None
    filter_min_cn0: float = 0.0

    def toggle_sort(self, column: SortColumn) -> None:
        """Flip direction on the current column, or switch to a new one descending."""
        if self.sort_by is column:
            self.sort_ascending = not self.sort_ascending
        else:
            self.sort_by = column
            self.sort_ascending = False

    def _accepts(self, sat: Satellite) -> bool:
        if (
            self.filter_constellation is not None
            and self.filter_constellation != sat.constellation
        ):
            return False
        return sat.cn0 >= self.filter_min_cn0

    def apply(self, satellites: Iterable[Satellite]) -> list[Satellite]:
        """Return copies of the satellites that pass the filters, in table order.

        Raises ValueError if a numeric sort column holds NaN.
        """
        chosen = [replace(sat) for sat in satellites if self._accepts(sat)]
        key = _SORT_KEYS[self.sort_by]
        if self.sort_by not in _TEXT_COLUMNS and any(
            math.isnan(key(sat)) for sat in chosen
        ):
            raise ValueError(f"cannot sort by {self.sort_by.value}: value is NaN")
        return sorted(chosen, key=key, reverse=not self.sort_ascending)


def constellation_color(name: str) -> Color:
    """RGB colour used to draw a constellation; white when unknown."""
    return CONSTELLATION_COLORS.get(name, DEFAULT_COLOR)


def cn0_color(cn0: float) -> Color:
    """RGB colour grading a CN0 value as strong, medium or weak."""
    if cn0 > CN0_STRONG_THRESHOLD:
        return CN0_STRONG_COLOR
    if cn0 > CN0_MEDIUM_THRESHOLD:
        return CN0_MEDIUM_COLOR
    return CN0_WEAK_COLOR


def sky_position(satellite: Satellite) -> tuple[float, float]:
    """Polar sky plot coordinates: zenith at the origin, north along +y."""
    radius = (90.0 - satellite.elevation) / 90.0
    azimuth = math.radians(satellite.azimuth)
    return radius * math.sin(azimuth), radius * math.cos(azimuth)