import math

import pytest

from glos.satellites import (
    CN0_MEDIUM_COLOR,
    CN0_STRONG_COLOR,
    CN0_WEAK_COLOR,
    CONSTELLATION_COLORS,
    CONSTELLATIONS,
    DEFAULT_COLOR,
    SatelliteTable,
    SortColumn,
    cn0_color,
    constellation_color,
    sky_position,
)
from glos.state import Satellite


def sat(id_, constellation="GPS", cn0=30.0, elevation=45.0, azimuth=0.0, doppler=0.0):
    return Satellite(
        id=id_,
        constellation=constellation,
        cn0=cn0,
        elevation=elevation,
        azimuth=azimuth,
        doppler=doppler,
        used_in_fix=True,
    )


@pytest.fixture
def sky():
    return [
        sat("G01", "GPS", cn0=40.0, elevation=10.0, doppler=-100.0),
        sat("R03", "ГЛОНАСС", cn0=20.0, elevation=70.0, doppler=300.0),
        sat("E02", "Галилео", cn0=33.0, elevation=50.0, doppler=0.0),
        sat("G05", "GPS", cn0=28.0, elevation=30.0, doppler=-400.0),
    ]


def test_default_table_sorts_by_cn0_descending(sky):
    table = SatelliteTable()
    assert table.sort_by is SortColumn.CN0
    assert table.sort_ascending is False
    rows = table.apply(sky)
    cn0s = [row.cn0 for row in rows]
    assert cn0s == sorted(cn0s, reverse=True)
    assert len(rows) == len(sky)


def test_toggle_same_column_flips_direction():
    table = SatelliteTable()
    table.toggle_sort(SortColumn.CN0)
    assert table.sort_ascending is True
    table.toggle_sort(SortColumn.CN0)
    assert table.sort_ascending is False


def test_toggle_new_column_resets_to_descending():
    table = SatelliteTable(sort_ascending=True)
    table.toggle_sort(SortColumn.ELEVATION)
    assert table.sort_by is SortColumn.ELEVATION
    assert table.sort_ascending is False


def test_sort_by_id_ascending(sky):
    table = SatelliteTable(sort_by=SortColumn.ID, sort_ascending=True)
    ids = [row.id for row in table.apply(sky)]
    assert ids == sorted(s.id for s in sky)


@pytest.mark.parametrize(
    "column,attr",
    [
        (SortColumn.ELEVATION, "elevation"),
        (SortColumn.AZIMUTH, "azimuth"),
        (SortColumn.DOPPLER, "doppler"),
        (SortColumn.CONSTELLATION, "constellation"),
    ],
)
def test_sort_by_each_column(sky, column, attr):
    table = SatelliteTable(sort_by=column, sort_ascending=True)
    values = [getattr(row, attr) for row in table.apply(sky)]
    assert values == sorted(getattr(s, attr) for s in sky)


def test_filter_by_constellation(sky):
    table = SatelliteTable(filter_constellation="GPS")
    rows = table.apply(sky)
    assert {row.id for row in rows} == {"G01", "G05"}


def test_filter_min_cn0_is_inclusive(sky):
    table = SatelliteTable(filter_min_cn0=28.0)
    rows = table.apply(sky)
    assert {row.id for row in rows} == {"G01", "E02", "G05"}
    assert all(row.cn0 >= 28.0 for row in rows)


def test_filters_combine(sky):
    table = SatelliteTable(filter_constellation="GPS", filter_min_cn0=30.0)
    assert [row.id for row in table.apply(sky)] == ["G01"]


def test_ties_keep_input_order_in_both_directions():
    sats = [sat("A", cn0=30.0), sat("B", cn0=30.0), sat("C", cn0=30.0)]
    for ascending in (True, False):
        table = SatelliteTable(sort_ascending=ascending)
        assert [row.id for row in table.apply(sats)] == ["A", "B", "C"]


def test_apply_returns_copies(sky):
    rows = SatelliteTable().apply(sky)
    assert rows[0].id == "G01"
    rows[0].cn0 = -1.0
    assert rows[0].cn0 == -1.0
    assert [s.cn0 for s in sky] == [40.0, 20.0, 33.0, 28.0]


def test_apply_empty():
    assert SatelliteTable().apply([]) == []


def test_constellation_colors():
    assert constellation_color("GPS") == (100, 150, 255)
    assert constellation_color("unknown") == DEFAULT_COLOR
    colors = {constellation_color(name) for name in CONSTELLATIONS}
    assert len(colors) == len(CONSTELLATIONS)
    assert set(CONSTELLATION_COLORS) == set(CONSTELLATIONS)


@pytest.mark.parametrize(
    "value,expected",
    [
        (35.1, CN0_STRONG_COLOR),
        (35.0, CN0_MEDIUM_COLOR),
        (25.1, CN0_MEDIUM_COLOR),
        (25.0, CN0_WEAK_COLOR),
        (0.0, CN0_WEAK_COLOR),
    ],
)
def test_cn0_color_thresholds(value, expected):
    assert cn0_color(value) == expected


def test_sky_position_zenith_is_origin():
    x, y = sky_position(sat("A", elevation=90.0, azimuth=123.0))
    assert x == pytest.approx(0.0)
    assert y == pytest.approx(0.0)


def test_sky_position_north_and_east():
    x, y = sky_position(sat("A", elevation=0.0, azimuth=0.0))
    assert (x, y) == pytest.approx((0.0, 1.0))
    x, y = sky_position(sat("A", elevation=0.0, azimuth=90.0))
    assert (x, y) == pytest.approx((1.0, 0.0), abs=1e-12)


@pytest.mark.parametrize("elevation", [0.0, 30.0, 60.0, 75.0])
@pytest.mark.parametrize("azimuth", [0.0, 45.0, 200.0, 359.0])
def test_sky_position_distance_follows_elevation(elevation, azimuth):
    x, y = sky_position(sat("A", elevation=elevation, azimuth=azimuth))
    assert math.hypot(x, y) == pytest.approx((90.0 - elevation) / 90.0)