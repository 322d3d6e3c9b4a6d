"""Tests for Web Mercator tile addressing."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from domain.common.value_objects import BoundingBox, GeoPoint
from domain.tiles.errors import OutsideMercatorRangeError
from domain.tiles.services import (
    MAX_LATITUDE,
    is_within_mercator_range,
    lon_lat_to_tile,
    tile_bounds,
    tile_for_point,
    tile_to_lon_lat,
)
from domain.tiles.value_objects import TileAddress


# ===========================================================================
# Forward Projection
# ===========================================================================
def test_tokyo_station_zoom_15():
    assert lon_lat_to_tile(139.767, 35.681, 15) == (29105, 12903)


def test_repeated_calls_are_idempotent():
    results = {lon_lat_to_tile(139.767, 35.681, 15) for _ in range(10)}

    assert len(results) == 1


def test_zoom_zero_single_tile():
    assert lon_lat_to_tile(-122.4, 37.8, 0) == (0, 0)


@pytest.mark.parametrize(
    "lon,lat,expected",
    [
        (-90.0, 45.0, (0, 0)),
        (90.0, 45.0, (1, 0)),
        (-90.0, -45.0, (0, 1)),
        (90.0, -45.0, (1, 1)),
    ],
)
def test_zoom_one_quadrants(lon, lat, expected):
    assert lon_lat_to_tile(lon, lat, 1) == expected


def test_indices_are_ints():
    x, y = lon_lat_to_tile(139.767, 35.681, 15)

    assert isinstance(x, int) and isinstance(y, int)


def test_y_grows_southward():
    _, north = lon_lat_to_tile(0.0, 50.0, 10)
    _, south = lon_lat_to_tile(0.0, -50.0, 10)

    assert north < south


# ===========================================================================
# Checked Variant
# ===========================================================================
def test_tile_for_point():
    tile = tile_for_point(GeoPoint(latitude=35.681, longitude=139.767), 15)

    assert tile == TileAddress(zoom=15, x=29105, y=12903)
    assert tile.as_path() == "15/29105/12903"


@pytest.mark.parametrize("lat", [85.06, -85.06, 89.9, -90.0])
def test_tile_for_point_rejects_polar_latitude(lat):
    with pytest.raises(OutsideMercatorRangeError) as exc_info:
        tile_for_point(GeoPoint(latitude=lat, longitude=0.0), 10)

    assert exc_info.value.latitude == lat


def test_antimeridian_wraps_to_first_column():
    tile = tile_for_point(GeoPoint(latitude=0.0, longitude=180.0), 2)

    assert tile.x == 0


def test_mercator_range():
    assert is_within_mercator_range(85.05)
    assert not is_within_mercator_range(MAX_LATITUDE)
    assert not is_within_mercator_range(-85.06)


# ===========================================================================
# Inverse Projection
# ===========================================================================
def test_world_tile_bounds():
    bounds = tile_bounds(TileAddress(zoom=0, x=0, y=0))

    assert bounds.west == pytest.approx(-180.0)
    assert bounds.east == pytest.approx(180.0)
    assert bounds.north == pytest.approx(MAX_LATITUDE)
    assert bounds.south == pytest.approx(-MAX_LATITUDE)


def test_tile_to_lon_lat_origin():
    lon, lat = tile_to_lon_lat(1, 1, 1)

    assert lon == pytest.approx(0.0)
    assert lat == pytest.approx(0.0, abs=1e-12)


def test_point_lies_within_its_tile_bounds():
    point = GeoPoint(latitude=35.681, longitude=139.767)
    bounds = tile_bounds(tile_for_point(point, 15))

    assert bounds.contains(point)


def test_tile_center_maps_back_to_tile():
    tile = TileAddress(zoom=12, x=3638, y=1612)
    bounds = tile_bounds(tile)
    center = bounds.center

    assert bounds.contains(center)
    assert lon_lat_to_tile(center.longitude, center.latitude, 12) == (3638, 1612)


# ===========================================================================
# TileAddress Invariants
# ===========================================================================
class TestTileAddressInvariants:
    @pytest.mark.parametrize("x,y", [(4, 0), (0, 4), (-1, 0), (0, -1)])
    def test_index_outside_grid(self, x, y):
        with pytest.raises(ValidationError):
            TileAddress(zoom=2, x=x, y=y)

    def test_zoom_range(self):
        with pytest.raises(ValidationError):
            TileAddress(zoom=31, x=0, y=0)

    def test_immutable(self):
        tile = TileAddress(zoom=1, x=1, y=1)

        with pytest.raises(ValidationError):
            tile.x = 0


class TestBoundingBoxInvariants:
    def test_adjacent_tiles_share_an_edge(self):
        west_tile = tile_bounds(TileAddress(zoom=3, x=2, y=2))
        east_tile = tile_bounds(TileAddress(zoom=3, x=3, y=2))
        edge_point = GeoPoint(latitude=west_tile.center.latitude, longitude=west_tile.east)

        assert west_tile.east == pytest.approx(east_tile.west)
        assert west_tile.contains(edge_point)
        assert east_tile.contains(edge_point)

    @pytest.mark.parametrize(
        "edges",
        [
            {"west": 10.0, "south": 0.0, "east": 10.0, "north": 1.0},
            {"west": 10.0, "south": 0.0, "east": 5.0, "north": 1.0},
            {"west": 0.0, "south": 1.0, "east": 1.0, "north": 1.0},
            {"west": 0.0, "south": 2.0, "east": 1.0, "north": 1.0},
            {"west": -181.0, "south": 0.0, "east": 1.0, "north": 1.0},
            {"west": 0.0, "south": 0.0, "east": 1.0, "north": 91.0},
        ],
    )
    def test_invalid_edges_rejected(self, edges):
        with pytest.raises(ValidationError):
            BoundingBox(**edges)
