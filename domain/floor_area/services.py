"""Floor Area Bounded Context - Domain Services.

Pure area arithmetic over planar shapes. NO I/O and no exceptions for
degenerate geometry: incomplete shapes contribute 0.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

import numpy as np

from domain.floor_area.value_objects import (
    Floor,
    PlanarPoint,
    PolygonShape,
    RectangleShape,
    Shape,
)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
MIN_POLYGON_VERTICES = 3


# ---------------------------------------------------------------------------
# Primitive Areas
# ---------------------------------------------------------------------------
def rectangle_area(width: float, height: float) -> float:
    """Area of a width x height rectangle; 0 if either side is non-positive."""
    if width <= 0 or height <= 0:
        return 0.0
    return float(width * height)


def polygon_area(points: Sequence[PlanarPoint]) -> float:
    """Calculate polygon area using the shoelace formula.

    The cyclic cross-product sum wraps from the last vertex back to the
    first. Its sign encodes winding order and is discarded, so clockwise
    and counter-clockwise rings give the same magnitude.

    Args:
        points: Open vertex ring (last vertex does not repeat the first)

    Returns:
        Non-negative area; 0.0 for fewer than 3 vertices
    """
    if len(points) < MIN_POLYGON_VERTICES:
        return 0.0

    xs = np.fromiter((p.x for p in points), dtype=np.float64, count=len(points))
    ys = np.fromiter((p.y for p in points), dtype=np.float64, count=len(points))

    # x_i * y_{i+1} - x_{i+1} * y_i with wraparound
    cross = xs * np.roll(ys, -1) - np.roll(xs, -1) * ys
    return float(abs(cross.sum()) / 2.0)


# ---------------------------------------------------------------------------
# Shape / Floor Areas
# ---------------------------------------------------------------------------
def area(shape: Shape) -> float:
    """Unsigned area of a single shape."""
    if isinstance(shape, RectangleShape):
        return rectangle_area(shape.width, shape.height)
    if isinstance(shape, PolygonShape):
        return polygon_area(shape.points)
    raise TypeError(f"Unsupported shape: {type(shape).__name__}")


def signed_area(shape: Shape) -> float:
    """Area with sign: positive for additive shapes, negative for voids."""
    value = area(shape)
    return -value if shape.is_void else value


def net_area(floor: Floor) -> float:
    """Sum of signed shape areas on a floor.

    Overlapping shapes simply add/subtract; no geometric union is performed.
    """
    return float(sum(signed_area(shape) for shape in floor.shapes))


def building_area(floors: Iterable[Floor]) -> float:
    """Total floor area of a building (sum of net floor areas)."""
    return float(sum(net_area(floor) for floor in floors))


# ---------------------------------------------------------------------------
# Point List Text Format
# ---------------------------------------------------------------------------
def _to_coordinate(token: str) -> float:
    """Parse a coordinate token; empty, invalid or non-finite tokens give 0."""
    try:
        value = float(token)
    except ValueError:
        return 0.0
    return value if math.isfinite(value) else 0.0


def parse_points(text: str) -> tuple[PlanarPoint, ...]:
    """Parse ``"x1,y1 x2,y2 ..."`` into planar points.

    Pairs are separated by whitespace and coordinates by a comma. A missing
    or unparseable coordinate becomes 0 so that partially typed input still
    yields points. Blank input yields no points.
    """
    points = []
    for pair in text.split():
        x_token, _, y_token = pair.partition(",")
        y_token = y_token.split(",", 1)[0]
        points.append(PlanarPoint(x=_to_coordinate(x_token), y=_to_coordinate(y_token)))
    return tuple(points)


def _format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def format_points(points: Iterable[PlanarPoint]) -> str:
    """Render points as ``"x1,y1 x2,y2 ..."`` (integral values without ``.0``)."""
    return " ".join(f"{_format_number(p.x)},{_format_number(p.y)}" for p in points)
