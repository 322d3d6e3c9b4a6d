"""Floor Area Bounded Context - Value Objects.

Planar shapes measured in meters. Coordinates here are never geographic
degrees; see domain.common for WGS84 types.

Shapes are a discriminated union on ``kind``:
    RectangleShape  kind="rect"     width x height anchored at the origin
    PolygonShape    kind="polygon"  simple polygon, open ring (no repeat)

Degenerate shapes (non-positive sides, fewer than 3 vertices) are valid
value objects; their area is zero so that a half-entered shape never breaks
the floor total.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class PlanarPoint(BaseModel):
    """2-D coordinate in meters (Value Object).

    Accepts either ``{"x": ..., "y": ...}`` or an ``(x, y)`` pair on input.
    """

    x: float
    y: float

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def coerce_pair(cls, data: Any) -> Any:
        if isinstance(data, (tuple, list)) and len(data) == 2:
            return {"x": data[0], "y": data[1]}
        return data


class RectangleShape(BaseModel):
    """Axis-aligned rectangle implicitly anchored at the origin."""

    kind: Literal["rect"] = "rect"
    name: str = ""
    width: float = 0.0
    height: float = 0.0
    is_void: bool = False  # Subtracted from the floor total when True

    model_config = ConfigDict(frozen=True)


class PolygonShape(BaseModel):
    """Simple (non-self-intersecting) polygon given as an open vertex ring."""

    kind: Literal["polygon"] = "polygon"
    name: str = ""
    points: tuple[PlanarPoint, ...] = ()
    is_void: bool = False

    model_config = ConfigDict(frozen=True)


Shape = Annotated[Union[RectangleShape, PolygonShape], Field(discriminator="kind")]


class Floor(BaseModel):
    """Ordered collection of shapes sharing one net area (Value Object).

    Shapes do not interact geometrically: overlaps are neither detected nor
    resolved, the net area is an arithmetic sum.
    """

    name: str = ""
    shapes: tuple[Shape, ...] = ()

    model_config = ConfigDict(frozen=True)
