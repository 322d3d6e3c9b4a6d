"""Tiles Bounded Context - Value Objects."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

MAX_ZOOM = 30


class TileAddress(BaseModel):
    """Slippy-map tile index ``(zoom, x, y)`` (Value Object).

    Invariants:
        0 <= zoom <= MAX_ZOOM
        0 <= x < 2**zoom and 0 <= y < 2**zoom
    """

    zoom: int = Field(ge=0, le=MAX_ZOOM)
    x: int = Field(ge=0)
    y: int = Field(ge=0)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_index_range(self) -> "TileAddress":
        n = 2**self.zoom
        if self.x >= n or self.y >= n:
            raise ValueError(
                f"Tile ({self.x}, {self.y}) outside {n}x{n} grid at zoom {self.zoom}"
            )
        return self

    def as_path(self) -> str:
        """Render as the conventional ``z/x/y`` path segment."""
        return f"{self.zoom}/{self.x}/{self.y}"
