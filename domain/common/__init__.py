"""Shared geographic value objects used by several bounded contexts."""

from domain.common.value_objects import BoundingBox, GeoPoint

__all__ = ["BoundingBox", "GeoPoint"]
