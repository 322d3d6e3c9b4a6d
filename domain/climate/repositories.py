"""Domain Port(s) for the station catalog.

Defines interfaces (Protocols) that infrastructure adapters must implement.
No concrete I/O here.
"""

from __future__ import annotations

from typing import Protocol

from .value_objects import StationCatalog


class StationCatalogRepository(Protocol):
    """Port for obtaining the station catalog from its provider.

    The catalog must be complete before any nearest-station query;
    partial or streaming loads are not supported.
    """

    def load_catalog(self) -> StationCatalog:
        """Return the full, immutable station catalog."""
        ...
