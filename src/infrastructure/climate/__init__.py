"""Infrastructure adapters for the climate bounded context.

Adapter exported for simplified imports.
"""

from .station_catalog_adapter import MappingStationCatalogAdapter

__all__ = ["MappingStationCatalogAdapter"]
