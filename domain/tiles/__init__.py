"""Tiles Bounded Context.

Responsible for addressing Web Mercator slippy-map tiles:
- Value Objects: TileAddress
- Services: lon_lat_to_tile, tile_for_point, tile_to_lon_lat, tile_bounds
"""
