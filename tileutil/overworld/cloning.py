from __future__ import annotations

import logging

from tileutil.core import config
from tileutil.core.tilemap import TilemapData

log = logging.getLogger("tileutil.cloning")


def clone_map(tilemap: TilemapData) -> TilemapData:
    """Copy tiles, walls, tileset and scale into a brand new map.

    Connections and covers are keyed by map identity, so the clone starts with
    none of either. Large maps are expensive to copy; this is only logged.
    Connecting the clone keeps it alive for the life of the connection registry.
    """
    cells = tilemap.width * tilemap.height
    if cells > config.CLONE_WARNING_CELLS:
        log.warning("Cloning a %dx%d tilemap (%d cells) uses a lot of memory", tilemap.width, tilemap.height, cells)

    result = TilemapData.create(tilemap.width, tilemap.height, tilemap.get_tileset().copy(), tilemap.scale)
    for x in range(tilemap.width):
        for y in range(tilemap.height):
            result.set_tile(x, y, tilemap.get_tile(x, y))
            result.set_wall(x, y, tilemap.is_wall(x, y))
    return result
