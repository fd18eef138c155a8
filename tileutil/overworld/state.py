from __future__ import annotations

import logging
from typing import Callable, Optional

import pygame

from tileutil.core.engine import Game, get_game
from tileutil.core.events import TileMapEvent
from tileutil.core.tilemap import TilemapData
from tileutil.overworld.connections import ConnectionRegistry
from tileutil.overworld.cover import TileOverlayStore
from tileutil.overworld.naming import ConnectionKinds

log = logging.getLogger("tileutil.state")


class TileUtilState:
    """Connections and covers for one game, kept in step with its map loads.

    Covers are dropped on every unload, before any user unload callback runs.
    Connections describe the world and are never dropped on map changes.
    """

    def __init__(self, game: Game) -> None:
        self.game = game
        self.connections = ConnectionRegistry()
        self.covers = TileOverlayStore()
        self.connection_kinds = ConnectionKinds()
        game.tile_map_events.subscribe(TileMapEvent.UNLOADED, self._on_tilemap_unloaded, first=True)

    def _on_tilemap_unloaded(self, tilemap: TilemapData) -> None:
        self.covers.clear()

    def _active_tilemap(self) -> Optional[TilemapData]:
        tile_map = self.game.tile_map
        if tile_map is None or not tile_map.enabled:
            return None
        return tile_map.data

    # Connections ----------------------------------------------------------
    def connect_maps(self, map_a: TilemapData, map_b: TilemapData, connection_id: int) -> None:
        self.connections.connect(map_a, map_b, connection_id)

    def get_connected_map(self, tilemap: Optional[TilemapData], connection_id: int) -> Optional[TilemapData]:
        return self.connections.get(tilemap, connection_id)

    def load_connected_map(self, connection_id: int) -> None:
        next_map = self.connections.get(self.game.current_tilemap(), connection_id)
        if next_map is None:
            return
        log.debug("Following connection %s to %r", connection_id, next_map)
        self.game.set_tile_map_level(next_map)

    # Covers ---------------------------------------------------------------
    def cover_tile(self, column: int, row: int, image: pygame.Surface) -> None:
        tilemap = self._active_tilemap()
        if tilemap is None:
            return
        self.covers.cover(tilemap, column, row, image)

    def cover_all_tiles(self, tile_kind: pygame.Surface, cover: pygame.Surface) -> None:
        tilemap = self._active_tilemap()
        if tilemap is None:
            return
        for location in self.game.get_tiles_by_type(tile_kind):
            self.covers.cover(tilemap, location.column, location.row, cover)

    def cover_at(self, column: int, row: int) -> Optional[pygame.Surface]:
        return self.covers.cover_at(self._active_tilemap(), column, row)

    def tile_image_at(self, column: int, row: int) -> Optional[pygame.Surface]:
        """Image the renderer should draw for a cell: the cover if any, else the tile."""
        tilemap = self._active_tilemap()
        if tilemap is None:
            return None
        cover = self.covers.cover_at(tilemap, column, row)
        if cover is not None:
            return cover
        return tilemap.tile_image(column, row)

    # Events ---------------------------------------------------------------
    def on_map_loaded(self, callback: Callable[[TilemapData], None]) -> None:
        self.game.add_event_listener(TileMapEvent.LOADED, callback)

    def on_map_unloaded(self, callback: Callable[[TilemapData], None]) -> None:
        self.game.add_event_listener(TileMapEvent.UNLOADED, callback)


_STATE: Optional[TileUtilState] = None


def get_state() -> TileUtilState:
    global _STATE
    if _STATE is None:
        _STATE = TileUtilState(get_game())
    return _STATE
