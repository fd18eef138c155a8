"""Functions game scripts call to stitch tilemaps into an overworld and cover tiles.

Every function takes an optional ``state`` keyword. Without it the process-wide
``get_state()`` instance is used.
"""
from __future__ import annotations

from enum import Enum
from typing import Callable, Optional, Union

import pygame

from tileutil.core import config
from tileutil.core.tilemap import Location, TilemapData
from tileutil.core.tileset import TileSet
from tileutil.overworld import cloning
from tileutil.overworld.state import TileUtilState, get_state

ConnectionRef = Union[int, str]


class TilemapProperty(Enum):
    COLUMNS = "columns"
    ROWS = "rows"
    PIXEL_WIDTH = "pixel_width"
    PIXEL_HEIGHT = "pixel_height"
    TILE_WIDTH = "tile_width"


def tilemap_property(data: TilemapData, prop: TilemapProperty) -> int:
    if prop == TilemapProperty.COLUMNS:
        return data.width
    if prop == TilemapProperty.ROWS:
        return data.height
    if prop == TilemapProperty.PIXEL_WIDTH:
        return data.width << data.scale
    if prop == TilemapProperty.PIXEL_HEIGHT:
        return data.height << data.scale
    if prop == TilemapProperty.TILE_WIDTH:
        return 1 << data.scale
    raise ValueError(f"Unknown tilemap property: {prop}")


def connection_kind(kind: ConnectionRef, *, state: Optional[TileUtilState] = None) -> int:
    """Numeric id for a connection name such as "Door1"; ints pass through."""
    state = state or get_state()
    return state.connection_kinds.resolve(kind)


# Connections --------------------------------------------------------------
def connect_maps(
    map_a: TilemapData,
    map_b: TilemapData,
    connection: ConnectionRef,
    *,
    state: Optional[TileUtilState] = None,
) -> None:
    """Connect two tilemaps both ways by a connection name or number.

    Names get ids from 1000 up, so a raw number at or above that can alias a name.
    """
    state = state or get_state()
    state.connect_maps(map_a, map_b, state.connection_kinds.resolve(connection))


def get_connected_map(
    tilemap: Optional[TilemapData],
    connection: ConnectionRef,
    *,
    state: Optional[TileUtilState] = None,
) -> Optional[TilemapData]:
    state = state or get_state()
    return state.get_connected_map(tilemap, state.connection_kinds.resolve(connection))


def load_connected_map(connection: ConnectionRef, *, state: Optional[TileUtilState] = None) -> None:
    """Load the tilemap connected to the current one, if there is one."""
    state = state or get_state()
    state.load_connected_map(state.connection_kinds.resolve(connection))


# Creation -----------------------------------------------------------------
def create_small_map(
    tileset: TileSet,
    columns: int = config.SMALL_MAP_COLUMNS,
    rows: int = config.SMALL_MAP_ROWS,
) -> TilemapData:
    """Empty tilemap with 8x8 tiles, sized for a single overworld screen."""
    return TilemapData.create(columns, rows, tileset, config.SMALL_MAP_TILE_SCALE)


def clone_map(tilemap: TilemapData) -> TilemapData:
    """Clone an existing tilemap. Connections and covers are not copied."""
    return cloning.clone_map(tilemap)


def current_tilemap(*, state: Optional[TileUtilState] = None) -> Optional[TilemapData]:
    state = state or get_state()
    return state.game.current_tilemap()


def on_map_loaded(callback: Callable[[TilemapData], None], *, state: Optional[TileUtilState] = None) -> None:
    state = state or get_state()
    state.on_map_loaded(callback)


def on_map_unloaded(callback: Callable[[TilemapData], None], *, state: Optional[TileUtilState] = None) -> None:
    state = state or get_state()
    state.on_map_unloaded(callback)


# Covers -------------------------------------------------------------------
def cover_tile(location: Location, cover: pygame.Surface, *, state: Optional[TileUtilState] = None) -> None:
    state = state or get_state()
    state.cover_tile(location.column, location.row, cover)


def cover_all_tiles(
    tile_kind: pygame.Surface,
    cover: pygame.Surface,
    *,
    state: Optional[TileUtilState] = None,
) -> None:
    """Cover every tile of a kind with another image until the tilemap changes."""
    state = state or get_state()
    state.cover_all_tiles(tile_kind, cover)


# Tiles --------------------------------------------------------------------
def replace_all_tiles(
    from_image: pygame.Surface,
    to_image: pygame.Surface,
    *,
    state: Optional[TileUtilState] = None,
) -> None:
    state = state or get_state()
    game = state.game
    for location in game.get_tiles_by_type(from_image):
        game.set_tile_at(location, to_image)
