from __future__ import annotations

import logging
from typing import Callable, List, Optional

import pygame

from tileutil.core.events import EventBus, TileMapEvent
from tileutil.core.tilemap import Location, TilemapData

log = logging.getLogger("tileutil.engine")


class TileMap:
    """The tilemap slot of a scene: which map is active and whether it is enabled."""

    def __init__(self, data: TilemapData) -> None:
        self.data = data
        self.enabled = True


class Scene:
    """A scene optionally holding an active tile map."""

    def __init__(self) -> None:
        self.tile_map: Optional[TileMap] = None

    def on_enter(self, game: "Game") -> None:
        return

    def on_exit(self, game: "Game") -> None:
        return


class Game:
    """Stack-based scene manager that owns the tilemap event bus."""

    def __init__(self, *, initial_scene: Optional[Scene] = None) -> None:
        self._stack: List[Scene] = []
        self._running = True
        self.tile_map_events = EventBus()
        self.push(initial_scene or Scene())

    @property
    def current_scene(self) -> Optional[Scene]:
        return self._stack[-1] if self._stack else None

    @property
    def stack_size(self) -> int:
        return len(self._stack)

    @property
    def is_running(self) -> bool:
        return self._running and bool(self._stack)

    def push(self, scene: Scene) -> None:
        current = self.current_scene
        if current is not None:
            current.on_exit(self)
        self._stack.append(scene)
        scene.on_enter(self)

    def pop(self) -> Optional[Scene]:
        if not self._stack:
            self._running = False
            return None
        exiting = self._stack.pop()
        if exiting.tile_map is not None:
            self.tile_map_events.emit(TileMapEvent.UNLOADED, exiting.tile_map.data)
        exiting.on_exit(self)
        current = self.current_scene
        if current is not None:
            current.on_enter(self)
        else:
            self._running = False
        return exiting

    # Tilemap access -------------------------------------------------------
    @property
    def tile_map(self) -> Optional[TileMap]:
        scene = self.current_scene
        return scene.tile_map if scene is not None else None

    def current_tilemap(self) -> Optional[TilemapData]:
        tile_map = self.tile_map
        return tile_map.data if tile_map is not None else None

    def set_tile_map_level(self, data: TilemapData) -> None:
        scene = self.current_scene
        if scene is None:
            log.debug("No scene to load %r into", data)
            return
        if scene.tile_map is not None:
            self.tile_map_events.emit(TileMapEvent.UNLOADED, scene.tile_map.data)
        scene.tile_map = TileMap(data)
        log.debug("Loaded tilemap %r", data)
        self.tile_map_events.emit(TileMapEvent.LOADED, data)

    def get_tiles_by_type(self, image: pygame.Surface) -> List[Location]:
        data = self.current_tilemap()
        if data is None:
            return []
        index = data.get_tileset().index_of(image)
        if index is None:
            return []
        return data.locations_of(index)

    def set_tile_at(self, location: Location, image: pygame.Surface) -> None:
        data = self.current_tilemap()
        if data is None:
            return
        index = data.get_tileset().add_tile(image)
        data.set_tile(location.column, location.row, index)

    def add_event_listener(self, event: TileMapEvent, fn: Callable[[TilemapData], None]) -> None:
        self.tile_map_events.subscribe(event, fn)


_GAME: Optional[Game] = None


def get_game() -> Game:
    global _GAME
    if _GAME is None:
        _GAME = Game()
    return _GAME
