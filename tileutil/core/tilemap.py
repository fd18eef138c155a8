from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Set, Tuple

from tileutil.core import config
from tileutil.core.tileset import TileSet


class TilemapError(ValueError):
    """Raised when tilemap content has an invalid shape/value."""


@dataclass(frozen=True)
class Location:
    column: int
    row: int


def _copy_grid(grid):
    return [list(row) for row in grid]


class TilemapData:
    """Grid of tile indices plus a parallel wall bitmap, a tileset and a scale.

    Two maps with identical contents are still different maps: identity is the
    object itself, which is why no ``__eq__`` is defined here.
    """

    def __init__(
        self,
        width: int,
        height: int,
        tileset: TileSet,
        scale: int = config.DEFAULT_TILE_SCALE,
        tiles: Optional[List[List[int]]] = None,
        walls: Optional[List[List[bool]]] = None,
    ) -> None:
        if width <= 0 or height <= 0:
            raise TilemapError(f"Tilemap dimensions must be greater than zero (got {width}x{height}).")
        if not 0 <= scale <= config.MAX_TILE_SCALE:
            raise TilemapError(f"Tile scale must be between 0 and {config.MAX_TILE_SCALE} (got {scale}).")
        self.width = width
        self.height = height
        self.scale = scale
        self.tileset = tileset
        self.tiles: List[List[int]] = self._checked_grid(tiles, 0, "tiles")
        self.walls: List[List[bool]] = self._checked_grid(walls, False, "walls")
        self._tile_locations: Dict[int, Set[Tuple[int, int]]] = {}
        for y, row in enumerate(self.tiles):
            for x, index in enumerate(row):
                self._tile_locations.setdefault(index, set()).add((x, y))

    # Construction helpers -------------------------------------------------
    @classmethod
    def create(
        cls,
        columns: int,
        rows: int,
        tileset: TileSet,
        scale: int = config.DEFAULT_TILE_SCALE,
    ) -> "TilemapData":
        return cls(columns, rows, tileset, scale)

    def _checked_grid(self, grid, fill, label: str):
        if grid is None:
            return [[fill for _ in range(self.width)] for _ in range(self.height)]
        if len(grid) != self.height or any(len(row) != self.width for row in grid):
            raise TilemapError(f"Tilemap {label} must be {self.width}x{self.height}.")
        return _copy_grid(grid)

    # Cells ----------------------------------------------------------------
    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_tileset(self) -> TileSet:
        return self.tileset

    def get_tile(self, x: int, y: int) -> Optional[int]:
        if not self.in_bounds(x, y):
            return None
        return self.tiles[y][x]

    def set_tile(self, x: int, y: int, index: int) -> None:
        if not self.in_bounds(x, y):
            return
        previous = self.tiles[y][x]
        if previous == index:
            return
        cells = self._tile_locations.get(previous)
        if cells is not None:
            cells.discard((x, y))
            if not cells:
                del self._tile_locations[previous]
        self._tile_locations.setdefault(index, set()).add((x, y))
        self.tiles[y][x] = index

    def is_wall(self, x: int, y: int) -> bool:
        if not self.in_bounds(x, y):
            return False
        return self.walls[y][x]

    def set_wall(self, x: int, y: int, on: bool) -> None:
        if not self.in_bounds(x, y):
            return
        self.walls[y][x] = bool(on)

    def tile_image(self, x: int, y: int):
        index = self.get_tile(x, y)
        if index is None:
            return None
        return self.tileset.get_image(index)

    def locations_of(self, index: int) -> List[Location]:
        """Cells holding tile ``index`` in row-major order, read from the tile index."""
        cells = self._tile_locations.get(index, ())
        return [Location(x, y) for (x, y) in sorted(cells, key=lambda cell: (cell[1], cell[0]))]

    def __repr__(self) -> str:
        return f"<TilemapData {self.width}x{self.height} scale={self.scale} at {id(self):#x}>"
