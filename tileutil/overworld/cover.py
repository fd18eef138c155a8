from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import pygame

from tileutil.core.tilemap import TilemapData

log = logging.getLogger("tileutil.cover")


@dataclass(frozen=True)
class CoverEntry:
    column: int
    row: int
    image: pygame.Surface


class TileOverlayStore:
    """Per-cell cover images for the one tilemap they were placed on."""

    def __init__(self) -> None:
        self.owner: Optional[TilemapData] = None
        self._covers: Dict[Tuple[int, int], pygame.Surface] = {}

    def cover(self, tilemap: TilemapData, column: int, row: int, image: pygame.Surface) -> None:
        if self.owner is not tilemap:
            self.clear()
            self.owner = tilemap
        self._covers[(column, row)] = image

    def cover_at(self, tilemap: Optional[TilemapData], column: int, row: int) -> Optional[pygame.Surface]:
        if tilemap is None or tilemap is not self.owner:
            return None
        return self._covers.get((column, row))

    def entries(self) -> List[CoverEntry]:
        return [CoverEntry(column, row, image) for (column, row), image in self._covers.items()]

    def clear(self) -> None:
        if self._covers:
            log.debug("Clearing %d cover(s) from %r", len(self._covers), self.owner)
        self._covers.clear()
        self.owner = None

    def __len__(self) -> int:
        return len(self._covers)
