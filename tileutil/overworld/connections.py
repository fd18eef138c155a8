from __future__ import annotations

import logging
from typing import Dict, Optional

from tileutil.core.tilemap import TilemapData

log = logging.getLogger("tileutil.connections")


class ConnectionRegistry:
    """Directed edges ``(source, connection_id) -> target``, always written in pairs.

    Edges live here rather than on the map objects and are keyed by map identity.
    Both ends are held strongly, so every connected map (clones included) stays
    in memory for as long as this registry does.
    """

    def __init__(self) -> None:
        self._edges: Dict[TilemapData, Dict[int, TilemapData]] = {}

    def connect(self, map_a: TilemapData, map_b: TilemapData, connection_id: int) -> None:
        # Last writer wins per (source, id). An old partner keeps its edge back.
        self._edges.setdefault(map_a, {})[connection_id] = map_b
        self._edges.setdefault(map_b, {})[connection_id] = map_a
        log.debug("Connected %r <-> %r by %s", map_a, map_b, connection_id)

    def get(self, tilemap: Optional[TilemapData], connection_id: int) -> Optional[TilemapData]:
        if tilemap is None:
            return None
        edges = self._edges.get(tilemap)
        if not edges:
            return None
        return edges.get(connection_id)

    def connections_of(self, tilemap: TilemapData) -> Dict[int, TilemapData]:
        return dict(self._edges.get(tilemap, {}))

    def __len__(self) -> int:
        return sum(len(edges) for edges in self._edges.values())
