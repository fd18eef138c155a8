import gc

import pygame

from tileutil.core.tilemap import TilemapData
from tileutil.core.tileset import TileSet
from tileutil.overworld.connections import ConnectionRegistry
from tileutil.overworld.naming import ConnectionKinds


def _build_map():
    return TilemapData.create(4, 4, TileSet([pygame.Surface((16, 16))]))


def test_connections_are_symmetric():
    registry = ConnectionRegistry()
    town, forest = _build_map(), _build_map()
    registry.connect(town, forest, 3)
    assert registry.get(town, 3) is forest
    assert registry.get(forest, 3) is town
    assert len(registry) == 2


def test_unconnected_lookup_returns_none():
    registry = ConnectionRegistry()
    town = _build_map()
    assert registry.get(town, 1) is None
    registry.connect(town, _build_map(), 1)
    assert registry.get(town, 2) is None
    assert registry.get(None, 1) is None


def test_identical_content_maps_do_not_share_connections():
    registry = ConnectionRegistry()
    town, lookalike, forest = _build_map(), _build_map(), _build_map()
    registry.connect(town, forest, 1)
    assert registry.get(lookalike, 1) is None


def test_reconnecting_overwrites_source_and_keeps_stale_back_edge():
    registry = ConnectionRegistry()
    a, b, c = _build_map(), _build_map(), _build_map()
    registry.connect(a, b, 1)
    registry.connect(a, c, 1)

    assert registry.get(a, 1) is c
    assert registry.get(c, 1) is a
    # The old partner still points back; only the rewritten source moved.
    assert registry.get(b, 1) is a


def test_connections_are_per_id():
    registry = ConnectionRegistry()
    hub, north, south = _build_map(), _build_map(), _build_map()
    registry.connect(hub, north, 1)
    registry.connect(hub, south, 2)
    assert registry.connections_of(hub) == {1: north, 2: south}
    assert registry.connections_of(north) == {1: hub}


def test_connections_of_returns_a_copy():
    registry = ConnectionRegistry()
    a, b = _build_map(), _build_map()
    registry.connect(a, b, 1)
    registry.connections_of(a).clear()
    assert registry.get(a, 1) is b


def test_connection_kinds_are_interned_and_stable():
    kinds = ConnectionKinds()
    door = kinds.resolve("Door1")
    tunnel = kinds.resolve("Tunnel1")
    assert door == 1000
    assert tunnel == 1001
    assert kinds.resolve("Door1") == door
    assert kinds.name_of(tunnel) == "Tunnel1"
    assert kinds.name_of(99) is None
    assert "Door1" in kinds
    assert len(kinds) == 2
    assert kinds.items() == [("Door1", 1000), ("Tunnel1", 1001)]


def test_connection_kinds_pass_integers_through():
    kinds = ConnectionKinds(first_id=50)
    assert kinds.resolve(7) == 7
    assert len(kinds) == 0
    assert kinds.resolve("Cave") == 50


def test_registry_keeps_connected_maps_alive():
    registry = ConnectionRegistry()
    town = _build_map()
    registry.connect(town, _build_map(), 1)
    gc.collect()
    assert registry.get(town, 1) is not None
    assert registry.get(registry.get(town, 1), 1) is town
