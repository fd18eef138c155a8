# config.py

# Tile scale is log2 of the tile edge in pixels (4 -> 16x16 tiles)
DEFAULT_TILE_SCALE = 4
MAX_TILE_SCALE = 8

# "Small" overworld maps use 8x8 tiles
SMALL_MAP_TILE_SCALE = 3
SMALL_MAP_COLUMNS = 20
SMALL_MAP_ROWS = 15

# Connection kinds created from names are numbered from here, above the
# small raw ids scripts tend to pass directly
FIRST_CONNECTION_KIND_ID = 1000

# Cloning maps above this many cells logs a memory warning
CLONE_WARNING_CELLS = 64 * 64
