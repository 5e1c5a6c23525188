"""Constants shared across the level generator."""


class GeneratorConstants:
    """Constants shared across the level generator."""

    # Default edge length of a tile, in tiles per room side. Used to seed
    # both room size bounds of a freshly created biome.
    DEFAULT_TILE_SIZE = 4
