from __future__ import annotations

# =============================================================================
# BIOME TYPES
# =============================================================================

# Human readable biome identifier. Compared case-insensitively.
type BiomeName = str  # Example: "Forest"

# Room dimension measured in tiles
type RoomSize = int  # Example: 4 = a 4x4 tile room

# Inclusive (min, max) room size bounds for a biome. Not validated, so the
# first element may exceed the second.
type RoomSizeRange = tuple[RoomSize, RoomSize]  # Example: (4, 8)
