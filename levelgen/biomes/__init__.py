"""Biome and affinity model for level generation.

- Biome: Named terrain category with room size bounds and outgoing affinities
- Affinity: Immutable, directed relationship between two distinct biomes
- AffinityValue: NEUTRAL, POSITIVE or NEGATIVE strength of an affinity

And array helpers for solvers that consume the affinity graph:
- build_affinity_masks: One boolean adjacency mask per AffinityValue
- negative_pairs: Biome pairs joined by a NEGATIVE affinity
"""

from .affinity import Affinity, AffinityValue
from .affinity_map import biome_index, build_affinity_masks, negative_pairs
from .biome import Biome
from .errors import IdenticalBiomesError, InvalidArgumentError, MissingArgumentError

__all__ = [
    "Affinity",
    "AffinityValue",
    "Biome",
    "IdenticalBiomesError",
    "InvalidArgumentError",
    "MissingArgumentError",
    "biome_index",
    "build_affinity_masks",
    "negative_pairs",
]
