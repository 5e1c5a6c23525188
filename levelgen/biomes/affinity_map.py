"""Array views of a biome affinity graph for constraint solvers.

A solver that places rooms wants fast "may biome i sit next to biome j"
lookups rather than walking affinity sets. This module precomputes one
boolean mask per AffinityValue, indexed by the position of each biome in
the sequence it was given:

    masks = build_affinity_masks([forest, desert, swamp])
    masks[AffinityValue.NEGATIVE][0, 1]  # forest holds NEGATIVE toward desert

The masks are a faithful copy of the affinity sets. Directed edges stay
directed, and conflicting values for the same pair light up more than one
mask. Deciding what a conflict means is the solver's job.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

from .affinity import AffinityValue
from .biome import Biome
from .errors import InvalidArgumentError

logger = logging.getLogger(__name__)


def biome_index(biomes: Sequence[Biome]) -> dict[Biome, int]:
    """Map each biome to its position in ``biomes``.

    Raises:
        InvalidArgumentError: If two entries are equal biomes.
    """
    index: dict[Biome, int] = {}
    for i, biome in enumerate(biomes):
        if biome in index:
            raise InvalidArgumentError(
                f"Duplicate biome '{biome.name}' at positions {index[biome]} and {i}",
                "biomes",
            )
        index[biome] = i
    return index


def build_affinity_masks(
    biomes: Sequence[Biome],
) -> dict[AffinityValue, np.ndarray]:
    """Build one (n, n) boolean adjacency mask per affinity value.

    Cell ``[i, j]`` of ``masks[value]`` is True when ``biomes[i]`` holds an
    affinity toward ``biomes[j]`` with that value. Affinities pointing at a
    biome outside ``biomes``, or held by a biome other than their left side,
    are logged and skipped.

    Args:
        biomes: Biomes to map. Order defines the mask indices.

    Returns:
        A dict with an entry for every AffinityValue.
    """
    index = biome_index(biomes)
    n = len(biomes)
    masks = {value: np.zeros((n, n), dtype=bool) for value in AffinityValue}

    for i, owner in enumerate(biomes):
        for affinity in owner.affinities:
            if affinity.left != owner:
                logger.warning(
                    f"Skipping affinity {affinity.left.name} -> "
                    f"{affinity.right.name} held by {owner.name}"
                )
                continue
            j = index.get(affinity.right)
            if j is None:
                logger.warning(
                    f"Skipping affinity {owner.name} -> {affinity.right.name}: "
                    "target biome is not mapped"
                )
                continue
            masks[affinity.value][i, j] = True

    return masks


def negative_pairs(biomes: Sequence[Biome]) -> list[tuple[Biome, Biome]]:
    """Return every (left, right) pair joined by a NEGATIVE affinity.

    Only filters by value. Whether NEGATIVE forbids adjacency is up to the
    solver. Pairs come back in index order of ``biomes``.
    """
    negative = build_affinity_masks(biomes)[AffinityValue.NEGATIVE]
    return [(biomes[i], biomes[j]) for i, j in np.argwhere(negative)]
