"""Directed affinity relationships between biomes.

An Affinity states how the biome on its left side feels about being placed
next to the biome on its right side. Affinities are plain immutable values:
two affinities with the same left, right and value are interchangeable, which
is what lets a biome's affinity set deduplicate them.

The relationship is directional. ``Affinity(a, b)`` says nothing about
``Affinity(b, a)``, and no inverse entry is created or checked. Interpreting
the values (NEGATIVE as a hard exclusion, POSITIVE as a preference) is left
to the level solver that consumes them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING

from .errors import IdenticalBiomesError, InvalidArgumentError, MissingArgumentError

if TYPE_CHECKING:
    from .biome import Biome

logger = logging.getLogger(__name__)


class AffinityValue(IntEnum):
    """Strength of an affinity between two biomes."""

    # Biomes can be paired anytime
    NEUTRAL = 0
    # Biomes prefer to be connected
    POSITIVE = 1
    # Biomes cannot be connected in any way
    NEGATIVE = 2


@dataclass(frozen=True, slots=True)
class Affinity:
    """Relationship between two distinct biomes.

    Attributes:
        left: Biome on the giving end of the relationship.
        right: Biome on the receiving end of the relationship.
        value: Level of affinity between the two biomes.

    Raises:
        MissingArgumentError: If ``left`` or ``right`` is None.
        IdenticalBiomesError: If ``left`` equals ``right``, including two
            distinct Biome objects whose names differ only by case.
        InvalidArgumentError: If ``value`` is not an AffinityValue code.
    """

    left: Biome
    right: Biome
    value: AffinityValue = AffinityValue.NEUTRAL

    def __post_init__(self) -> None:
        if self.left is None:
            raise MissingArgumentError("left")
        if self.right is None:
            raise MissingArgumentError("right")
        if self.left == self.right:
            raise IdenticalBiomesError("right")
        # Accept raw ints so values read back from numpy masks round-trip.
        try:
            value = AffinityValue(self.value)
        except ValueError as err:
            raise InvalidArgumentError(
                f"{self.value!r} is not a valid AffinityValue", "value"
            ) from err
        object.__setattr__(self, "value", value)

        logger.debug(
            f"Affinity created: {self.left.name} -> {self.right.name} "
            f"({self.value.name})"
        )
