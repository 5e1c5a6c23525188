"""The Biome model: a named terrain category used as a level generation vertex.

Biomes are identified by name, compared without regard to case. Each biome
owns the set of affinities for which it is the left side; the biomes on the
right side of those affinities are only referenced, never owned.

Biome instances are not thread-safe. Callers must serialize access to a
given biome's affinity set.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from levelgen.constants.generator import GeneratorConstants
from levelgen.types import BiomeName, RoomSize, RoomSizeRange

from .errors import InvalidArgumentError, MissingArgumentError

if TYPE_CHECKING:
    from .affinity import Affinity

logger = logging.getLogger(__name__)


def _collation_key(name: BiomeName) -> tuple[str, str]:
    """Sort key approximating a culture-aware string ordering.

    Names are ordered case-insensitively first. Names that differ only by
    case are then ordered lowercase before uppercase, so ordering can tell
    apart names that equality treats as the same biome.
    """
    return (name.casefold(), name.swapcase())


class Biome:
    """A named terrain category with room size bounds.

    Attributes:
        name: Unique identifier, compared case-insensitively. Mutable, but
            renaming a biome that sits in a set or dict key corrupts that
            container; remove it first and reinsert it after the rename.
        max_room_size: Maximum room size when using this biome.
        min_room_size: Minimum room size when using this biome. Not checked
            against ``max_room_size``.
        affinities: Outgoing relationships held by this biome. Callers add
            and remove entries directly. Entries are deduplicated only by
            full (left, right, value) equality.
    """

    def __init__(self, name: BiomeName) -> None:
        """Create a biome with default room sizes and no affinities.

        Args:
            name: Name of the biome. Checked as given, without trimming.

        Raises:
            MissingArgumentError: If ``name`` is None.
            InvalidArgumentError: If ``name`` is empty.
        """
        if name is None:
            raise MissingArgumentError("name")
        if not name:
            raise InvalidArgumentError("Value cannot be empty", "name")

        self.name: BiomeName = name
        self.max_room_size: RoomSize = GeneratorConstants.DEFAULT_TILE_SIZE
        self.min_room_size: RoomSize = GeneratorConstants.DEFAULT_TILE_SIZE
        self.affinities: set[Affinity] = set()

        logger.debug(f"Biome created: {name}")

    def __repr__(self) -> str:
        return (
            f"Biome(name={self.name!r}, min_room_size={self.min_room_size}, "
            f"max_room_size={self.max_room_size})"
        )

    # --- Equality ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Biome):
            return NotImplemented
        return self.name.casefold() == other.name.casefold()

    def __hash__(self) -> int:
        # Must agree with __eq__, so hash the case-folded name.
        return hash(self.name.casefold())

    # --- Comparison ---

    def compare_to(self, other: Biome | None) -> int:
        """Compare names for sorting.

        Returns:
            A negative number if this biome sorts first, zero if the names
            are identical, a positive number if this biome sorts last.
            Every biome sorts after None.
        """
        if other is None:
            return 1
        mine = _collation_key(self.name)
        theirs = _collation_key(other.name)
        return (mine > theirs) - (mine < theirs)

    def __lt__(self, other: Biome) -> bool:
        if not isinstance(other, Biome):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: Biome) -> bool:
        if not isinstance(other, Biome):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: Biome) -> bool:
        if not isinstance(other, Biome):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: Biome) -> bool:
        if not isinstance(other, Biome):
            return NotImplemented
        return self.compare_to(other) >= 0

    # --- Queries ---

    @property
    def room_size_range(self) -> RoomSizeRange:
        """The (min_room_size, max_room_size) pair, as currently set."""
        return (self.min_room_size, self.max_room_size)

    def affinities_toward(self, other: Biome) -> set[Affinity]:
        """Return every held affinity whose right side is ``other``.

        More than one entry comes back when affinities with different values
        were added for the same pair. No entry is preferred over another.
        """
        return {affinity for affinity in self.affinities if affinity.right == other}
