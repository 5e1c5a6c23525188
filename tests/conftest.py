from __future__ import annotations

import pytest

from levelgen.biomes import Biome


@pytest.fixture
def forest() -> Biome:
    return Biome("Forest")


@pytest.fixture
def desert() -> Biome:
    return Biome("Desert")


@pytest.fixture
def swamp() -> Biome:
    return Biome("Swamp")
