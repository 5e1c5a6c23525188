"""Tests for the affinity mask helpers consumed by room layout solvers."""

from __future__ import annotations

import logging

import numpy as np
import pytest

from levelgen.biomes import (
    Affinity,
    AffinityValue,
    Biome,
    InvalidArgumentError,
    biome_index,
    build_affinity_masks,
    negative_pairs,
)


def test_biome_index_follows_sequence_order(
    forest: Biome, desert: Biome, swamp: Biome
) -> None:
    index = biome_index([swamp, forest, desert])
    assert index == {swamp: 0, forest: 1, desert: 2}


def test_biome_index_rejects_case_duplicates(forest: Biome) -> None:
    with pytest.raises(InvalidArgumentError) as exc_info:
        biome_index([forest, Biome("FOREST")])
    assert exc_info.value.param_name == "biomes"


def test_empty_graph_gives_empty_masks() -> None:
    masks = build_affinity_masks([])
    assert set(masks) == set(AffinityValue)
    assert all(mask.shape == (0, 0) for mask in masks.values())


def test_masks_are_directed(forest: Biome, desert: Biome, swamp: Biome) -> None:
    forest.affinities.add(Affinity(forest, desert, AffinityValue.NEGATIVE))
    desert.affinities.add(Affinity(desert, swamp, AffinityValue.POSITIVE))
    swamp.affinities.add(Affinity(swamp, forest))

    masks = build_affinity_masks([forest, desert, swamp])

    assert masks[AffinityValue.NEGATIVE].tolist() == [
        [False, True, False],
        [False, False, False],
        [False, False, False],
    ]
    assert masks[AffinityValue.POSITIVE].tolist() == [
        [False, False, False],
        [False, False, True],
        [False, False, False],
    ]
    assert masks[AffinityValue.NEUTRAL].tolist() == [
        [False, False, False],
        [False, False, False],
        [True, False, False],
    ]


def test_masks_have_bool_dtype(forest: Biome, desert: Biome) -> None:
    masks = build_affinity_masks([forest, desert])
    assert all(mask.dtype == np.bool_ for mask in masks.values())


def test_conflicting_values_are_kept(forest: Biome, desert: Biome) -> None:
    forest.affinities.add(Affinity(forest, desert, AffinityValue.POSITIVE))
    forest.affinities.add(Affinity(forest, desert, AffinityValue.NEGATIVE))

    masks = build_affinity_masks([forest, desert])

    assert masks[AffinityValue.POSITIVE][0, 1]
    assert masks[AffinityValue.NEGATIVE][0, 1]


def test_unmapped_target_is_skipped(
    forest: Biome, desert: Biome, caplog: pytest.LogCaptureFixture
) -> None:
    forest.affinities.add(Affinity(forest, desert, AffinityValue.NEGATIVE))

    with caplog.at_level(logging.WARNING, logger="levelgen.biomes.affinity_map"):
        masks = build_affinity_masks([forest])

    assert not masks[AffinityValue.NEGATIVE].any()
    assert "target biome is not mapped" in caplog.text


def test_foreign_affinity_is_skipped(
    forest: Biome, desert: Biome, swamp: Biome, caplog: pytest.LogCaptureFixture
) -> None:
    forest.affinities.add(Affinity(desert, swamp, AffinityValue.NEGATIVE))

    with caplog.at_level(logging.WARNING, logger="levelgen.biomes.affinity_map"):
        masks = build_affinity_masks([forest, desert, swamp])

    np.testing.assert_array_equal(
        masks[AffinityValue.NEGATIVE], np.zeros((3, 3), dtype=bool)
    )
    assert "held by Forest" in caplog.text


def test_mask_values_index_by_affinity_value(forest: Biome, desert: Biome) -> None:
    forest.affinities.add(Affinity(forest, desert, AffinityValue.NEGATIVE))
    stacked = np.stack(
        [mask for _, mask in sorted(build_affinity_masks([forest, desert]).items())]
    )
    assert stacked[AffinityValue.NEGATIVE, 0, 1]
    assert not stacked[AffinityValue.POSITIVE, 0, 1]


def test_negative_pairs(forest: Biome, desert: Biome, swamp: Biome) -> None:
    swamp.affinities.add(Affinity(swamp, forest, AffinityValue.NEGATIVE))
    forest.affinities.add(Affinity(forest, desert, AffinityValue.NEGATIVE))
    forest.affinities.add(Affinity(forest, swamp, AffinityValue.POSITIVE))

    pairs = negative_pairs([forest, desert, swamp])

    assert pairs == [(forest, desert), (swamp, forest)]
    assert all(isinstance(left, Biome) for left, _ in pairs)
