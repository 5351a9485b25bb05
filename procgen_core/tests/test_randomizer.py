"""Distribution helper tests for the Random facade."""
from __future__ import annotations

import re
import statistics

import pytest

from procgen_core.engines import Xorshift32, Xorshift128Plus
from procgen_core.noise import NoiseConfig
from procgen_core.randomizer import Random
from procgen_core.vector import FrozenVector3, Vector2

UUID_PATTERN = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$")


def test_uuid_is_version_four_shaped_and_reproducible():
    first = Random(Xorshift32(7))
    second = Random(Xorshift32(7))
    identifiers = [first.uuid() for _ in range(50)]
    assert all(UUID_PATTERN.match(identifier) for identifier in identifiers)
    assert identifiers == [second.uuid() for _ in range(50)]


def test_chance_and_sign():
    random = Random(Xorshift32(11))
    assert not any(random.chance(0) for _ in range(200))
    assert all(random.chance(2) for _ in range(200))
    assert {random.sign() for _ in range(200)} == {1, -1}


def test_choice_picks_members():
    random = Random(Xorshift128Plus(5, 6))
    items = ["stone", "dirt", "air"]
    picks = {random.choice(items) for _ in range(300)}
    assert picks == set(items)
    with pytest.raises(ValueError):
        random.choice([])


def test_shuffled_clone_is_a_permutation():
    random = Random(Xorshift32(21))
    original = list(range(20))
    shuffled = random.shuffled_clone(original)
    assert original == list(range(20))
    assert sorted(shuffled) == original
    assert shuffled != original
    assert random.shuffled_clone([9]) == [9]


def test_sample_takes_distinct_members():
    random = Random(Xorshift32(3))
    population = set(range(10))
    picked = random.sample(population, 4)
    assert len(picked) == 4
    assert len(set(picked)) == 4
    assert set(picked) <= population
    assert random.sample(population, 0) == []
    with pytest.raises(ValueError):
        random.sample(population, 11)
    with pytest.raises(ValueError):
        random.sample(population, -1)


def test_box_muller_is_roughly_standard_normal():
    random = Random(Xorshift128Plus(101, 202))
    samples = [random.box_muller() for _ in range(4000)]
    assert statistics.fmean(samples) == pytest.approx(0.0, abs=0.1)
    assert statistics.pstdev(samples) == pytest.approx(1.0, abs=0.1)
    shifted = [random.box_muller(mean=10.0, deviation=0.5) for _ in range(500)]
    assert statistics.fmean(shifted) == pytest.approx(10.0, abs=0.2)


def test_random_rotations_stay_in_their_ranges():
    random = Random(Xorshift32(8))
    for _ in range(300):
        dual = random.rotation2()
        triple = random.rotation3()
        assert -180.0 <= dual.yaw <= 180.0
        assert -90.0 <= dual.pitch <= 90.0
        assert -180.0 <= triple.roll <= 180.0
        assert -90.0 <= triple.pitch <= 90.0


def test_weighted_choice_follows_weights():
    random = Random(Xorshift128Plus(1, 2))
    counts = {"a": 0, "b": 0}
    for _ in range(4000):
        counts[random.weighted_choice({"a": 1, "b": 3})] += 1
    assert 2.5 < counts["b"] / counts["a"] < 3.6


@pytest.mark.parametrize("weights", [{"a": 0}, {"a": 1.5}, {"a": -2}, {"a": True}, {}])
def test_weighted_choice_rejects_bad_weights(weights):
    with pytest.raises(ValueError):
        Random(Xorshift32(1)).weighted_choice(weights)


def test_choice_index_by_weight_skips_to_heavy_slot():
    random = Random(Xorshift32(4))
    picks = {random.choice_index_by_weight([1, 1000, 1]) for _ in range(50)}
    assert 1 in picks


def test_noise_is_seeded_from_the_engine():
    first = Random(Xorshift32(3))
    second = Random(Xorshift32(3))
    point = FrozenVector3(1.3, 2.7, -0.4)
    config = NoiseConfig(amplitude=2.0, frequency=0.4)
    assert first.noise3(point, config) == second.noise3(point, config)
    assert first.noise2(Vector2(1.3, 2.7)) == first.noise_generator.noise2(Vector2(1.3, 2.7))
    assert first.noise1(0.75) == second.noise1(0.75)
