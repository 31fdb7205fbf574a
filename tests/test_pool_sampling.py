"""
Tests for rarity-gated pool sampling.

COMMON titles never consume a draw. Every UNCOMMON / RARE title consumes
exactly one draw, in catalogue order, included or not.
"""

import random

import pytest

from domain.models.title import TitleDefinition, TitleRarity
from domain.models.title_catalogue import DEFAULT_CATALOGUE, TitleCatalogue
from domain.services.pool_sampling_service import PoolSampler
from tests.conftest import FixedRng, SequenceRng, always_include, never_include


def _definition(title: str, rarity: TitleRarity) -> TitleDefinition:
    return TitleDefinition(
        title=title,
        rarity=rarity,
        score=lambda s: 0.0,
        min_score=0,
        stat_line=lambda s: "",
    )


@pytest.fixture
def sampler():
    return PoolSampler(uncommon_chance=0.60, rare_chance=0.25)


@pytest.fixture
def mixed_catalogue():
    return TitleCatalogue(
        [
            _definition("c1", TitleRarity.COMMON),
            _definition("u1", TitleRarity.UNCOMMON),
            _definition("r1", TitleRarity.RARE),
            _definition("c2", TitleRarity.COMMON),
            _definition("u2", TitleRarity.UNCOMMON),
            _definition("r2", TitleRarity.RARE),
        ]
    )


def _titles(pool):
    return [d.title for d in pool]


class TestRarityGating:
    """Inclusion outcomes for extreme random sources."""

    def test_draw_of_one_keeps_only_common(self, sampler):
        pool = sampler.sample(DEFAULT_CATALOGUE, never_include())
        assert pool == DEFAULT_CATALOGUE.by_rarity(TitleRarity.COMMON)

    def test_draw_of_zero_includes_everything(self, sampler):
        pool = sampler.sample(DEFAULT_CATALOGUE, always_include())
        assert pool == list(DEFAULT_CATALOGUE)

    def test_threshold_is_strictly_less_than(self, sampler, mixed_catalogue):
        """A draw equal to the chance is excluded; just under is included."""
        rng = SequenceRng([0.60, 0.25, 0.5999, 0.2499])
        pool = sampler.sample(mixed_catalogue, rng)
        assert _titles(pool) == ["c1", "c2", "u2", "r2"]

    def test_uncommon_and_rare_use_their_own_chances(self, sampler, mixed_catalogue):
        """0.4 passes the 60% uncommon gate but not the 25% rare gate."""
        pool = sampler.sample(mixed_catalogue, FixedRng(0.4))
        assert _titles(pool) == ["c1", "u1", "c2", "u2"]


class TestDrawAccounting:
    """Draw counts and order."""

    def test_one_draw_per_non_common_title(self, sampler, mixed_catalogue):
        rng = FixedRng(0.99)
        sampler.sample(mixed_catalogue, rng)
        assert rng.draws == 4

    def test_common_only_catalogue_draws_nothing(self, sampler):
        rng = FixedRng(0.0)
        catalogue = TitleCatalogue([_definition("c", TitleRarity.COMMON)])
        assert _titles(sampler.sample(catalogue, rng)) == ["c"]
        assert rng.draws == 0

    def test_draws_follow_catalogue_order(self, sampler, mixed_catalogue):
        """Draws map to u1, r1, u2, r2 in that order."""
        rng = SequenceRng([0.9, 0.1, 0.1, 0.9])
        pool = sampler.sample(mixed_catalogue, rng)
        assert _titles(pool) == ["c1", "r1", "c2", "u2"]

    def test_pool_keeps_catalogue_order(self, sampler):
        pool = sampler.sample(DEFAULT_CATALOGUE, random.Random(7))
        positions = [DEFAULT_CATALOGUE.titles.index(d.title) for d in pool]
        assert positions == sorted(positions)

    def test_empty_catalogue_gives_empty_pool(self, sampler):
        assert sampler.sample(TitleCatalogue([]), always_include()) == []


class TestDeterminism:
    """Seeded sources reproduce pools."""

    @pytest.mark.parametrize("seed", [0, 1, 42, 1234, 99999])
    def test_same_seed_same_pool(self, sampler, seed):
        first = sampler.sample(DEFAULT_CATALOGUE, random.Random(seed))
        second = sampler.sample(DEFAULT_CATALOGUE, random.Random(seed))
        assert first == second

    def test_inclusion_rates_track_chances(self, sampler):
        """Over many seeds, inclusion frequency lands near each rarity's chance."""
        rng = random.Random(2024)
        uncommon = DEFAULT_CATALOGUE.by_rarity(TitleRarity.UNCOMMON)[0]
        rare = DEFAULT_CATALOGUE.by_rarity(TitleRarity.RARE)[0]
        trials = 4000
        uncommon_hits = rare_hits = 0
        for _ in range(trials):
            pool = sampler.sample(DEFAULT_CATALOGUE, rng)
            uncommon_hits += uncommon in pool
            rare_hits += rare in pool
        assert uncommon_hits / trials == pytest.approx(0.60, abs=0.05)
        assert rare_hits / trials == pytest.approx(0.25, abs=0.05)


class TestConfiguration:
    """Constructor validation."""

    @pytest.mark.parametrize(
        "kwargs", [{"uncommon_chance": -0.1}, {"uncommon_chance": 1.1}, {"rare_chance": 2.0}]
    )
    def test_out_of_range_chance_rejected(self, kwargs):
        with pytest.raises(ValueError):
            PoolSampler(**kwargs)

    def test_inclusion_chance_by_rarity(self, sampler):
        assert sampler.inclusion_chance(TitleRarity.COMMON) == 1.0
        assert sampler.inclusion_chance(TitleRarity.UNCOMMON) == 0.60
        assert sampler.inclusion_chance(TitleRarity.RARE) == 0.25
