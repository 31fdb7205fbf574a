"""
Pytest fixtures for tests.

Shared stubs and builders live here so individual test modules only set the
stats they care about. Import constants and helpers from tests.conftest.
"""

import random

import pytest

from domain.models.match_record import MatchRecord
from domain.models.performance_profile import PerformanceProfile
from domain.models.title import PlayerEntry


# =============================================================================
# RANDOM SOURCE STUBS
# =============================================================================


class FixedRng:
    """Returns the same value for every draw and counts how many were taken."""

    def __init__(self, value: float):
        self.value = value
        self.draws = 0

    def random(self) -> float:
        self.draws += 1
        return self.value


class SequenceRng:
    """Returns the given values in order, then raises if exhausted."""

    def __init__(self, values):
        self._values = list(values)
        self.draws = 0

    def random(self) -> float:
        value = self._values[self.draws]
        self.draws += 1
        return value


def always_include() -> FixedRng:
    """Every UNCOMMON and RARE title enters the pool."""
    return FixedRng(0.0)


def never_include() -> FixedRng:
    """No UNCOMMON or RARE title passes the inclusion check."""
    return FixedRng(1.0)


# =============================================================================
# BUILDERS
# =============================================================================


def entries(*items) -> list[PlayerEntry]:
    """Build lobby entries from (player_id, profile) pairs."""
    return [PlayerEntry(player_id, profile) for player_id, profile in items]


def game(win: bool = True, **stats) -> MatchRecord:
    """Build a MatchRecord with zeroed stats unless given."""
    return MatchRecord(win=win, **stats)


def random_profile(rng: random.Random) -> PerformanceProfile:
    """A plausible random profile; values are coarse so exact ties do happen."""
    win_streak = rng.choice([0, 0, 1, 2, 3, 4, 6])
    loss_streak = 0 if win_streak else rng.choice([0, 1, 2, 3, 5])
    return PerformanceProfile(
        win_streak=win_streak,
        loss_streak=loss_streak,
        avg_damage=rng.choice([0, 8_000, 15_000, 25_000, 40_000]),
        avg_healing=rng.choice([0, 2_000, 6_000, 12_000]),
        avg_damage_taken=rng.choice([0, 10_000, 20_000, 35_000]),
        avg_self_mitigated=rng.choice([0, 5_000, 15_000, 30_000]),
        avg_kills=rng.choice([0, 2, 5, 8, 12]),
        avg_deaths=rng.choice([0, 3, 6, 10, 14]),
        avg_assists=rng.choice([0, 4, 8, 15]),
        avg_cc_time=rng.choice([0, 8, 20, 45]),
        avg_vision_score=rng.choice([5, 12, 25, 40]),
        avg_wards_placed=rng.choice([0, 3, 8, 15]),
        avg_cs=rng.choice([20, 90, 150, 220]),
        surrender_rate=rng.choice([0.0, 0.05, 0.3, 0.6]),
        games_counted=20,
    )


# Five players, each dominant in exactly one stat and zero in the rest,
# paired with the title their dominant stat should earn.
ARCHETYPES: list[tuple[str, PerformanceProfile, str]] = [
    ("streaker", PerformanceProfile(win_streak=6), "Who Wants a Piece of the Champ"),
    ("carry", PerformanceProfile(avg_damage=50_000), "Tons of Damage"),
    ("healer", PerformanceProfile(avg_healing=10_000), "All For You"),
    ("tank", PerformanceProfile(avg_self_mitigated=30_000), "Unkillable Demon King"),
    ("feeder", PerformanceProfile(avg_deaths=14), "Grey Screen Enjoyer"),
]


@pytest.fixture
def archetype_entries() -> list[PlayerEntry]:
    return [PlayerEntry(player_id, profile) for player_id, profile, _ in ARCHETYPES]


@pytest.fixture
def sample_history() -> list[MatchRecord | None]:
    """Newest-first: three wins, an unresolvable game, then two losses."""
    return [
        game(True, damage_dealt=30_000, kills=10, deaths=2, assists=5),
        game(True, damage_dealt=25_000, kills=7, deaths=4, assists=9),
        game(True, damage_dealt=20_000, kills=5, deaths=5, assists=6, surrendered=True),
        None,
        game(False, damage_dealt=10_000, kills=1, deaths=9, assists=2, surrendered=True),
        game(False, damage_dealt=12_000, kills=2, deaths=8, assists=3),
    ]
