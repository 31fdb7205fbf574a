"""
Title domain models: definitions, rarity, bids and results.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from domain.models.performance_profile import PerformanceProfile

ScoreFn = Callable[[PerformanceProfile], float]
StatLineFn = Callable[[PerformanceProfile], str]


class TitleRarity(Enum):
    """
    How likely a title is to enter the candidate pool of one evaluation.

    Rarity controls inclusion only. Once a title is in the pool it competes on
    equal footing with every other pooled title.
    """

    COMMON = "common"  # always pooled
    UNCOMMON = "uncommon"
    RARE = "rare"


@dataclass(frozen=True)
class TitleDefinition:
    """
    Declarative description of a single title.

    Attributes:
        title: Display string shown for the player
        rarity: Controls how often the title enters the pool
        score: Pure transform of a profile where higher means more deserving
        min_score: Best score must reach this for the title to be awarded
        stat_line: Formats the stat that explains the award, e.g. "5 win streak"
    """

    title: str
    rarity: TitleRarity
    score: ScoreFn
    min_score: float
    stat_line: StatLineFn


@dataclass(frozen=True)
class TitleResult:
    """An awarded title and the stat line explaining it."""

    title: str
    stat_line: str


@dataclass(frozen=True)
class Bid:
    """A player's claim on a title, produced during one assignment pass."""

    player_id: str
    definition: TitleDefinition
    score: float


@dataclass(frozen=True)
class PlayerEntry:
    """A lobby member and their profile (None when no profile could be built)."""

    player_id: str
    profile: PerformanceProfile | None = None
